"""Core functionality shared by the engine: configuration, logging, introspection and metadata."""

from .config import EngineSettings, get_settings
from .introspection import FieldDescriptor, all_fields, metadata_of
from .logging import (
    TraversalLogger,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)
from .metadata import (
    ExplicitProvider,
    FieldEncoding,
    FieldValidation,
    InlineReference,
    NoImplementation,
    Resolution,
    encoding_provider,
    object_validation,
    object_validation_of,
    resolve_encoding,
    resolve_validation,
    validation_provider,
)

__all__ = [
    # Configuration
    "EngineSettings",
    "get_settings",
    # Introspection
    "FieldDescriptor",
    "all_fields",
    "metadata_of",
    # Logging
    "TraversalLogger",
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
    # Metadata
    "ExplicitProvider",
    "FieldEncoding",
    "FieldValidation",
    "InlineReference",
    "NoImplementation",
    "Resolution",
    "encoding_provider",
    "object_validation",
    "object_validation_of",
    "resolve_encoding",
    "resolve_validation",
    "validation_provider",
]
