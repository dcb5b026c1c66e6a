"""Resolution-and-traversal engine.

This package resolves field and class metadata into validator and encoder
instances, tracks visited objects during a traversal and orchestrates
validation of object graphs.
"""

from .engine import (
    ValidationEngine,
    current_engine,
    encode,
    get_engine,
    validate,
    validate_and_throw,
)
from .errors import (
    EncodingError,
    EngineError,
    ResolutionError,
    SyntaxeError,
    ValidationException,
)
from .interface import AnnotatedFieldValidator, Encoder, Validatable, Validator
from .registry import Registration, ValidatorRegistry
from .resolvers import (
    EncoderResolver,
    MetadataCache,
    ObjectValidatorResolver,
    ValidatorResolver,
)
from .tracker import Traversal, VisitedSetTracker

__all__ = [
    # Orchestration
    "ValidationEngine",
    "current_engine",
    "encode",
    "get_engine",
    "validate",
    "validate_and_throw",
    # Contracts
    "AnnotatedFieldValidator",
    "Encoder",
    "Validatable",
    "Validator",
    # Registry and resolution
    "EncoderResolver",
    "MetadataCache",
    "ObjectValidatorResolver",
    "Registration",
    "ValidatorRegistry",
    "ValidatorResolver",
    # Traversal
    "Traversal",
    "VisitedSetTracker",
    # Exceptions
    "EncodingError",
    "EngineError",
    "ResolutionError",
    "SyntaxeError",
    "ValidationException",
]
