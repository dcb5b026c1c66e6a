"""Memoized resolution of fields, validators and encoders.

Each resolver computes its answer for a key once and keeps it for the life
of the resolver. Entries are never invalidated: the metadata attached to a
class or field is assumed not to change at runtime. Two threads resolving
the same key for the first time may both compute it; the last write wins,
which is harmless because resolution has no side effects.
"""

from collections.abc import Callable
from typing import Any

from ..core.introspection import FieldDescriptor, all_fields
from ..core.logging import get_logger
from ..core.metadata import (
    ExplicitProvider,
    InlineReference,
    Resolution,
    object_validation_of,
    resolve_encoding,
    resolve_validation,
)
from .interface import Encoder, Validator
from .registry import ValidatorRegistry

logger = get_logger(__name__)

_MISSING = object()


class MetadataCache:
    """Caches the field list of each class."""

    def __init__(
        self, introspect: Callable[[type], tuple[FieldDescriptor, ...]] = all_fields
    ):
        self._introspect = introspect
        self._fields: dict[type, tuple[FieldDescriptor, ...]] = {}

    def fields_of(self, klass: type) -> tuple[FieldDescriptor, ...]:
        """Return every field of ``klass`` and its ancestors."""
        fields = self._fields.get(klass)

        if fields is None:
            fields = tuple(self._introspect(klass))
            self._fields[klass] = fields
            logger.debug(
                "Cached fields", owner=klass.__qualname__, field_count=len(fields)
            )

        return fields


def _implementation_kind(resolution: Resolution) -> str | None:
    if isinstance(resolution, (ExplicitProvider, InlineReference)):
        return resolution.kind
    return None


class ValidatorResolver:
    """Caches the validators attached to each field."""

    def __init__(self, registry: ValidatorRegistry):
        self._registry = registry
        self._validators: dict[FieldDescriptor, tuple[Validator, ...]] = {}

    def validators_for(self, field: FieldDescriptor) -> tuple[Validator, ...]:
        """Return the validators for ``field`` in metadata declaration order.

        Raises:
            ResolutionError: If a metadata item names an unknown kind or its
                validator cannot be built
        """
        validators = self._validators.get(field)

        if validators is None:
            validators = self._resolve(field)
            self._validators[field] = validators

        return validators

    def _resolve(self, field: FieldDescriptor) -> tuple[Validator, ...]:
        validators = []

        for item in field.metadata:
            kind = _implementation_kind(resolve_validation(item))
            if kind is not None:
                validators.append(self._registry.build_validator(kind, field, item))

        logger.debug(
            "Resolved validators",
            field=field.qualified_name,
            validators=[type(v).__name__ for v in validators],
        )
        return tuple(validators)


class EncoderResolver:
    """Caches the encoders attached to each field."""

    def __init__(self, registry: ValidatorRegistry):
        self._registry = registry
        self._encoders: dict[FieldDescriptor, tuple[Encoder, ...]] = {}

    def encoders_for(self, field: FieldDescriptor) -> tuple[Encoder, ...]:
        """Return the encoders for ``field`` in metadata declaration order.

        Raises:
            ResolutionError: If a metadata item names an unknown kind or its
                encoder cannot be built
        """
        encoders = self._encoders.get(field)

        if encoders is None:
            encoders = tuple(
                self._registry.build_encoder(kind)
                for kind in (
                    _implementation_kind(resolve_encoding(item))
                    for item in field.metadata
                )
                if kind is not None
            )
            self._encoders[field] = encoders
            if encoders:
                logger.debug(
                    "Resolved encoders",
                    field=field.qualified_name,
                    encoders=[type(e).__name__ for e in encoders],
                )

        return encoders


class ObjectValidatorResolver:
    """Caches the whole-object validator of each class."""

    def __init__(self, registry: ValidatorRegistry):
        self._registry = registry
        self._validators: dict[type, Any] = {}

    def object_validator_for(self, klass: type) -> Validator | None:
        """Return the object validator declared on ``klass``, or ``None``.

        Raises:
            ResolutionError: If the declared kind is unknown or cannot be built
        """
        validator = self._validators.get(klass, _MISSING)

        if validator is _MISSING:
            kind = object_validation_of(klass)
            validator = None if kind is None else self._registry.build_validator(kind)
            self._validators[klass] = validator
            logger.debug(
                "Resolved object validator", owner=klass.__qualname__, kind=kind
            )

        return validator
