"""Validation engine orchestrating encoding, self-validation and validators.

This module implements the ``ValidationEngine`` class that walks an object,
encodes its string fields, runs its self-validation hook, its field
validators and its object validator, and aggregates the findings.
"""

from typing import Any

from ..core.config import EngineSettings, get_settings
from ..core.introspection import FieldDescriptor
from ..core.logging import TraversalLogger, get_logger
from .errors import EncodingError, SyntaxeError, ValidationException
from .interface import Validatable
from .registry import ValidatorRegistry
from .resolvers import (
    EncoderResolver,
    MetadataCache,
    ObjectValidatorResolver,
    ValidatorResolver,
)
from .tracker import VisitedSetTracker

logger = get_logger(__name__)


class ValidationEngine:
    """Validates objects from the metadata attached to their fields and classes.

    Resolution results are cached for the life of the engine. Validation of
    an object graph visits every object once per top-level call, so cyclic
    and shared references terminate and report each object's findings once.
    """

    def __init__(
        self,
        registry: ValidatorRegistry,
        settings: EngineSettings | None = None,
        fields: MetadataCache | None = None,
    ):
        """Initialize the engine with a registry and configuration.

        Args:
            registry: Registry resolving metadata kinds to factories
            settings: Engine settings (default: process-wide settings)
            fields: Field cache (default: a new cache over ``all_fields``)
        """
        self.registry = registry
        self.settings = settings or get_settings()
        self.fields = fields or MetadataCache()
        self.validators = ValidatorResolver(registry)
        self.encoders = EncoderResolver(registry)
        self.object_validators = ObjectValidatorResolver(registry)
        self.tracker = VisitedSetTracker()

    def validate(self, target: Any) -> list[str]:
        """Validate ``target`` and return its finding messages.

        Also encodes the target's fields first. Never raises: a fault in
        encoding, resolution or a validator is reported as a single
        ``"Exception while validating: ..."`` finding.

        Note: if ``target`` is ``Validatable`` and its ``validate()`` calls
        the engine on the same object, that inner call returns no findings
        because the object is already being visited.

        Args:
            target: Object to validate

        Returns:
            List of finding messages, empty if the object is valid
        """
        errors: list[str] = []

        if self.tracker.visit(target, owner=self):
            return errors

        root = self.tracker.is_root(target)

        try:
            if root:
                with TraversalLogger(logger, target) as traversal_log:
                    self._run(target, errors)
                    traversal_log.error_count = len(errors)
            else:
                self._run(target, errors)
        finally:
            if root:
                self.tracker.clear()

        return errors

    def validate_and_throw(self, target: Any) -> None:
        """Validate ``target``, raising if any finding is reported.

        Raises:
            ValidationException: Carrying every finding message
        """
        errors = self.validate(target)

        if errors:
            raise ValidationException(errors)

    def encode(self, target: Any) -> None:
        """Rewrite ``target``'s string fields through their encoders.

        ``validate`` already encodes; call this to encode without validating.

        Raises:
            EncodingError: If an encoder is attached to a non-string value, or
                a field cannot be read, encoded or written
        """
        try:
            for field in self.fields.fields_of(type(target)):
                for encoder in self.encoders.encoders_for(field):
                    self._encode_field(target, field, encoder)
        except EncodingError:
            raise
        except Exception as e:
            raise EncodingError(
                f"Failed to encode {type(target).__qualname__}: {e}", cause=e
            ) from e

    def _encode_field(self, target: Any, field: FieldDescriptor, encoder: Any) -> None:
        value = field.get(target)

        if value is None:
            return

        if not isinstance(value, str):
            raise EncodingError(
                f"Cannot encode {field.qualified_name}: expected str, "
                f"got {type(value).__name__}"
            )

        field.set(target, encoder.encode(value))

    def _run(self, target: Any, errors: list[str]) -> None:
        try:
            self.encode(target)

            if isinstance(target, Validatable):
                try:
                    target.validate()
                except ValidationException as ve:
                    errors.extend(ve.errors)

            self._validate_fields(target, errors)
            self._validate_object(target, errors)
        except Exception as e:
            logger.warning(
                "Fault while validating",
                target_type=type(target).__qualname__,
                error=str(e),
                error_type=type(e).__name__,
                engine_fault=isinstance(e, SyntaxeError),
            )
            errors.append(f"{self.settings.fault_prefix}{e}")

    def _validate_fields(self, target: Any, errors: list[str]) -> None:
        for field in self.fields.fields_of(type(target)):
            for validator in self.validators.validators_for(field):
                try:
                    validator.perform(target, errors)
                except ValidationException as ve:
                    errors.extend(ve.errors)

    def _validate_object(self, target: Any, errors: list[str]) -> None:
        validator = self.object_validators.object_validator_for(type(target))

        if validator is None:
            return

        try:
            validator.perform(target, errors)
        except ValidationException as ve:
            errors.extend(ve.errors)


_default_engine: ValidationEngine | None = None


def get_engine() -> ValidationEngine:
    """Return the process-wide engine, creating it on first use.

    Its registry holds the built-in validators and encoders unless
    ``autoload_builtins`` is disabled.
    """
    global _default_engine

    if _default_engine is None:
        settings = get_settings()
        registry = ValidatorRegistry()
        if settings.autoload_builtins:
            from ..builtins import register_builtins

            register_builtins(registry)
        _default_engine = ValidationEngine(registry, settings)

    return _default_engine


def current_engine() -> ValidationEngine:
    """Return the engine running the active traversal, or the default engine."""
    traversal = VisitedSetTracker().current()

    if traversal is not None and isinstance(traversal.owner, ValidationEngine):
        return traversal.owner

    return get_engine()


def validate(target: Any) -> list[str]:
    """Validate ``target`` with the engine of the current traversal."""
    return current_engine().validate(target)


def validate_and_throw(target: Any) -> None:
    """Validate ``target``, raising ``ValidationException`` on findings."""
    current_engine().validate_and_throw(target)


def encode(target: Any) -> None:
    """Encode ``target``'s string fields with the engine of the current traversal."""
    current_engine().encode(target)
