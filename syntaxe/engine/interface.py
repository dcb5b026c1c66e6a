"""Abstract contracts for validators, encoders and self-validating objects.

Validator and encoder instances are cached by the engine and shared by every
validation that touches the same field or class, possibly from several
threads at once. Implementations must therefore be stateless, or
thread-safe with respect to ``perform``/``encode``.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..core.introspection import FieldDescriptor


class Validator(ABC):
    """A unit of validation logic for a field or a whole object."""

    @abstractmethod
    def perform(self, target: Any, errors: list[str]) -> None:
        """Validate ``target``, appending finding messages to ``errors``.

        Args:
            target: Object being validated
            errors: Shared list of finding messages for the current call

        Raises:
            ValidationException: Alternative way to report findings
        """
        pass


class AnnotatedFieldValidator(Validator):
    """Validator built for one field and the metadata item that configured it.

    Registered with ``field_aware=True`` so the engine calls its factory with
    ``(field, metadata)``.
    """

    def __init__(self, field: FieldDescriptor, metadata: Any):
        self.field = field
        self.metadata = metadata

    @property
    def label(self) -> str:
        """Field name used in messages; a metadata ``name`` overrides it."""
        return getattr(self.metadata, "name", None) or self.field.name

    def value_of(self, target: Any) -> Any:
        """Read the validated field's value from ``target``."""
        return self.field.get(target)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.field.qualified_name})"


class Encoder(ABC):
    """Pure transformation of a string field value."""

    @abstractmethod
    def encode(self, value: str) -> str:
        """Return the encoded form of ``value``."""
        pass


class Validatable(ABC):
    """Object that validates itself.

    The engine calls ``validate()`` before running field validators; a
    ``ValidationException`` raised from it contributes its findings.

    Calling the engine on ``self`` from inside ``validate()`` is
    short-circuited by the visited-object check and returns no findings.
    """

    @abstractmethod
    def validate(self) -> None:
        """Raise ``ValidationException`` if the object is invalid."""
        pass
