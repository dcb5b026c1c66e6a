"""Exceptions raised by the validation engine.

Two categories are kept apart: ``ValidationException`` carries findings
(data about the validated object), while ``EngineError`` and its
subclasses signal defects in how metadata, registry and objects are wired.
"""

from collections.abc import Iterable


class SyntaxeError(Exception):
    """Base exception for all engine errors.

    Allows callers to catch every engine issue with a single except clause.
    """

    def __init__(self, message: str, cause: Exception | None = None):
        """Initialize the error.

        Args:
            message: Human-readable error description
            cause: Optional underlying exception that caused this error
        """
        super().__init__(message)
        self.cause = cause


class ValidationException(SyntaxeError):
    """Aggregate of validation findings.

    Raised by ``validate_and_throw`` when findings exist, and raised by
    validators or self-validating objects to report findings that the
    engine folds into its result.
    """

    def __init__(self, errors: Iterable[str] | str):
        """Initialize with one or more finding messages.

        Args:
            errors: A single message or an iterable of messages
        """
        self.errors: list[str] = [errors] if isinstance(errors, str) else list(errors)
        super().__init__("; ".join(self.errors))


class EngineError(SyntaxeError):
    """Error in the wiring between metadata, registry and validated objects."""

    pass


class ResolutionError(EngineError):
    """Error turning metadata into validator or encoder instances.

    Raised when:
    - A metadata item names a kind that is not registered
    - A registered factory fails to build an instance
    - A kind is registered twice in the same registry
    """

    pass


class EncodingError(EngineError):
    """Error rewriting a field during the encode pass.

    Raised when:
    - An encoder is attached to a field that does not hold a string
    - The field cannot be read or written
    - An encoder fails
    """

    pass
