"""Metadata markers for the built-in validators and encoders.

Place them in ``typing.Annotated`` field annotations::

    @dataclass
    class Signup:
        handle: Annotated[str, Trim(), StringValidation(required=True, max_length=20)]
        email: Annotated[str, EmailValidation(required=True)]
"""

from dataclasses import dataclass, field
from typing import Any

from ..core.metadata import encoding_provider, validation_provider


@validation_provider("required")
@dataclass(frozen=True)
class Required:
    """The field must hold a non-blank value."""

    name: str | None = None


@validation_provider("string")
@dataclass(frozen=True)
class StringValidation:
    """String length constraints; ``max_length=-1`` means unbounded."""

    name: str | None = None
    required: bool = False
    min_length: int = 0
    max_length: int = -1


@validation_provider("regex")
@dataclass(frozen=True)
class RegexValidation:
    """The whole value must match ``pattern``."""

    pattern: str
    name: str | None = None
    nullable: bool = True
    message: str | None = None


@validation_provider("email")
@dataclass(frozen=True)
class EmailValidation:
    name: str | None = None
    required: bool = False


@validation_provider("integer")
@dataclass(frozen=True)
class IntegerValidation:
    """Inclusive integer bounds."""

    name: str | None = None
    required: bool = False
    min: int | None = None
    max: int | None = None


@validation_provider("float")
@dataclass(frozen=True)
class FloatValidation:
    """Inclusive numeric bounds; integers are accepted."""

    name: str | None = None
    required: bool = False
    min: float | None = None
    max: float | None = None


@validation_provider("choice")
@dataclass(frozen=True)
class ChoiceValidation:
    """The value must be one of ``choices``."""

    choices: tuple[Any, ...] = field(default=())
    name: str | None = None
    ignore_case: bool = False
    nullable: bool = True


@validation_provider("child")
@dataclass(frozen=True)
class ChildValidation:
    """Validate the nested object(s) held by the field."""


@encoding_provider("xss")
@dataclass(frozen=True)
class XssEncoding:
    """HTML-escape the field value."""


@encoding_provider("strip_tags")
@dataclass(frozen=True)
class StripTags:
    """Remove markup tags from the field value."""


@encoding_provider("trim")
@dataclass(frozen=True)
class Trim:
    """Strip surrounding whitespace from the field value."""
