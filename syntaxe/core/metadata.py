"""Declarative metadata markers and their resolution.

A metadata item is any object placed in ``Annotated[T, item]``. Whether an
item names a validator or an encoder is decided by its type:

- a class decorated with ``@validation_provider(kind)`` (or
  ``@encoding_provider(kind)``) names the registered implementation ``kind``;
- a ``FieldValidation(kind)`` (or ``FieldEncoding(kind)``) item names it
  inline;
- anything else names nothing.

Classes opt into a whole-object validator with ``@object_validation(kind)``.
"""

from dataclasses import dataclass
from typing import Any, Callable, TypeVar, Union

T = TypeVar("T", bound=type)

VALIDATION_PROVIDER_ATTR = "__syntaxe_validation_provider__"
ENCODING_PROVIDER_ATTR = "__syntaxe_encoding_provider__"
OBJECT_VALIDATION_ATTR = "__syntaxe_object_validation__"


@dataclass(frozen=True)
class ExplicitProvider:
    """The item's type declares its implementation."""

    kind: str


@dataclass(frozen=True)
class InlineReference:
    """The item itself references an implementation."""

    kind: str


@dataclass(frozen=True)
class NoImplementation:
    """The item is unrelated to validation or encoding."""


Resolution = Union[ExplicitProvider, InlineReference, NoImplementation]

NO_IMPLEMENTATION = NoImplementation()


@dataclass(frozen=True)
class FieldValidation:
    """Attach the registered validator ``kind`` to a field."""

    kind: str


@dataclass(frozen=True)
class FieldEncoding:
    """Attach the registered encoder ``kind`` to a field."""

    kind: str


def _marker(attr: str, kind: str) -> Callable[[T], T]:
    def decorate(cls: T) -> T:
        setattr(cls, attr, kind)
        return cls

    return decorate


def validation_provider(kind: str) -> Callable[[T], T]:
    """Declare that items of the decorated metadata class are validated by ``kind``."""
    return _marker(VALIDATION_PROVIDER_ATTR, kind)


def encoding_provider(kind: str) -> Callable[[T], T]:
    """Declare that items of the decorated metadata class are encoded by ``kind``."""
    return _marker(ENCODING_PROVIDER_ATTR, kind)


def object_validation(kind: str) -> Callable[[T], T]:
    """Attach the registered whole-object validator ``kind`` to a class.

    A class carries at most one object validator; decorating the same class
    twice raises ``TypeError``. Subclasses inherit the marker.
    """

    def decorate(cls: T) -> T:
        if OBJECT_VALIDATION_ATTR in vars(cls):
            raise TypeError(
                f"{cls.__qualname__} already declares object validation "
                f"'{vars(cls)[OBJECT_VALIDATION_ATTR]}'"
            )
        setattr(cls, OBJECT_VALIDATION_ATTR, kind)
        return cls

    return decorate


def resolve_validation(item: Any) -> Resolution:
    """Decide which validator, if any, a metadata item names."""
    kind = getattr(type(item), VALIDATION_PROVIDER_ATTR, None)
    if kind is not None:
        return ExplicitProvider(kind)
    if isinstance(item, FieldValidation):
        return InlineReference(item.kind)
    return NO_IMPLEMENTATION


def resolve_encoding(item: Any) -> Resolution:
    """Decide which encoder, if any, a metadata item names."""
    kind = getattr(type(item), ENCODING_PROVIDER_ATTR, None)
    if kind is not None:
        return ExplicitProvider(kind)
    if isinstance(item, FieldEncoding):
        return InlineReference(item.kind)
    return NO_IMPLEMENTATION


def object_validation_of(cls: type) -> str | None:
    """Return the object validator kind declared on ``cls``, if any."""
    return getattr(cls, OBJECT_VALIDATION_ATTR, None)
