"""Annotated models used across the test suite.

Only built-in kinds are used here so the models also work with the
process-wide default engine driven by the CLI.
"""

from dataclasses import dataclass, field
from typing import Annotated, ClassVar

from syntaxe import (
    ChildValidation,
    ChoiceValidation,
    EmailValidation,
    IntegerValidation,
    StringValidation,
    StripTags,
    Trim,
    XssEncoding,
)


@dataclass
class Account:
    name: Annotated[str, StringValidation(required=True, min_length=3, max_length=10)]
    email: Annotated[str | None, EmailValidation()] = None


@dataclass
class Comment:
    body: Annotated[str, StripTags(), StringValidation(max_length=5)]


@dataclass
class Post:
    title: Annotated[str, XssEncoding()]
    rating: Annotated[int, IntegerValidation(min=1, max=5)] = 3
    comments: Annotated[list[Comment], ChildValidation()] = field(default_factory=list)


@dataclass
class Plain:
    label: str = "nothing to check"
    count: int = 0


@dataclass
class Signup:
    registry: ClassVar[str] = "signups"

    handle: Annotated[
        str, Trim(), StringValidation(required=True, min_length=3, max_length=12)
    ]
    email: Annotated[str, EmailValidation(required=True)]
    plan: Annotated[str, ChoiceValidation(choices=("free", "pro"))] = "free"


def valid_signup() -> Signup:
    return Signup(handle="  ada  ", email="ada@example.com")


def invalid_signup() -> Signup:
    return Signup(handle="x", email="not-an-email", plan="gold")


def broken_factory() -> Signup:
    raise RuntimeError("factory exploded")
