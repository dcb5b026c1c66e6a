"""Built-in field validator implementations.

Every validator here is field-aware: it is built once per field from the
metadata item that configured it and holds no per-call state.
"""

from abc import abstractmethod
from collections.abc import Sized
import re
from typing import Any, ClassVar

from ..engine.engine import current_engine
from ..engine.interface import AnnotatedFieldValidator


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return isinstance(value, Sized) and len(value) == 0


class RequiredValidator(AnnotatedFieldValidator):
    """Reports missing, blank or empty values."""

    def perform(self, target: Any, errors: list[str]) -> None:
        if _is_blank(self.value_of(target)):
            errors.append(f"{self.label} is required")


class StringValidator(AnnotatedFieldValidator):
    """Validates presence and length of string values."""

    def perform(self, target: Any, errors: list[str]) -> None:
        value = self.value_of(target)

        if value is None or value == "":
            if self.metadata.required:
                errors.append(f"{self.label} is required")
            return

        if not isinstance(value, str):
            errors.append(f"{self.label} must be a string")
            return

        min_length = self.metadata.min_length
        max_length = self.metadata.max_length

        if min_length > 0 and len(value) < min_length:
            errors.append(f"{self.label} must be at least {min_length} characters")
        if max_length >= 0 and len(value) > max_length:
            errors.append(f"{self.label} is limited to {max_length} characters")


class RegexValidator(AnnotatedFieldValidator):
    """Validates that the whole value matches a regular expression."""

    def __init__(self, field: Any, metadata: Any):
        super().__init__(field, metadata)
        self.pattern = re.compile(metadata.pattern)

    def perform(self, target: Any, errors: list[str]) -> None:
        value = self.value_of(target)

        if value is None or value == "":
            if not self.metadata.nullable:
                errors.append(f"{self.label} is required")
            return

        if not self.pattern.fullmatch(str(value)):
            errors.append(
                self.metadata.message
                or f"{self.label} does not match the regular expression pattern: "
                f"{self.metadata.pattern}"
            )


class EmailValidator(AnnotatedFieldValidator):
    """Validates email address format."""

    EMAIL_PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
    )

    def perform(self, target: Any, errors: list[str]) -> None:
        value = self.value_of(target)

        if value is None or value == "":
            if self.metadata.required:
                errors.append(f"{self.label} is required")
            return

        if not isinstance(value, str) or not self.EMAIL_PATTERN.match(value):
            errors.append(f"{self.label} is not a valid email address")


class _RangeValidator(AnnotatedFieldValidator):
    type_name: ClassVar[str]

    @abstractmethod
    def accepts(self, value: Any) -> bool:
        """Check the value has the numeric type this validator handles."""
        pass

    def perform(self, target: Any, errors: list[str]) -> None:
        value = self.value_of(target)

        if value is None:
            if self.metadata.required:
                errors.append(f"{self.label} is required")
            return

        if not self.accepts(value):
            errors.append(f"{self.label} must be {self.type_name}")
            return

        if self.metadata.min is not None and value < self.metadata.min:
            errors.append(
                f"{self.label} must be greater than or equal to {self.metadata.min}"
            )
        if self.metadata.max is not None and value > self.metadata.max:
            errors.append(
                f"{self.label} must be less than or equal to {self.metadata.max}"
            )


class IntegerValidator(_RangeValidator):
    type_name = "an integer"

    def accepts(self, value: Any) -> bool:
        return isinstance(value, int) and not isinstance(value, bool)


class FloatValidator(_RangeValidator):
    type_name = "a number"

    def accepts(self, value: Any) -> bool:
        return isinstance(value, (int, float)) and not isinstance(value, bool)


class ChoiceValidator(AnnotatedFieldValidator):
    """Validates membership in a fixed set of choices."""

    def __init__(self, field: Any, metadata: Any):
        super().__init__(field, metadata)
        self.choices = tuple(metadata.choices)
        if metadata.ignore_case:
            self._folded = {str(c).casefold() for c in self.choices}

    def perform(self, target: Any, errors: list[str]) -> None:
        value = self.value_of(target)

        if value is None or value == "":
            if not self.metadata.nullable:
                errors.append(f"{self.label} is required")
            return

        if self.metadata.ignore_case:
            valid = str(value).casefold() in self._folded
        else:
            valid = value in self.choices

        if not valid:
            errors.append(
                f"{self.label} must be one of: {', '.join(map(str, self.choices))}"
            )


class ChildValidator(AnnotatedFieldValidator):
    """Validates the object, or each object of a collection, held by the field.

    Children are validated by the engine running the current traversal, so
    objects already visited in this call tree are skipped.
    """

    SCALARS: ClassVar[tuple[type, ...]] = (str, bytes, int, float, bool)

    def perform(self, target: Any, errors: list[str]) -> None:
        value = self.value_of(target)

        if value is None:
            return

        if isinstance(value, dict):
            children = list(value.values())
        elif isinstance(value, (list, tuple, set, frozenset)):
            children = list(value)
        else:
            children = [value]

        engine = current_engine()
        for child in children:
            if child is None or isinstance(child, self.SCALARS):
                continue
            errors.extend(engine.validate(child))
