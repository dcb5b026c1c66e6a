"""Registry of validator and encoder factories.

Metadata never references implementation classes directly; it names a
*kind*, and the registry maps each kind to a factory. Validator and encoder
packages register their kinds at startup::

    registry = ValidatorRegistry()

    @registry.validator("postcode", field_aware=True)
    class PostcodeValidator(AnnotatedFieldValidator):
        ...
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from ..core.introspection import FieldDescriptor
from ..core.logging import get_logger
from .errors import ResolutionError
from .interface import Encoder, Validator

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


@dataclass(frozen=True)
class Registration:
    """A registered factory.

    Field-aware factories are called with ``(field, metadata)``, all others
    with no arguments.
    """

    kind: str
    factory: Callable[..., Any]
    field_aware: bool = False


class ValidatorRegistry:
    """Maps validator and encoder kinds to the factories that build them."""

    def __init__(self) -> None:
        self._validators: dict[str, Registration] = {}
        self._encoders: dict[str, Registration] = {}

    # Registration

    def register_validator(
        self,
        kind: str,
        factory: Callable[..., Validator],
        *,
        field_aware: bool = False,
        replace: bool = False,
    ) -> None:
        """Register a validator factory under ``kind``.

        Args:
            kind: Name referenced by metadata
            factory: Callable returning a ``Validator``
            field_aware: Call the factory with ``(field, metadata)``
            replace: Allow overriding an existing registration

        Raises:
            ResolutionError: If ``kind`` is already registered and not replaced
        """
        self._add(self._validators, Registration(kind, factory, field_aware), replace)

    def register_encoder(
        self, kind: str, factory: Callable[[], Encoder], *, replace: bool = False
    ) -> None:
        """Register an encoder factory under ``kind``.

        Raises:
            ResolutionError: If ``kind`` is already registered and not replaced
        """
        self._add(self._encoders, Registration(kind, factory), replace)

    def validator(
        self, kind: str, *, field_aware: bool = False, replace: bool = False
    ) -> Callable[[F], F]:
        """Decorator form of ``register_validator``."""

        def decorate(factory: F) -> F:
            self.register_validator(
                kind, factory, field_aware=field_aware, replace=replace
            )
            return factory

        return decorate

    def encoder(self, kind: str, *, replace: bool = False) -> Callable[[F], F]:
        """Decorator form of ``register_encoder``."""

        def decorate(factory: F) -> F:
            self.register_encoder(kind, factory, replace=replace)
            return factory

        return decorate

    def _add(
        self, table: dict[str, Registration], registration: Registration, replace: bool
    ) -> None:
        if registration.kind in table and not replace:
            raise ResolutionError(f"Kind '{registration.kind}' is already registered")
        table[registration.kind] = registration
        logger.debug(
            "Registered factory",
            kind=registration.kind,
            field_aware=registration.field_aware,
        )

    # Lookup

    def validator_kinds(self) -> list[str]:
        """Registered validator kinds, sorted."""
        return sorted(self._validators)

    def encoder_kinds(self) -> list[str]:
        """Registered encoder kinds, sorted."""
        return sorted(self._encoders)

    def validator_registration(self, kind: str) -> Registration:
        """Return the registration for validator ``kind``.

        Raises:
            ResolutionError: If no validator is registered under ``kind``
        """
        try:
            return self._validators[kind]
        except KeyError:
            raise ResolutionError(f"No validator registered for kind '{kind}'") from None

    def encoder_registration(self, kind: str) -> Registration:
        """Return the registration for encoder ``kind``.

        Raises:
            ResolutionError: If no encoder is registered under ``kind``
        """
        try:
            return self._encoders[kind]
        except KeyError:
            raise ResolutionError(f"No encoder registered for kind '{kind}'") from None

    # Construction

    def build_validator(
        self, kind: str, field: FieldDescriptor | None = None, metadata: Any = None
    ) -> Validator:
        """Instantiate validator ``kind``.

        Field-aware kinds receive ``(field, metadata)``; they cannot be used
        without a field (e.g. as object validators).

        Raises:
            ResolutionError: If the kind is unknown or construction fails
        """
        registration = self.validator_registration(kind)

        if registration.field_aware:
            if field is None:
                raise ResolutionError(
                    f"Validator '{kind}' is field-aware and needs a field"
                )
            return self._call(registration, field, metadata)

        return self._call(registration)

    def build_encoder(self, kind: str) -> Encoder:
        """Instantiate encoder ``kind``.

        Raises:
            ResolutionError: If the kind is unknown or construction fails
        """
        return self._call(self.encoder_registration(kind))

    def _call(self, registration: Registration, *args: Any) -> Any:
        try:
            return registration.factory(*args)
        except Exception as e:
            raise ResolutionError(
                f"Failed to instantiate '{registration.kind}': {e}", cause=e
            ) from e
