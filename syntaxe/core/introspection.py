"""Field introspection for annotated classes.

Fields are the annotated attributes of a class and of all its ancestors.
Metadata is attached to a field with ``typing.Annotated``::

    @dataclass
    class Account:
        name: Annotated[str, StringValidation(min_length=3)]
"""

from dataclasses import dataclass, field
import inspect
import types
from typing import Annotated, Any, ClassVar, Union, get_args, get_origin

from .logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FieldDescriptor:
    """A declared field of a class.

    Equality and hashing use the declaring class and the field name only,
    so the descriptor is a stable cache key across repeated lookups.
    """

    owner: type
    name: str
    annotation: Any = field(default=None, compare=False)
    metadata: tuple[Any, ...] = field(default=(), compare=False)

    @property
    def qualified_name(self) -> str:
        """Return ``Owner.name`` for messages and logs."""
        return f"{self.owner.__qualname__}.{self.name}"

    def get(self, target: Any) -> Any:
        """Read this field's current value from ``target``."""
        return getattr(target, self.name, None)

    def set(self, target: Any, value: Any) -> None:
        """Write ``value`` into this field of ``target``."""
        setattr(target, self.name, value)


def metadata_of(annotation: Any) -> tuple[Any, ...]:
    """Extract the ``Annotated`` metadata items from a type annotation.

    ``Optional[Annotated[T, ...]]`` and ``Annotated[T, ...] | None`` are
    unwrapped so nullable fields can carry metadata too.
    """
    if get_origin(annotation) is Annotated:
        return tuple(annotation.__metadata__)

    if get_origin(annotation) in (Union, types.UnionType):
        items: list[Any] = []
        for arg in get_args(annotation):
            if get_origin(arg) is Annotated:
                items.extend(arg.__metadata__)
        return tuple(items)

    return ()


def _is_class_var(annotation: Any) -> bool:
    if annotation is ClassVar or get_origin(annotation) is ClassVar:
        return True
    return isinstance(annotation, str) and annotation.startswith(
        ("ClassVar", "typing.ClassVar")
    )


def _own_annotations(klass: type) -> dict[str, Any]:
    try:
        return inspect.get_annotations(klass, eval_str=True)
    except (NameError, AttributeError, TypeError, SyntaxError) as e:
        # Forward references that cannot be evaluated keep their raw strings
        # and therefore carry no metadata.
        logger.debug(
            "Unresolvable annotations, using raw strings",
            owner=klass.__qualname__,
            error=str(e),
        )
        return inspect.get_annotations(klass)


def all_fields(klass: type) -> tuple[FieldDescriptor, ...]:
    """List every annotated field of ``klass`` including inherited ones.

    Fields are ordered base class first. A field redefined in a subclass
    keeps its inherited position and takes the subclass's annotation.

    Args:
        klass: Class to introspect

    Returns:
        Tuple of field descriptors, empty if the class declares none
    """
    fields: dict[str, FieldDescriptor] = {}

    for owner in reversed(klass.__mro__):
        if owner is object:
            continue

        for name, annotation in _own_annotations(owner).items():
            if _is_class_var(annotation):
                continue
            fields[name] = FieldDescriptor(
                owner=owner,
                name=name,
                annotation=annotation,
                metadata=metadata_of(annotation),
            )

    return tuple(fields.values())
