"""Visited-object tracking for one validation call tree.

The visited set lives in a context variable: every thread and every asyncio
task gets its own, while nested ``validate`` calls made inside one call tree
share it. Objects are tracked by identity, never by equality.
"""

from contextvars import ContextVar
from typing import Any


class Traversal:
    """Insertion-ordered set of visited objects; the first one is the root."""

    def __init__(self, owner: Any = None):
        self.owner = owner
        # id -> object; holding the object keeps its id from being reused
        self._visited: dict[int, Any] = {}

    def add(self, target: Any) -> bool:
        """Record ``target``; return ``False`` if it was already recorded."""
        key = id(target)
        if key in self._visited:
            return False
        self._visited[key] = target
        return True

    @property
    def root(self) -> Any:
        return next(iter(self._visited.values()), None)

    def __contains__(self, target: Any) -> bool:
        return id(target) in self._visited

    def __len__(self) -> int:
        return len(self._visited)


_traversal: ContextVar[Traversal | None] = ContextVar(
    "syntaxe_traversal", default=None
)


class VisitedSetTracker:
    """Context-local visited set used to stop cycles and repeated visits."""

    def visit(self, target: Any, owner: Any = None) -> bool:
        """Return ``True`` if ``target`` was already visited, else record it.

        Args:
            target: Object about to be validated
            owner: Engine starting the traversal when none is active yet
        """
        traversal = _traversal.get()

        if traversal is None:
            traversal = Traversal(owner)
            _traversal.set(traversal)

        return not traversal.add(target)

    def is_root(self, target: Any) -> bool:
        """Return ``True`` if ``target`` is the first object of the traversal."""
        traversal = _traversal.get()
        return traversal is not None and len(traversal) > 0 and traversal.root is target

    def clear(self) -> None:
        """Discard the current traversal."""
        _traversal.set(None)

    def current(self) -> Traversal | None:
        """Return the active traversal, if any."""
        return _traversal.get()
