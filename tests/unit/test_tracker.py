"""Tests for context-local visited-object tracking."""

import asyncio
from dataclasses import dataclass
import threading

import pytest

from syntaxe.engine import VisitedSetTracker


@dataclass
class Node:
    """Value-equal instances must still be tracked separately."""

    name: str = "same"


@pytest.fixture
def tracker():
    tracker = VisitedSetTracker()
    yield tracker
    tracker.clear()


class TestVisitedSetTracker:
    def test_first_visit_records(self, tracker):
        node = Node()

        assert tracker.visit(node) is False
        assert tracker.visit(node) is True

    def test_tracks_identity_not_equality(self, tracker):
        first, second = Node(), Node()
        assert first == second

        tracker.visit(first)

        assert tracker.visit(second) is False

    def test_root_is_first_visited(self, tracker):
        root, child = Node("root"), Node("child")

        assert tracker.is_root(root) is False
        tracker.visit(root)
        tracker.visit(child)

        assert tracker.is_root(root) is True
        assert tracker.is_root(child) is False

    def test_clear_discards_state(self, tracker):
        node = Node()
        tracker.visit(node)

        tracker.clear()

        assert tracker.current() is None
        assert tracker.visit(node) is False

    def test_owner_is_kept_on_the_traversal(self, tracker):
        owner = object()

        tracker.visit(Node(), owner=owner)
        tracker.visit(Node(), owner=object())

        assert tracker.current().owner is owner


class TestContextIsolation:
    """Each thread and each asyncio task tracks its own traversal."""

    def test_threads_do_not_share_state(self, tracker):
        node = Node()
        tracker.visit(node)
        seen_in_thread = []

        def worker() -> None:
            other = VisitedSetTracker()
            seen_in_thread.append(other.current())
            seen_in_thread.append(other.visit(node))
            other.clear()

        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

        assert seen_in_thread == [None, False]
        assert tracker.visit(node) is True

    @pytest.mark.asyncio
    async def test_tasks_do_not_leak_state(self):
        node = Node()

        async def visit_without_clearing() -> bool:
            return VisitedSetTracker().visit(node)

        async def inspect_later() -> object:
            await asyncio.sleep(0)
            return VisitedSetTracker().current()

        visited, current = await asyncio.gather(
            visit_without_clearing(), inspect_later()
        )

        assert visited is False
        assert current is None
        assert VisitedSetTracker().current() is None
