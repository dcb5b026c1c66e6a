"""Shared pytest fixtures."""

import pytest

from syntaxe import ValidationEngine, ValidatorRegistry, register_builtins
from syntaxe.core import EngineSettings
from syntaxe.engine import VisitedSetTracker


@pytest.fixture
def registry():
    """Registry holding the built-in kinds only."""
    return register_builtins(ValidatorRegistry())


@pytest.fixture
def settings():
    """Settings isolated from the host environment."""
    return EngineSettings(_env_file=None, environment="testing")


@pytest.fixture
def engine(registry, settings):
    """Fresh engine with empty caches for each test."""
    return ValidationEngine(registry, settings)


@pytest.fixture(autouse=True)
def no_leaked_traversal():
    """Every test must leave the visited-object state cleared."""
    yield
    assert VisitedSetTracker().current() is None
