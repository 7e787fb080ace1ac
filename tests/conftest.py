"""Shared fixtures for svnaction tests."""

import pytest

from svnaction import config, registry as registry_module
from svnaction.registry import ActionRegistry


# ---------------------------------------------------------------------------
# Auto-use fixtures: cleanup global state between tests
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _reset_settings():
    """Reset cached settings after every test."""
    yield
    config._settings = None


@pytest.fixture
def registry():
    """Fresh, empty, non-strict registry."""
    return ActionRegistry()


@pytest.fixture
def strict_registry():
    return ActionRegistry(strict=True)


@pytest.fixture
def default_registry(monkeypatch):
    """Swap the process-wide registry for a fresh one for the test's duration."""
    fresh = ActionRegistry()
    monkeypatch.setattr(registry_module, "_default", fresh)
    return fresh
