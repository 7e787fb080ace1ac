"""svnaction: catalog and registry of working-copy event actions.

Importing the package installs the fixed catalog into the default registry,
so lookups through this module never observe a partially-populated table.
"""

from __future__ import annotations

from svnaction.catalog import *  # noqa: F401,F403
from svnaction.errors import DuplicateActionError, SvnActionError  # noqa: F401
from svnaction.models import EventAction
from svnaction.registry import ActionRegistry, get_registry  # noqa: F401


def register(action_id: int, name: str | None) -> EventAction:
    """Register an action in the default registry and return it."""
    return get_registry().register(action_id, name)


def get_action_by_id(action_id: int) -> EventAction | None:
    """Return the action registered under *action_id*, or None."""
    return get_registry().lookup(action_id)


def all_actions() -> list[EventAction]:
    """Snapshot of every registered action, sorted by id."""
    return get_registry().actions()
