"""Exception types raised by svnaction."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from svnaction.models import EventAction


class SvnActionError(Exception):
    """Base class for svnaction errors."""


class DuplicateActionError(SvnActionError, ValueError):
    """Raised when an action id is registered twice under strict registration."""

    def __init__(self, action_id: int, existing: EventAction, attempted: str | None) -> None:
        self.action_id = action_id
        self.existing = existing
        self.attempted = attempted
        super().__init__(
            f"Action id {action_id} already registered as {existing.render()!r}; "
            f"refusing to register {attempted!r}"
        )
