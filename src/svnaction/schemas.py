"""Pydantic wire model for action references in decoded payloads."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svnaction.models import EventAction
from svnaction.registry import ActionRegistry, get_registry


class ActionRef(BaseModel):
    """An action as it appears on the wire.

    The id is authoritative; the name is informational and is not used
    when resolving against a registry.
    """
    id: int = Field(..., description="Numeric action identifier")
    name: str | None = None

    @classmethod
    def from_action(cls, action: EventAction) -> ActionRef:
        return cls(id=action.id, name=action.name)

    def resolve(self, registry: ActionRegistry | None = None) -> EventAction | None:
        """Look up the registered action for this id, or None if unknown."""
        registry = get_registry() if registry is None else registry
        return registry.lookup(self.id)
