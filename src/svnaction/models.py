"""Core value type: an immutable (id, name) event action."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class EventAction:
    """One kind of notifiable working-copy event.

    Instances compare and hash by ``id`` only.  ``name`` is a short
    lower_snake_case token used for display; when it is empty the render
    form falls back to the decimal id.
    """
    id: int
    name: str | None = field(default=None, compare=False)

    def render(self) -> str:
        return self.name if self.name else str(self.id)

    def __str__(self) -> str:
        return self.render()

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}
