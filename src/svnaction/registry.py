"""Thread-safe id -> EventAction registry.

The registry owns the canonical mapping from numeric action id to the
``EventAction`` instance registered under it.  Every read and write happens
under a single lock, so the registry may be shared freely between threads.

A process-wide default registry is created lazily by ``get_registry()`` and
populated by ``svnaction.catalog`` at import time.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Callable, Iterator

from svnaction.config import load_settings
from svnaction.errors import DuplicateActionError, SvnActionError
from svnaction.models import EventAction

log = logging.getLogger("svnaction.registry")

CreateAction = Callable[[int, str | None], EventAction]


class ActionRegistry:
    """Identifier-keyed store of immutable event actions.

    Parameters
    ----------
    strict:
        When true, ``register()`` raises ``DuplicateActionError`` for an id
        that is already present instead of replacing the entry.
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict
        self._actions: dict[int, EventAction] = {}
        self._lock = threading.RLock()

    def register(self, action_id: int, name: str | None) -> EventAction:
        """Create an action, store it under *action_id* and return it.

        Last write wins unless the registry is strict.  *action_id* must be
        an ``int``; ``bool`` is rejected.
        """
        _check_id(action_id)
        with self._lock:
            return self._insert(action_id, name, self.strict)

    def lookup(self, action_id: int) -> EventAction | None:
        """Return the action registered under *action_id*, or None.

        Non-``int`` keys (``True``, ``1.0``) never match, even though they
        compare equal to an ``int`` id.
        """
        if not _is_id(action_id):
            return None
        with self._lock:
            return self._actions.get(action_id)

    @contextmanager
    def bulk(self, strict: bool = True) -> Iterator[CreateAction]:
        """Hold the lock for a batch of registrations.

        Yields a ``create(id, name)`` callable.  Other threads cannot read
        the registry until the block exits.  With *strict*, an id repeated
        within the batch raises ``DuplicateActionError``.  If the block
        raises, the registry is restored to its state before the batch.
        ``create`` cannot be used once the block has exited.
        """
        seen: set[int] = set()
        closed = False

        def create(action_id: int, name: str | None) -> EventAction:
            _check_id(action_id)
            with self._lock:
                if closed:
                    raise SvnActionError("bulk registration block has already exited")
                if strict and action_id in seen:
                    raise DuplicateActionError(action_id, self._actions[action_id], name)
                seen.add(action_id)
                return self._insert(action_id, name, self.strict)

        with self._lock:
            before = dict(self._actions)
            try:
                yield create
            except BaseException:
                self._actions.clear()
                self._actions.update(before)
                log.warning("Bulk registration failed; rolled back %d actions", len(seen))
                raise
            finally:
                closed = True
            log.debug("Registered %d actions in bulk", len(seen))

    def actions(self) -> list[EventAction]:
        """Snapshot of all registered actions, sorted by id."""
        with self._lock:
            return sorted(self._actions.values(), key=lambda a: a.id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._actions)

    def __contains__(self, action_id: object) -> bool:
        with self._lock:
            return _is_id(action_id) and action_id in self._actions

    def _insert(self, action_id: int, name: str | None, strict: bool) -> EventAction:
        # Caller holds self._lock.
        existing = self._actions.get(action_id)
        if existing is not None:
            if strict:
                raise DuplicateActionError(action_id, existing, name)
            log.debug(
                "Replacing action %d (%s -> %s)", action_id, existing.render(), name,
                extra={"action_id": action_id, "action_name": name},
            )
        action = EventAction(action_id, name)
        self._actions[action_id] = action
        return action


# ---------------------------------------------------------------------------
# Process-wide default registry
# ---------------------------------------------------------------------------

_default: ActionRegistry | None = None
_default_lock = threading.Lock()


def get_registry() -> ActionRegistry:
    """Return the default registry, creating it on first use."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = ActionRegistry(strict=load_settings().strict_registration)
    return _default


def _is_id(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_id(value: object) -> None:
    if not _is_id(value):
        raise TypeError(f"Action id must be an int, got {type(value).__name__}")
