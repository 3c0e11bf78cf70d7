"""Key-token to menu-action table."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyAction:
    """Named menu action triggered by any of ``keys``.

    The handler returns whether the menu should close.
    """

    name: str
    keys: tuple[str, ...]
    handler: Callable[[], bool]


class KeyActionTable:
    """Exact-match dispatch from key tokens to ``KeyAction`` handlers."""

    def __init__(self, actions: Iterable[KeyAction] = ()) -> None:
        self._actions: dict[str, KeyAction] = {}
        for action in actions:
            self.bind(action)

    def bind(self, action: KeyAction) -> KeyActionTable:
        """Bind every key of ``action``; a later binding replaces an earlier one."""
        for key in action.keys:
            self._actions[key] = action
        return self

    def __contains__(self, key: str) -> bool:
        return key in self._actions

    def action_for(self, key: str) -> KeyAction | None:
        return self._actions.get(key)

    def dispatch(self, key: str) -> bool | None:
        """Run the action bound to ``key``; ``None`` means the key is unbound."""
        action = self._actions.get(key)
        if action is None:
            return None
        logger.debug("key %s -> %s", key, action.name)
        return action.handler()


__all__ = ["KeyAction", "KeyActionTable"]
