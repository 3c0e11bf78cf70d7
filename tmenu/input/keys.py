"""Keyboard dispatch for the menu prompt.

Every key either edits the query (and triggers a refilter), navigates the
visible window, commits the highlighted item, or cancels the menu.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..filtering import Navigation
from ..runtime.state import MenuState
from ..session import WindowSnapshot
from .bindings import KeyAction, KeyActionTable

NEXT_KEYS = ("RIGHT", "DOWN", "TAB", "CTRL_N")
PREVIOUS_KEYS = ("LEFT", "UP", "SHIFT_TAB", "CTRL_P")
COMMIT_KEYS = ("ENTER",)
CANCEL_KEYS = ("ESC", "CTRL_C", "CTRL_G")


@dataclass(frozen=True)
class MenuKeyCallbacks:
    """Session operations required for menu key handling."""

    change_query: Callable[[str], WindowSnapshot]
    navigate: Callable[[Navigation], WindowSnapshot]
    commit: Callable[[], str | None]


def _delete_last_word(query: str) -> str:
    trimmed = query.rstrip(" ")
    cut = trimmed.rfind(" ")
    return trimmed[: cut + 1] if cut >= 0 else ""


class MenuKeyHandler:
    """Apply key tokens to ``MenuState`` through session callbacks."""

    def __init__(self, state: MenuState, callbacks: MenuKeyCallbacks) -> None:
        self.state = state
        self.callbacks = callbacks
        self.actions = KeyActionTable(
            (
                KeyAction("next", NEXT_KEYS, lambda: self._navigate(Navigation.NEXT)),
                KeyAction("previous", PREVIOUS_KEYS, lambda: self._navigate(Navigation.PREVIOUS)),
                KeyAction("commit", COMMIT_KEYS, self._commit),
                KeyAction("cancel", CANCEL_KEYS, self._cancel),
                KeyAction("delete-char", ("BACKSPACE",), lambda: self._set_query(self.state.query[:-1])),
                KeyAction("clear-query", ("CTRL_U",), lambda: self._set_query("")),
                KeyAction(
                    "delete-word",
                    ("CTRL_W",),
                    lambda: self._set_query(_delete_last_word(self.state.query)),
                ),
            )
        )

    def _set_query(self, query: str) -> bool:
        if query == self.state.query:
            return False
        self.state.query = query
        self.state.snapshot = self.callbacks.change_query(query)
        self.state.dirty = True
        return False

    def _navigate(self, direction: Navigation) -> bool:
        snapshot = self.callbacks.navigate(direction)
        if snapshot != self.state.snapshot:
            self.state.snapshot = snapshot
            self.state.dirty = True
        return False

    def _commit(self) -> bool:
        selected = self.callbacks.commit()
        if selected is None:
            # Nothing visible: keep the menu open.
            return False
        self.state.result = selected
        self.state.finished = True
        return True

    def _cancel(self) -> bool:
        self.state.result = None
        self.state.finished = True
        return True

    def handle(self, key: str) -> bool:
        """Handle one key token and return whether the menu should close."""
        handled = self.actions.dispatch(key)
        if handled is not None:
            return bool(handled)
        if len(key) == 1 and key.isprintable():
            return self._set_query(self.state.query + key)
        return False


def handle_menu_key(key: str, state: MenuState, callbacks: MenuKeyCallbacks) -> bool:
    """Handle one key with a throwaway handler; returns whether to quit."""
    return MenuKeyHandler(state, callbacks).handle(key)


__all__ = [
    "CANCEL_KEYS",
    "COMMIT_KEYS",
    "MenuKeyCallbacks",
    "MenuKeyHandler",
    "NEXT_KEYS",
    "PREVIOUS_KEYS",
    "handle_menu_key",
]
