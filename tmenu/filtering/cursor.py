"""Highlighted slot tracking on top of a ``FilterWindow``."""

from __future__ import annotations

from enum import Enum

from .window import FilterWindow


class Navigation(Enum):
    """Navigation intents delivered by the input layer."""

    NEXT = "next"
    PREVIOUS = "previous"


class SelectionCursor:
    """Index of the highlighted visible slot.

    Moving past either edge asks the window to shift by one match and keeps
    the highlight on the edge slot, so the newly revealed item is selected.
    """

    def __init__(self, window: FilterWindow) -> None:
        self.window = window
        self._selected = 0

    @property
    def selected(self) -> int | None:
        """Highlighted slot, or ``None`` while nothing is visible."""
        if not self.window:
            return None
        return self._selected

    def reset(self) -> None:
        self._selected = 0

    def move(self, direction: Navigation) -> bool:
        """Apply one navigation intent and return whether anything changed."""
        if direction is Navigation.NEXT:
            return self.next()
        return self.previous()

    def next(self) -> bool:
        if not self.window:
            return False
        if self._selected + 1 < len(self.window):
            self._selected += 1
            return True
        # Window grows on the right and shrinks on the left: last slot stays last.
        return self.window.shift_right(1)

    def previous(self) -> bool:
        if not self.window:
            return False
        if self._selected > 0:
            self._selected -= 1
            return True
        return self.window.shift_left(1)

    def commit(self) -> str | None:
        """Return the highlighted item text, or ``None`` when nothing is visible."""
        if not self.window:
            return None
        return self.window.item_at(self._selected)


__all__ = ["Navigation", "SelectionCursor"]
