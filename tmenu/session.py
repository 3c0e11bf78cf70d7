"""Menu session: the single entry point the runtime drives.

Owns the frozen item store, the filter window, the selection cursor and the
current query. Every intent returns a ``WindowSnapshot`` the renderer can
draw without touching engine internals.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import ConfigError, EmptyItemStoreError
from .filtering import FilterWindow, Navigation, SelectionCursor
from .items.store import ItemStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WindowSnapshot:
    """Immutable view of the visible items and highlighted slot."""

    items: tuple[str, ...]
    selected: int | None
    query: str

    @property
    def selected_item(self) -> str | None:
        if self.selected is None:
            return None
        return self.items[self.selected]


def validate_limit(limit: object) -> int:
    """Return ``limit`` as a non-negative int or raise ``ConfigError``."""
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise ConfigError(f"limit must be an integer, got {limit!r}")
    if limit < 0:
        raise ConfigError(f"limit must be >= 0, got {limit}")
    return limit


class MenuSession:
    """Query/navigate/commit state machine over one loaded item store."""

    def __init__(self, store: ItemStore, *, limit: int = 10, case_insensitive: bool = False) -> None:
        if store.is_empty():
            raise EmptyItemStoreError("No items passed to tmenu")
        self.store = store
        self.limit = validate_limit(limit)
        self.case_insensitive = bool(case_insensitive)
        self.window = FilterWindow(store, self.limit, case_insensitive=self.case_insensitive)
        self.cursor = SelectionCursor(self.window)
        self.query = ""
        self.window.refilter(self.query)

    def snapshot(self) -> WindowSnapshot:
        return WindowSnapshot(
            items=self.window.items,
            selected=self.cursor.selected,
            query=self.query,
        )

    def on_query_changed(self, query: str) -> WindowSnapshot:
        """Replace the query, refilter from scratch, and reset the highlight."""
        if not isinstance(query, str):
            raise ConfigError(f"query must be text, got {type(query).__name__}")
        self.query = query
        self.window.refilter(query)
        self.cursor.reset()
        return self.snapshot()

    def on_navigate(self, direction: Navigation) -> WindowSnapshot:
        self.cursor.move(direction)
        return self.snapshot()

    def on_commit(self) -> str | None:
        """Return the highlighted item, or ``None`` when nothing is visible."""
        selected = self.cursor.commit()
        logger.debug("commit query=%r selected=%r", self.query, selected)
        return selected


__all__ = ["MenuSession", "WindowSnapshot", "validate_limit"]
