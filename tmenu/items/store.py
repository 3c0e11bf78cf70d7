"""Frozen, ordered item collection shared by every scan.

Items are loaded once and never change afterwards, so plain integer
positions stay valid for the whole session.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence

logger = logging.getLogger(__name__)


class ItemStore:
    """Immutable sequence of raw item texts addressed by position."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[str] = ()) -> None:
        self._items: tuple[str, ...] = tuple(items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, position: int) -> str:
        return self._items[position]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"ItemStore({len(self._items)} items)"

    def is_empty(self) -> bool:
        return not self._items

    def texts(self, positions: Iterable[int]) -> tuple[str, ...]:
        """Materialize item texts for ``positions`` in the given order."""
        items = self._items
        return tuple(items[position] for position in positions)


def load(items: Sequence[str] | Iterable[str]) -> ItemStore:
    """Freeze already-tokenized item texts into an ``ItemStore``.

    Non-string values are rejected because positions are only meaningful
    over text.
    """
    frozen = tuple(items)
    for position, item in enumerate(frozen):
        if not isinstance(item, str):
            raise TypeError(f"item at position {position} is {type(item).__name__}, expected str")
    logger.debug("loaded %d items", len(frozen))
    return ItemStore(frozen)


__all__ = ["ItemStore", "load"]
