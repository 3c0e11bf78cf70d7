"""Visible window of matching items with incremental shifting.

``FilterWindow`` keeps at most ``limit`` matching store positions together
with the scan bounds that produced them. A query change rescans from the
start of the store but stops at the ``limit``-th match; stepping past either
edge only scans as far as the next ``amount`` matches on that side.
"""

from __future__ import annotations

import logging
from collections import deque

from ..items.store import ItemStore
from .matching import MatchPredicate
from .scan import scan_backward, scan_forward

logger = logging.getLogger(__name__)


class FilterWindow:
    """Bounded buffer of matches plus the ``[lower_bound, upper_bound)`` scan range.

    Invariants after every public call:

    * ``visible`` holds exactly the matches found in ``[lower_bound, upper_bound)``,
      in store order;
    * ``len(visible) <= limit``, with equality unless a scan hit a store edge.
    """

    def __init__(self, store: ItemStore, limit: int, *, case_insensitive: bool = False) -> None:
        if limit < 0:
            raise ValueError("limit must be >= 0")
        self.store = store
        self.limit = limit
        self.case_insensitive = case_insensitive
        self._predicate = MatchPredicate("", case_insensitive)
        self._visible: deque[int] = deque()
        self._lower = 0
        self._upper = 0

    @property
    def query(self) -> str:
        return self._predicate.query

    @property
    def lower_bound(self) -> int:
        return self._lower

    @property
    def upper_bound(self) -> int:
        return self._upper

    @property
    def positions(self) -> tuple[int, ...]:
        """Store positions of the visible items, in store order."""
        return tuple(self._visible)

    @property
    def items(self) -> tuple[str, ...]:
        return self.store.texts(self._visible)

    def __len__(self) -> int:
        return len(self._visible)

    def __bool__(self) -> bool:
        return bool(self._visible)

    def item_at(self, slot: int) -> str:
        """Return the text shown in visible ``slot``."""
        return self.store[self._visible[slot]]

    def refilter(self, query: str) -> None:
        """Recompute the window from the start of the store for ``query``."""
        self._predicate = MatchPredicate(query, self.case_insensitive)
        self._visible.clear()
        result = scan_forward(self.store, 0, self._predicate, self.limit)
        self._visible.extend(result.positions)
        self._lower = result.positions[0] if result.positions else 0
        self._upper = result.scanned_to
        logger.debug(
            "refilter query=%r visible=%d bounds=[%d, %d)",
            query,
            len(self._visible),
            self._lower,
            self._upper,
        )

    def shift_right(self, amount: int = 1) -> bool:
        """Slide the window toward the end of the store by up to ``amount`` matches.

        Returns ``False`` (and changes nothing) when no match lies beyond the
        current upper bound.
        """
        if amount <= 0 or not self._visible:
            return False
        result = scan_forward(self.store, self._upper, self._predicate, amount)
        if not result:
            return False
        self._visible.extend(result.positions)
        last_dropped = self._lower
        for _ in range(len(result)):
            last_dropped = self._visible.popleft()
        # Everything between the last dropped match and the new first one is a non-match.
        self._lower = last_dropped + 1
        self._upper = result.scanned_to
        logger.debug("shift right by %d bounds=[%d, %d)", len(result), self._lower, self._upper)
        return True

    def shift_left(self, amount: int = 1) -> bool:
        """Slide the window toward the start of the store by up to ``amount`` matches.

        Returns ``False`` (and changes nothing) when no match lies before the
        current lower bound.
        """
        if amount <= 0 or not self._visible:
            return False
        result = scan_backward(self.store, self._lower, self._predicate, amount)
        if not result:
            return False
        # Backward scans report positions nearest-first; extendleft restores store order.
        self._visible.extendleft(result.positions)
        earliest_dropped = self._upper
        for _ in range(len(result)):
            earliest_dropped = self._visible.pop()
        self._lower = result.scanned_to
        self._upper = earliest_dropped
        logger.debug("shift left by %d bounds=[%d, %d)", len(result), self._lower, self._upper)
        return True


__all__ = ["FilterWindow"]
