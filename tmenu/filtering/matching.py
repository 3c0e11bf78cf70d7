"""Literal substring matching for menu items."""

from __future__ import annotations

from dataclasses import dataclass, field


def matches(item: str, query: str, case_insensitive: bool = False) -> bool:
    """Return whether ``query`` occurs as a contiguous substring of ``item``.

    The empty query matches every item. Case-insensitive mode casefolds both
    sides before comparing.
    """
    if not query:
        return True
    if case_insensitive:
        return query.casefold() in item.casefold()
    return query in item


@dataclass(frozen=True)
class MatchPredicate:
    """Query bound to the session's case mode, callable on one item."""

    query: str
    case_insensitive: bool = False
    _needle: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        needle = self.query.casefold() if self.case_insensitive else self.query
        object.__setattr__(self, "_needle", needle)

    def __call__(self, item: str) -> bool:
        needle = self._needle
        if not needle:
            return True
        if self.case_insensitive:
            return needle in item.casefold()
        return needle in item


__all__ = ["MatchPredicate", "matches"]
