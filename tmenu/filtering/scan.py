"""Bounded, resumable scans over an item store.

A scan walks a half-open position range in one direction, collects at most
``capacity`` matching positions, and reports the boundary it stopped at so a
later scan can resume exactly there. Nothing here knows about rendering.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Scan direction over store positions."""

    FORWARD = 1
    BACKWARD = -1


@dataclass(frozen=True)
class ScanResult:
    """Matched positions in encounter order plus the resume boundary.

    For forward scans ``scanned_to`` is one past the last examined position.
    For backward scans it is the last examined position itself, so the
    covered range is always ``[scanned_to, start)`` or ``[start, scanned_to)``.
    """

    positions: tuple[int, ...]
    scanned_to: int

    def __bool__(self) -> bool:
        return bool(self.positions)

    def __len__(self) -> int:
        return len(self.positions)


def scan(
    items: Sequence[str],
    start: int,
    end: int,
    direction: Direction,
    predicate: Callable[[str], bool],
    capacity: int,
) -> ScanResult:
    """Collect up to ``capacity`` matches between ``start`` and ``end``.

    Forward scans examine ``start .. end-1``; backward scans examine
    ``start-1`` down to ``end``. Stops as soon as ``capacity`` matches are
    collected or the range is exhausted.
    """
    found: list[int] = []
    if capacity <= 0:
        return ScanResult((), start)

    if direction is Direction.FORWARD:
        position = start
        while position < end:
            hit = predicate(items[position])
            position += 1
            if hit:
                found.append(position - 1)
                if len(found) >= capacity:
                    break
        return ScanResult(tuple(found), position)

    position = start
    while position > end:
        position -= 1
        if predicate(items[position]):
            found.append(position)
            if len(found) >= capacity:
                break
    return ScanResult(tuple(found), position)


def scan_forward(
    items: Sequence[str],
    start: int,
    predicate: Callable[[str], bool],
    capacity: int,
) -> ScanResult:
    """Forward scan from ``start`` to the end of ``items``."""
    return scan(items, start, len(items), Direction.FORWARD, predicate, capacity)


def scan_backward(
    items: Sequence[str],
    start: int,
    predicate: Callable[[str], bool],
    capacity: int,
) -> ScanResult:
    """Backward scan from ``start`` (exclusive) to the start of ``items``."""
    return scan(items, start, 0, Direction.BACKWARD, predicate, capacity)


__all__ = ["Direction", "ScanResult", "scan", "scan_forward", "scan_backward"]
