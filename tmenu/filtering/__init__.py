"""Incremental bounded filter engine.

``FilterWindow`` keeps a bounded window of substring matches and shifts it
incrementally; ``SelectionCursor`` maps navigation intents onto it.
"""

from .cursor import Navigation, SelectionCursor
from .matching import MatchPredicate, matches
from .scan import Direction, ScanResult, scan, scan_backward, scan_forward
from .window import FilterWindow

__all__ = [
    "Direction",
    "FilterWindow",
    "MatchPredicate",
    "Navigation",
    "ScanResult",
    "SelectionCursor",
    "matches",
    "scan",
    "scan_backward",
    "scan_forward",
]
