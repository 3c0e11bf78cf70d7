"""Exception types raised by tmenu.

Every failure the menu can report at startup derives from ``TmenuError`` so
the CLI can turn it into a single-line message and a non-zero exit status.
"""

from __future__ import annotations


class TmenuError(Exception):
    """Base class for all tmenu errors."""


class ConfigError(TmenuError):
    """Configuration value that cannot be used (bad limit, delimiters, ...)."""


class ItemSourceError(TmenuError):
    """Item stream could not be opened or read."""


class EmptyItemStoreError(TmenuError):
    """Loading finished without a single item to pick from."""


class TerminalUnavailableError(TmenuError):
    """No controlling terminal to draw the menu on."""


__all__ = [
    "TmenuError",
    "ConfigError",
    "ItemSourceError",
    "EmptyItemStoreError",
    "TerminalUnavailableError",
]
