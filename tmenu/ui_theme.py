"""Menu bar color schemes.

Each scheme is a handful of SGR prefixes, one per drawing role. Colors are
written as ``#rrggbb`` and emitted as 24-bit escapes.
"""

from __future__ import annotations

from dataclasses import dataclass

RESET = "\033[0m"


def _hex_rgb(color: str) -> tuple[int, int, int]:
    value = color.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def _sgr(fg: str, bg: str, *, bold: bool = False) -> str:
    fr, fg_, fb = _hex_rgb(fg)
    br, bg_, bb = _hex_rgb(bg)
    weight = "1;" if bold else ""
    return f"\033[{weight}38;2;{fr};{fg_};{fb};48;2;{br};{bg_};{bb}m"


@dataclass(frozen=True)
class UITheme:
    """SGR prefix per role; ``reset`` closes every styled segment."""

    name: str
    normal: str
    selected: str
    prompt: str
    query: str
    reset: str = RESET


DEFAULT_THEME = UITheme(
    name="default",
    normal=_sgr("#bbbbbb", "#222222"),
    selected=_sgr("#eeeeee", "#005577"),
    prompt=_sgr("#eeeeee", "#005577", bold=True),
    query=_sgr("#eeeeee", "#222222", bold=True),
)

OCEAN_THEME = UITheme(
    name="ocean",
    normal=_sgr("#d0d0d0", "#00005f"),
    selected=_sgr("#000000", "#00d7ff", bold=True),
    prompt=_sgr("#000000", "#00afff", bold=True),
    query=_sgr("#afd7ff", "#00005f", bold=True),
)

# Reverse video only, so the highlight survives --no-color.
PLAIN_THEME = UITheme(name="plain", normal="", selected="\033[7m", prompt="\033[7m", query="")

THEMES = {theme.name: theme for theme in (DEFAULT_THEME, OCEAN_THEME)}


def available_theme_names() -> tuple[str, ...]:
    return tuple(sorted(THEMES))


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Pick the scheme to draw with; unknown names get the default scheme."""
    if no_color:
        return PLAIN_THEME
    key = (name or "").strip().lower()
    return THEMES.get(key, DEFAULT_THEME)


__all__ = [
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "RESET",
    "THEMES",
    "UITheme",
    "available_theme_names",
    "resolve_theme",
]
