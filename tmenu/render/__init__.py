"""Menu bar rendering.

Builds the prompt/query row and the visible items for either a single
horizontal bar or a vertical list, then writes one full frame.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..session import WindowSnapshot
from ..ui_theme import DEFAULT_THEME, UITheme
from .text import char_display_width, clip_text, display_width, sanitize

QUERY_CURSOR = "_"


@dataclass(frozen=True)
class RenderContext:
    """Everything needed to draw one frame of the menu."""

    snapshot: WindowSnapshot
    width: int
    height: int
    prompt: str = ""
    orientation: str = "horizontal"
    position: str = "top"
    theme: UITheme = DEFAULT_THEME
    search_margin: float = 0.2
    padding: int = 2


class _RowBuilder:
    """Accumulates styled segments for one screen row of fixed width."""

    def __init__(self, width: int, theme: UITheme) -> None:
        self.width = max(0, width)
        self.theme = theme
        self.col = 0
        self._parts: list[str] = []

    def remaining(self) -> int:
        return self.width - self.col

    def add(self, text: str, style: str) -> bool:
        """Append ``text`` clipped to the row; return whether it fit entirely."""
        clipped = clip_text(text, self.remaining())
        if clipped:
            self._parts.append(f"{style}{clipped}{self.theme.reset}" if style else clipped)
            self.col += display_width(clipped)
        return clipped == text

    def pad_to(self, col: int, style: str) -> None:
        if col > self.col:
            self.add(" " * (col - self.col), style)

    def finish(self, style: str) -> str:
        self.pad_to(self.width, style)
        return "".join(self._parts)


def _add_prompt_and_query(row: _RowBuilder, context: RenderContext) -> None:
    theme = context.theme
    if context.prompt:
        row.add(f" {sanitize(context.prompt)} ", theme.prompt)
    row.add(" ", theme.normal)
    row.add(f"{sanitize(context.snapshot.query)}{QUERY_CURSOR}", theme.query)


def build_horizontal_row(context: RenderContext) -> str:
    """Single bar: prompt, query, then items from ``search_margin`` onward."""
    theme = context.theme
    snapshot = context.snapshot
    row = _RowBuilder(context.width, theme)
    _add_prompt_and_query(row, context)
    items_start = max(row.col, int(context.width * context.search_margin)) + context.padding
    row.pad_to(items_start, theme.normal)
    for idx, item in enumerate(snapshot.items):
        if idx:
            row.add(" " * context.padding, theme.normal)
        if row.remaining() <= 0:
            break
        style = theme.selected if idx == snapshot.selected else theme.normal
        if not row.add(sanitize(item), style):
            break
    return row.finish(theme.normal)


def build_vertical_rows(context: RenderContext) -> list[str]:
    """Query row followed by one row per visible item."""
    theme = context.theme
    snapshot = context.snapshot
    header = _RowBuilder(context.width, theme)
    _add_prompt_and_query(header, context)
    rows = [header.finish(theme.normal)]
    for idx, item in enumerate(snapshot.items):
        style = theme.selected if idx == snapshot.selected else theme.normal
        row = _RowBuilder(context.width, theme)
        row.add(" " * context.padding + sanitize(item), style)
        rows.append(row.finish(style))
    return rows


def build_menu_rows(context: RenderContext) -> list[str]:
    """Return styled rows for the menu block, clipped to the screen height."""
    if context.orientation == "vertical":
        rows = build_vertical_rows(context)
    else:
        rows = [build_horizontal_row(context)]
    return rows[: max(1, context.height)]


def render_frame(context: RenderContext) -> str:
    """Return a full-screen frame: clear, then place the menu at top or bottom."""
    rows = build_menu_rows(context)
    top = 0 if context.position == "top" else max(0, context.height - len(rows))
    out = ["\033[H\033[2J"]
    for offset, row in enumerate(rows):
        out.append(f"\033[{top + offset + 1};1H")
        out.append(row)
    return "".join(out)


def render_menu(context: RenderContext, write: Callable[[str], None]) -> None:
    write(render_frame(context))


__all__ = [
    "QUERY_CURSOR",
    "RenderContext",
    "build_horizontal_row",
    "build_menu_rows",
    "build_vertical_rows",
    "char_display_width",
    "clip_text",
    "display_width",
    "render_frame",
    "render_menu",
    "sanitize",
]
