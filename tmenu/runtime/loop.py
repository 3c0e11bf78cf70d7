"""Main interactive event loop for the menu.

Redraws only when something changed, reads one key at a time and hands it to
the key handler. Every intent runs to completion before the next key is read.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..input import MenuKeyHandler, read_key
from ..render import RenderContext, render_menu
from ..session import WindowSnapshot
from ..ui_theme import DEFAULT_THEME, UITheme
from .state import MenuState
from .terminal import TerminalController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    # Idle wake-up used to notice terminal resizes.
    key_timeout_ms: int = 120


@dataclass(frozen=True)
class MenuLayout:
    """Static drawing options shared by every frame."""

    prompt: str = ""
    orientation: str = "horizontal"
    position: str = "top"
    theme: UITheme = DEFAULT_THEME
    search_margin: float = 0.2
    padding: int = 2

    def context(self, snapshot: WindowSnapshot, width: int, height: int) -> RenderContext:
        return RenderContext(
            snapshot=snapshot,
            width=width,
            height=height,
            prompt=self.prompt,
            orientation=self.orientation,
            position=self.position,
            theme=self.theme,
            search_margin=self.search_margin,
            padding=self.padding,
        )


def _normalize_enter(state: MenuState, key: str) -> str | None:
    """Fold CR, LF and CRLF into one ``ENTER``; ``None`` means drop the key."""
    if state.skip_next_lf and key == "ENTER_LF":
        state.skip_next_lf = False
        return None
    if key == "ENTER_CR":
        state.skip_next_lf = True
        return "ENTER"
    state.skip_next_lf = False
    if key == "ENTER_LF":
        return "ENTER"
    return key


def run_main_loop(
    state: MenuState,
    terminal: TerminalController,
    key_handler: MenuKeyHandler,
    layout: MenuLayout,
    timing: RuntimeLoopTiming | None = None,
) -> str | None:
    """Run the menu until commit or cancel and return the committed item."""
    timing = timing or RuntimeLoopTiming()
    last_size: tuple[int, int] | None = None
    with terminal.raw_mode():
        while not state.finished:
            size = terminal.size()
            if size != last_size:
                last_size = size
                state.dirty = True
            if state.dirty:
                width, height = size
                render_menu(layout.context(state.snapshot, width, height), terminal.write)
                state.dirty = False

            try:
                key = read_key(terminal.tty_fd, timeout_ms=timing.key_timeout_ms)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue
            normalized = _normalize_enter(state, key)
            if normalized is None:
                continue
            if key_handler.handle(normalized):
                break
    logger.debug("menu closed with result=%r", state.result)
    return state.result


__all__ = ["MenuLayout", "RuntimeLoopTiming", "run_main_loop"]
