"""Menu bootstrap: build the session, open the terminal, run the loop."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..input import MenuKeyCallbacks, MenuKeyHandler
from ..items.store import load
from ..session import MenuSession
from ..ui_theme import resolve_theme
from .config import MenuConfig
from .loop import MenuLayout, RuntimeLoopTiming, run_main_loop
from .state import MenuState
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def build_session(items: Sequence[str], config: MenuConfig) -> MenuSession:
    """Freeze ``items`` and start a session; refuses an empty item list."""
    return MenuSession(load(items), limit=config.limit, case_insensitive=config.case_insensitive)


def run_menu(
    items: Sequence[str],
    config: MenuConfig,
    *,
    no_color: bool = False,
    terminal: TerminalController | None = None,
    timing: RuntimeLoopTiming | None = None,
) -> str | None:
    """Show the interactive menu and return the committed item, or ``None``.

    The session is created before the terminal is touched so an empty item
    list fails without flashing the alternate screen.
    """
    session = build_session(items, config)
    state = MenuState(snapshot=session.snapshot())
    handler = MenuKeyHandler(
        state,
        MenuKeyCallbacks(
            change_query=session.on_query_changed,
            navigate=session.on_navigate,
            commit=session.on_commit,
        ),
    )
    layout = MenuLayout(
        prompt=config.prompt,
        orientation=config.orientation,
        position=config.position,
        theme=resolve_theme(config.theme, no_color=no_color),
        search_margin=config.search_margin,
        padding=config.padding,
    )

    owns_terminal = terminal is None
    if terminal is None:
        terminal = TerminalController.open()
    logger.debug("starting menu with %d items, limit=%d", len(session.store), config.limit)
    try:
        return run_main_loop(state, terminal, handler, layout, timing)
    finally:
        if owns_terminal:
            terminal.close()
