"""Terminal runtime for the menu: config, tty control and the key loop.

``run_menu`` is resolved on first use; importing ``tmenu.runtime`` alone does
not pull in the input layer, which itself depends on ``runtime.state``.
"""

from __future__ import annotations


def run_menu(*args, **kwargs):
    from .app import run_menu as _run_menu

    return _run_menu(*args, **kwargs)


__all__ = ["run_menu"]
