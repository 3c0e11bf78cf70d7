"""Command-line front door for tmenu.

Parses options, loads item tokens from a file, arguments or stdin, then runs
the interactive menu and prints the chosen item to stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys

from . import __version__
from .errors import TmenuError
from .items.source import load_items, parse_delimiters
from .runtime import run_menu
from .runtime.config import resolve_menu_config
from .ui_theme import available_theme_names


def _non_negative_int(value: str) -> int:
    """argparse type for non-negative integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tmenu",
        description="tmenu is a generic terminal menu, inspired by and (mostly) compatible with dmenu.",
    )
    parser.add_argument("-v", "--version", action="version", version=f"v{__version__}")
    parser.add_argument(
        "-i",
        "--insensitive",
        action="store_true",
        default=None,
        help="match menu entries case insensitively",
    )
    parser.add_argument(
        "-b",
        "--bottom",
        dest="position",
        action="store_const",
        const="bottom",
        help="show the menu at the bottom of the screen",
    )
    parser.add_argument("-p", "--prompt", default=None, help="prompt displayed before the input area")
    parser.add_argument("-f", "--file", default=None, help="read items from file instead of stdin/arguments")
    parser.add_argument("-l", "--limit", type=_non_negative_int, default=None, help="limit number of items in menu")
    parser.add_argument(
        "-d",
        "--delimiters",
        default=None,
        help="characters separating items (escapes \\n \\r \\t allowed)",
    )
    orientation = parser.add_mutually_exclusive_group()
    orientation.add_argument(
        "--vertical",
        dest="orientation",
        action="store_const",
        const="vertical",
        help="list items vertically, one per row",
    )
    orientation.add_argument(
        "--horizontal",
        dest="orientation",
        action="store_const",
        const="horizontal",
        help="show items side by side on one row",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--log-file", default=None, help="write debug logs to this file")
    parser.add_argument("items", nargs="*", metavar="ITEM", help="menu items")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, run the menu, and write the selection to stdout.

    Startup failures (bad configuration, unreadable input, no items, no
    terminal) exit with status 1 and a message on stderr.
    """
    args = build_parser().parse_args(argv)

    if args.log_file is not None:
        logging.basicConfig(
            filename=args.log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    try:
        config = resolve_menu_config(
            {
                "limit": args.limit,
                "case_insensitive": args.insensitive,
                "delimiters": parse_delimiters(args.delimiters) if args.delimiters is not None else None,
                "orientation": args.orientation,
                "position": args.position,
                "prompt": args.prompt,
                "theme": args.theme,
            }
        )
        items = load_items(delimiters=config.delimiters, file=args.file, arguments=args.items)
        selected = run_menu(items, config, no_color=args.no_color)
    except TmenuError as exc:
        raise SystemExit(str(exc)) from exc

    if selected is not None:
        sys.stdout.write(selected)
        sys.stdout.flush()


if __name__ == "__main__":
    main()
