"""Tokenize raw item streams into item texts.

Items arrive as one byte stream (a file, standard input, or the positional
arguments glued together) and are split on any single delimiter character.
Empty tokens are dropped and malformed UTF-8 is replaced rather than fatal.
"""

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import BinaryIO

from ..errors import ConfigError, ItemSourceError

logger = logging.getLogger(__name__)

DEFAULT_DELIMITERS = ";\r\n"

_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
}


def parse_delimiters(value: str) -> str:
    """Expand backslash escapes typed on a command line into delimiter chars.

    ``\\n``, ``\\r``, ``\\t`` and ``\\\\`` are recognized; any other escaped
    character stands for itself. An empty result is rejected.
    """
    out: list[str] = []
    idx = 0
    while idx < len(value):
        ch = value[idx]
        if ch == "\\" and idx + 1 < len(value):
            nxt = value[idx + 1]
            out.append(_ESCAPES.get(nxt, nxt))
            idx += 2
            continue
        out.append(ch)
        idx += 1
    delimiters = "".join(out)
    if not delimiters:
        raise ConfigError("delimiter set must not be empty")
    return delimiters


def _delimiter_pattern(delimiters: str) -> re.Pattern[str]:
    if not delimiters:
        raise ConfigError("delimiter set must not be empty")
    return re.compile("[" + "".join(re.escape(ch) for ch in dict.fromkeys(delimiters)) + "]")


def split_tokens(text: str, delimiters: str = DEFAULT_DELIMITERS) -> list[str]:
    """Split decoded text on any delimiter character, dropping empty tokens."""
    return [token for token in _delimiter_pattern(delimiters).split(text) if token]


def read_tokens(stream: BinaryIO, delimiters: str = DEFAULT_DELIMITERS) -> list[str]:
    """Read a whole byte stream and return its non-empty tokens in order.

    A trailing token without a closing delimiter is kept.
    """
    try:
        data = stream.read()
    except (OSError, ValueError) as exc:
        raise ItemSourceError("Error reading from stream!") from exc
    if isinstance(data, str):
        text = data
    else:
        text = bytes(data).decode("utf-8", errors="replace")
    tokens = split_tokens(text, delimiters)
    logger.debug("read %d tokens from stream", len(tokens))
    return tokens


def tokens_from_arguments(items: Sequence[str], delimiters: str = DEFAULT_DELIMITERS) -> list[str]:
    """Tokenize positional items exactly like stream input.

    Arguments are joined with the first delimiter, so an argument that itself
    contains a delimiter yields several items.
    """
    if not delimiters:
        raise ConfigError("delimiter set must not be empty")
    joined = "".join(f"{item}{delimiters[0]}" for item in items)
    return split_tokens(joined, delimiters)


def load_items(
    *,
    delimiters: str = DEFAULT_DELIMITERS,
    file: str | Path | None = None,
    arguments: Sequence[str] | None = None,
    stdin: BinaryIO | None = None,
) -> list[str]:
    """Load item tokens from the first configured source.

    Priority: ``file``, then positional ``arguments``, then ``stdin``
    (defaults to ``sys.stdin.buffer``).
    """
    if file is not None:
        path = Path(file)
        try:
            with path.open("rb") as handle:
                return read_tokens(handle, delimiters)
        except OSError as exc:
            reason = exc.strerror or str(exc)
            raise ItemSourceError(f"Error reading from file {path}: {reason}") from exc
    if arguments:
        return tokens_from_arguments(arguments, delimiters)
    if stdin is None:
        stdin = sys.stdin.buffer
    return read_tokens(stdin, delimiters)


__all__ = [
    "DEFAULT_DELIMITERS",
    "parse_delimiters",
    "split_tokens",
    "read_tokens",
    "tokens_from_arguments",
    "load_items",
]
