"""Item loading: tokenizing sources and the frozen item store."""

from .source import (
    DEFAULT_DELIMITERS,
    load_items,
    parse_delimiters,
    read_tokens,
    split_tokens,
    tokens_from_arguments,
)
from .store import ItemStore, load

__all__ = [
    "DEFAULT_DELIMITERS",
    "ItemStore",
    "load",
    "load_items",
    "parse_delimiters",
    "read_tokens",
    "split_tokens",
    "tokens_from_arguments",
]
