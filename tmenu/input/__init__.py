"""Input-layer public API for key decoding and menu key handling.

Exports are split between low-level terminal decoding (`read_key`) and the
key dispatcher used by the runtime loop.
"""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key
from .bindings import KeyAction, KeyActionTable
from .keys import MenuKeyCallbacks, MenuKeyHandler, handle_menu_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyAction",
    "KeyActionTable",
    "MenuKeyCallbacks",
    "MenuKeyHandler",
    "handle_menu_key",
]
