from __future__ import annotations

from dataclasses import dataclass

from ..session import WindowSnapshot


@dataclass
class MenuState:
    snapshot: WindowSnapshot
    query: str = ""
    dirty: bool = True
    skip_next_lf: bool = False
    finished: bool = False
    result: str | None = None
