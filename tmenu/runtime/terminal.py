"""Terminal control helpers for the menu session.

Owns raw-mode lifecycle and alternate-screen switching on the controlling
terminal, so standard input and output stay free for items and the result.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

from ..errors import TerminalUnavailableError

TTY_PATH = "/dev/tty"


class TerminalController:
    """Manage terminal mode transitions and screen writes on one tty fd."""

    def __init__(self, tty_fd: int) -> None:
        """Capture tty state for ``tty_fd``, used for both input and drawing."""
        self.tty_fd = tty_fd
        self._saved_tty_state = termios.tcgetattr(tty_fd)

    @classmethod
    def open(cls, path: str = TTY_PATH) -> TerminalController:
        """Open the controlling terminal read/write."""
        try:
            fd = os.open(path, os.O_RDWR | os.O_NOCTTY)
        except OSError as exc:
            raise TerminalUnavailableError(f"cannot open terminal {path}: {exc.strerror or exc}") from exc
        try:
            return cls(fd)
        except termios.error as exc:
            os.close(fd)
            raise TerminalUnavailableError(f"{path} is not a terminal") from exc

    def close(self) -> None:
        os.close(self.tty_fd)

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.tty_fd, termios.TCSAFLUSH)
        os.write(self.tty_fd, b"\x1b[?1049h\x1b[?25l")

    def disable_tui_mode(self) -> None:
        """Show the cursor, leave the alternate screen and restore tty state."""
        os.write(self.tty_fd, b"\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.tty_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def size(self) -> tuple[int, int]:
        """Return ``(columns, lines)``, falling back to 80x24."""
        try:
            size = os.get_terminal_size(self.tty_fd)
        except OSError:
            return 80, 24
        return max(1, size.columns), max(1, size.lines)

    def write(self, payload: str) -> None:
        os.write(self.tty_fd, payload.encode("utf-8", errors="replace"))

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
