"""Terminal output with ANSI cursor moves and non-blocking keyboard input."""

from __future__ import annotations

import os
import select
import sys
from typing import IO, Any

try:
    import termios
except ImportError:  # pragma: no cover - platforms without termios
    termios = None  # type: ignore[assignment]

CLEAR_SEQUENCE = "\033[H\033[2J"
BLANK = " "


def cursor_to(x: int, y: int) -> str:
    """Return the escape sequence that moves the cursor to column x, row y."""
    return f"\033[{y};{x}f"


class Screen:
    """Draws single characters at terminal coordinates."""

    def __init__(self, stream: IO[str] | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def put(self, x: int, y: int, char: str) -> None:
        """Write ``char`` at column x, row y."""
        self.stream.write(cursor_to(x, y) + char)

    def erase(self, x: int, y: int) -> None:
        """Blank the cell at column x, row y."""
        self.put(x, y, BLANK)

    def clear(self) -> None:
        """Clear the whole terminal and home the cursor."""
        self.stream.write(CLEAR_SEQUENCE)

    def flush(self) -> None:
        self.stream.flush()


class Keyboard:
    """Reads single key presses without blocking.

    Used as a context manager, it switches a terminal to unbuffered input
    without echo and restores the previous settings on exit.
    """

    def __init__(self, stream: Any = None) -> None:
        self.stream = stream if stream is not None else sys.stdin
        self._fd = self.stream.fileno()
        self._saved: list | None = None
        self._pending = b""

    def __enter__(self) -> "Keyboard":
        if termios is not None and os.isatty(self._fd):
            self._saved = termios.tcgetattr(self._fd)
            settings = termios.tcgetattr(self._fd)
            settings[3] &= ~(termios.ICANON | termios.ECHO)
            settings[6] = list(settings[6])
            settings[6][termios.VMIN] = 1
            settings[6][termios.VTIME] = 0
            termios.tcsetattr(self._fd, termios.TCSANOW, settings)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._saved is not None and termios is not None:
            termios.tcsetattr(self._fd, termios.TCSANOW, self._saved)
            self._saved = None

    def key_pressed(self) -> bool:
        """Tell whether a key is waiting to be read."""
        if self._pending:
            return True
        ready, _, _ = select.select([self._fd], [], [], 0)
        if not ready:
            return False
        self._pending = os.read(self._fd, 1)
        return bool(self._pending)

    def read_key(self) -> str:
        """Return the next key, waiting for one if none is pending."""
        data, self._pending = self._pending, b""
        if not data:
            data = os.read(self._fd, 1)
        if not data:
            raise EOFError("no more keyboard input")
        return data.decode("latin-1")

    def drain(self) -> str:
        """Discard every key already typed and return them."""
        keys = []
        while self.key_pressed():
            keys.append(self.read_key())
        return "".join(keys)