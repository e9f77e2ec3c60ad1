"""Movement directions steered with the Z, Q, S and D keys."""

from __future__ import annotations

from enum import Enum

QUIT_KEY = "a"


class Direction(Enum):
    """A move of one cell, named by the key that selects it."""

    UP = "z"
    DOWN = "s"
    RIGHT = "d"
    LEFT = "q"

    @classmethod
    def from_key(cls, key: str) -> "Direction":
        """Return the direction bound to ``key``; raise ValueError otherwise."""
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"{key!r} is not a direction key") from None

    def opposite(self) -> "Direction":
        """Return the direction pointing the other way."""
        return _OPPOSITES[self]

    def step(self, x: int, y: int) -> tuple[int, int]:
        """Return the cell one move away from (x, y)."""
        dx, dy = _OFFSETS[self]
        return x + dx, y + dy


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.RIGHT: Direction.LEFT,
    Direction.LEFT: Direction.RIGHT,
}

_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.RIGHT: (1, 0),
    Direction.LEFT: (-1, 0),
}


def _as_direction(key: str) -> Direction | None:
    try:
        return Direction.from_key(key)
    except ValueError:
        return None


def resolve_key(previous: str, pressed: str) -> str:
    """Return the key to act on after ``pressed`` follows ``previous``.

    A key that would turn the snake back on itself, or that is neither a
    direction nor the quit key, is ignored and ``previous`` is kept.
    """
    if pressed == QUIT_KEY:
        return pressed
    wanted = _as_direction(pressed)
    if wanted is None:
        return previous
    current = _as_direction(previous)
    if current is not None and wanted is current.opposite():
        return previous
    return pressed