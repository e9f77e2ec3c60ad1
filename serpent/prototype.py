"""First sketch of the snake: a one-cell snake walking to the right."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from typing import IO

from serpent.terminal import Screen

HEAD = "O"
BODY = "X"
MIN_COORDINATE = 1
MAX_COORDINATE = 40
PROTOTYPE_LENGTH = 1
STEPS = 10


def ask_coordinate(label: str, lines: Iterable[str], out: IO[str]) -> int:
    """Prompt until a coordinate between 1 and 40 is entered and return it."""
    source = iter(lines)
    out.write(f"entrer valeur {label}")
    out.flush()
    while True:
        try:
            line = next(source)
        except StopIteration:
            raise EOFError(f"no value given for {label}") from None
        try:
            value = int(line.strip())
        except ValueError:
            value = None
        if value is not None and MIN_COORDINATE <= value <= MAX_COORDINATE:
            return value
        out.write("valeur incorect\n")
        out.write(f"entrer valeur {label}\n")
        out.flush()


class PrototypeSnake:
    """A snake whose head moves one column to the right at each step."""

    def __init__(self, x: int, y: int, length: int = PROTOTYPE_LENGTH) -> None:
        if length < 1:
            raise ValueError("a snake needs at least a head")
        self.segments = [(x - i, y) for i in range(length)]

    @property
    def head(self) -> tuple[int, int]:
        return self.segments[0]

    def draw(self, screen: Screen) -> None:
        """Draw the head then every body segment."""
        screen.put(*self.head, HEAD)
        for x, y in self.segments[1:]:
            screen.put(x, y, BODY)

    def advance(self, screen: Screen) -> None:
        """Erase the tail end, shift columns towards the tail, move the head."""
        for i in range(len(self.segments) - 1, 1, -1):
            screen.erase(*self.segments[i])
            self.segments[i] = (self.segments[i - 1][0], self.segments[i][1])
        hx, hy = self.head
        screen.erase(hx, hy)
        self.segments[0] = (hx + 1, hy)


def run_prototype(screen: Screen, x: int, y: int, steps: int = STEPS) -> PrototypeSnake:
    """Walk a snake from (x, y) for ``steps`` moves per segment and draw it."""
    snake = PrototypeSnake(x, y)
    for _ in snake.segments[:]:
        for _ in range(steps):
            snake.draw(screen)
            snake.advance(screen)
        snake.draw(screen)
    screen.stream.write("\n\n")
    screen.flush()
    return snake


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Walk a snake across the terminal.")
    parser.add_argument("--steps", type=int, default=STEPS, help="moves to make")
    args = parser.parse_args(argv)

    screen = Screen(sys.stdout)
    screen.clear()
    try:
        x = ask_coordinate("x", sys.stdin, sys.stdout)
        y = ask_coordinate("y", sys.stdin, sys.stdout)
    except EOFError:
        return 1
    screen.clear()
    run_prototype(screen, x, y, args.steps)
    return 0


if __name__ == "__main__":
    sys.exit(main())