"""A ten-cell snake crawling to the right until 'a' is pressed."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Iterable
from typing import IO

from serpent.terminal import Keyboard, Screen

HEAD = "O"
BODY = "X"
SNAKE_LENGTH = 10
QUIT_KEY = "a"
PAUSE = 0.1
MIN_COORDINATE = 1
MAX_COORDINATE = 40


class StraightSnake:
    """A snake laid out horizontally behind its head."""

    def __init__(self, x: int, y: int, length: int = SNAKE_LENGTH) -> None:
        if length < 1:
            raise ValueError("a snake needs at least a head")
        self.length = length
        self.head = (x, y)
        self.segments = self._layout()

    def _layout(self) -> list[tuple[int, int]]:
        hx, hy = self.head
        return [(hx - i, hy) for i in range(self.length)]

    def draw(self, screen: Screen) -> None:
        """Draw the head, then the body cells that lie on the screen."""
        screen.put(*self.head, HEAD)
        self.segments = self._layout()
        for x, y in self.segments[1:]:
            if x > 0 and y > 0:
                screen.put(x, y, BODY)

    def advance(self, screen: Screen) -> None:
        """Erase the tail, move the head one column right and redraw."""
        screen.erase(*self.segments[-1])
        hx, hy = self.head
        self.head = (hx + 1, hy)
        self.draw(screen)


def run_straight(
    screen: Screen, keyboard: Keyboard, snake: StraightSnake, pause: float = PAUSE
) -> int:
    """Move the snake until the quit key is read; return the number of moves."""
    snake.draw(screen)
    screen.flush()
    moves = 0
    while True:
        time.sleep(pause)
        snake.advance(screen)
        screen.flush()
        moves += 1
        if keyboard.key_pressed() and keyboard.read_key() == QUIT_KEY:
            screen.clear()
            screen.flush()
            return moves


def _ask_position(axis: str, lines: Iterable[str], out: IO[str]) -> int:
    prompt = f"Selectionnez les coordonées {axis.upper()} de votre sperpent entre 1 et 40 : "
    source = iter(lines)
    out.write(prompt)
    out.flush()
    while True:
        try:
            line = next(source)
        except StopIteration:
            raise EOFError(f"no value given for {axis}") from None
        try:
            value = int(line.strip())
        except ValueError:
            value = None
        if value is not None and MIN_COORDINATE <= value <= MAX_COORDINATE:
            return value
        out.write(f"Erreur valeur {axis.lower()} non correcte\n")
        out.write(prompt)
        out.flush()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Crawl a snake to the right; press 'a' to stop.")
    parser.add_argument("--pause", type=float, default=PAUSE, help="seconds between moves")
    args = parser.parse_args(argv)

    out = sys.stdout
    out.write("Pour arreter le serpent appuiyer sur 'a' à tout moment.\n")
    try:
        x = _ask_position("x", iter(sys.stdin.readline, ""), out)
        y = _ask_position("y", iter(sys.stdin.readline, ""), out)
    except EOFError:
        return 1

    screen = Screen(out)
    screen.clear()
    with Keyboard(sys.stdin) as keyboard:
        run_straight(screen, keyboard, StraightSnake(x, y), args.pause)
    return 0


if __name__ == "__main__":
    sys.exit(main())