"""A snake steered with Z, Q, S and D inside a bordered area; 'a' quits."""

from __future__ import annotations

import argparse
import sys
import time

from serpent.direction import QUIT_KEY, Direction, resolve_key
from serpent.terminal import Keyboard, Screen

HEAD = "O"
BODY = "X"
SNAKE_LENGTH = 10
START_X = 20
START_Y = 20
PAUSE = 0.09
INTRO_PAUSE = 3.0
LEFT_BORDER = 0
TOP_BORDER = 0
RIGHT_BORDER = 100
BOTTOM_BORDER = 30
INTRODUCTION = (
    "Pour arreter le serpent appuiyer sur 'a' à tout moment, "
    "pour vous deplacez utilisez les touches ZQSD.\n"
)


class SteeringSnake:
    """A snake that follows its head in whichever direction it is steered."""

    def __init__(self, x: int = START_X, y: int = START_Y, length: int = SNAKE_LENGTH) -> None:
        if length < 1:
            raise ValueError("a snake needs at least a head")
        self.segments = [(x - i, y) for i in range(length)]

    @property
    def head(self) -> tuple[int, int]:
        return self.segments[0]

    def visible(self, x: int, y: int) -> bool:
        """Tell whether (x, y) lies strictly inside the borders."""
        return LEFT_BORDER < x < RIGHT_BORDER and TOP_BORDER < y < BOTTOM_BORDER

    def draw(self, screen: Screen) -> None:
        """Draw the visible body cells except the last, then the head."""
        for x, y in self.segments[1:-1]:
            if self.visible(x, y):
                screen.put(x, y, BODY)
        if self.visible(*self.head):
            screen.put(*self.head, HEAD)

    def advance(self, screen: Screen, key: str) -> None:
        """Move one cell according to ``key`` and redraw unless it is the quit key."""
        tail = self.segments[-1]
        if self.visible(*tail):
            screen.erase(*tail)
        head = self.head
        try:
            head = Direction.from_key(key).step(*head)
        except ValueError:
            pass
        self.segments = [head] + self.segments[:-1]
        if key != QUIT_KEY:
            self.draw(screen)


def run_steering(
    screen: Screen, keyboard: Keyboard, snake: SteeringSnake, pause: float = PAUSE
) -> int:
    """Play until the quit key is pressed; return the number of moves made."""
    keyboard.drain()
    key = Direction.RIGHT.value
    previous = key
    screen.clear()
    snake.draw(screen)
    screen.flush()
    moves = 0
    while key != QUIT_KEY:
        time.sleep(pause)
        if keyboard.key_pressed():
            key = resolve_key(previous, keyboard.read_key())
        snake.advance(screen, key)
        screen.flush()
        moves += 1
        previous = key
    screen.clear()
    screen.stream.write("\n")
    screen.flush()
    return moves


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Steer a snake with ZQSD; press 'a' to stop.")
    parser.add_argument("--pause", type=float, default=PAUSE, help="seconds between moves")
    parser.add_argument(
        "--intro-pause", type=float, default=INTRO_PAUSE, help="seconds to read the rules"
    )
    args = parser.parse_args(argv)

    out = sys.stdout
    out.write(INTRODUCTION)
    out.flush()
    time.sleep(args.intro_pause)

    screen = Screen(out)
    with Keyboard(sys.stdin) as keyboard:
        run_steering(screen, keyboard, SteeringSnake(), args.pause)
    return 0


if __name__ == "__main__":
    sys.exit(main())