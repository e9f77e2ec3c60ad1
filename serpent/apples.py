"""Snake on a board with holes in its border: eat ten apples to win."""

from __future__ import annotations

import argparse
import random
import sys
import time
from enum import Enum

from serpent.direction import QUIT_KEY, Direction, resolve_key
from serpent.terminal import Keyboard, Screen
from serpent.walls import (
    BLANK,
    BLOCK_COUNT,
    BLOCK_HEIGHT,
    BLOCK_WIDTH,
    BODY,
    BOTTOM_BORDER,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    HEAD,
    INTRO_SECONDS,
    INTRODUCTION,
    LEFT_BORDER,
    RIGHT_BORDER,
    SNAKE_LENGTH,
    START_X,
    START_Y,
    TOP_BORDER,
    WALL,
)
from serpent.walls import place_blocks as _place_walled_blocks

APPLE = "6"
APPLE_COUNT = 10
PAUSE = 0.15
ACCELERATION = 0.01
END_PAUSE = 1.0

HOLE_X = (FIELD_WIDTH + 1) // 2 + LEFT_BORDER
HOLE_Y = (FIELD_HEIGHT + 1) // 2 + TOP_BORDER


class Outcome(Enum):
    """What a single move of the game led to."""

    PLAYING = "playing"
    QUIT = "quit"
    CRASHED = "crashed"
    WON = "won"


def place_blocks(rng: random.Random, count: int = BLOCK_COUNT) -> list[tuple[int, int]]:
    """Pick the top-left corners of ``count`` blocks clear of borders and spawn."""
    return _place_walled_blocks(rng, count)


def _visible(x: int, y: int) -> bool:
    return LEFT_BORDER <= x < RIGHT_BORDER and TOP_BORDER <= y < BOTTOM_BORDER


def _wrap(x: int, y: int) -> tuple[int, int]:
    """Carry a head that left the field through a hole to the opposite side."""
    if x == RIGHT_BORDER:
        x = LEFT_BORDER - 1
    elif x == LEFT_BORDER - 1:
        x = RIGHT_BORDER
    elif y == BOTTOM_BORDER:
        y = TOP_BORDER - 1
    elif y == TOP_BORDER - 1:
        y = BOTTOM_BORDER
    return x, y


class HoledBoard:
    """A walled field with one hole in the middle of each side, and blocks inside."""

    def __init__(self, rng: random.Random) -> None:
        walls = set()
        for x in range(RIGHT_BORDER):
            for y in range(BOTTOM_BORDER):
                horizontal = y in (TOP_BORDER, BOTTOM_BORDER - 1) and x >= LEFT_BORDER and x != HOLE_X
                vertical = x in (LEFT_BORDER, RIGHT_BORDER - 1) and y >= TOP_BORDER and y != HOLE_Y
                if horizontal or vertical:
                    walls.add((x, y))
        self.blocks = place_blocks(rng, BLOCK_COUNT)
        for bx, by in self.blocks:
            walls.update(
                (bx + dx, by + dy) for dx in range(BLOCK_WIDTH) for dy in range(BLOCK_HEIGHT)
            )
        self.walls = frozenset(walls)

    def is_wall(self, x: int, y: int) -> bool:
        return (x, y) in self.walls

    def draw(self, screen: Screen) -> None:
        """Draw every cell of the board, from the top-left corner at (0, 0)."""
        for x in range(RIGHT_BORDER):
            for y in range(BOTTOM_BORDER):
                screen.put(x, y, WALL if self.is_wall(x, y) else BLANK)


class AppleGame:
    """State of one game: board, snake, apple and score."""

    def __init__(self, screen: Screen, rng: random.Random) -> None:
        self.screen = screen
        self.rng = rng
        self.board = HoledBoard(rng)
        self.segments = [(START_X - i, START_Y) for i in range(SNAKE_LENGTH)]
        self.length = SNAKE_LENGTH
        self.score = 0
        self.apple: tuple[int, int] | None = None

    @property
    def head(self) -> tuple[int, int]:
        return self.segments[0]

    def _random_cell(self) -> tuple[int, int]:
        return self.rng.randrange(RIGHT_BORDER), self.rng.randrange(BOTTOM_BORDER)

    def _apple_allowed(self, x: int, y: int) -> bool:
        return (
            x > LEFT_BORDER
            and y > TOP_BORDER
            and not self.board.is_wall(x, y)
            and (x, y) not in self.segments
        )

    def place_apple(self) -> tuple[int, int]:
        """Put a new apple on a free cell inside the board, draw it and return it."""
        apple = self._random_cell()
        while not self._apple_allowed(*apple):
            apple = self._random_cell()
        self.apple = apple
        self.screen.put(*apple, APPLE)
        return apple

    def draw_snake(self) -> None:
        """Draw the visible body cells, then the head."""
        for x, y in self.segments[1:]:
            if _visible(x, y):
                self.screen.put(x, y, BODY)
        if _visible(*self.head):
            self.screen.put(*self.head, HEAD)

    def step(self, key: str) -> Outcome:
        """Move the snake one cell according to ``key`` and report the outcome."""
        if len(self.segments) >= self.length:
            tail = self.segments[-1]
            if _visible(*tail):
                self.screen.erase(*tail)
            body = self.segments[: self.length - 1]
        else:
            body = self.segments
        head = self.head
        try:
            head = Direction.from_key(key).step(*head)
        except ValueError:
            pass
        head = _wrap(*head)
        self.segments = [head] + body
        if key != QUIT_KEY:
            self.draw_snake()

        collided = self.board.is_wall(*head) or head in self.segments[1:]

        if head == self.apple:
            self.length += 1
            self.score += 1
            if self.score < APPLE_COUNT:
                self.place_apple()
            else:
                self.apple = None

        if key == QUIT_KEY:
            return Outcome.QUIT
        if collided:
            return Outcome.CRASHED
        if self.score == APPLE_COUNT:
            return Outcome.WON
        return Outcome.PLAYING

    def delay(self) -> float:
        """Seconds to wait before the next move; shorter with every apple eaten."""
        return PAUSE - self.score * ACCELERATION


def run_apples(screen: Screen, keyboard: Keyboard, rng: random.Random) -> Outcome:
    """Play one game to its end and return how it ended."""
    game = AppleGame(screen, rng)
    keyboard.drain()
    key = Direction.RIGHT.value
    previous = key
    screen.clear()
    game.board.draw(screen)
    game.place_apple()
    game.draw_snake()
    screen.flush()
    while True:
        time.sleep(game.delay())
        if keyboard.key_pressed():
            key = resolve_key(previous, keyboard.read_key())
        outcome = game.step(key)
        screen.flush()
        previous = key
        if outcome is not Outcome.PLAYING:
            time.sleep(END_PAUSE)
            screen.clear()
            screen.stream.write("\n")
            screen.flush()
            return outcome


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Steer a snake with ZQSD and eat the apples; press 'a' to stop."
    )
    parser.add_argument(
        "--intro-seconds", type=int, default=INTRO_SECONDS, help="countdown before the start"
    )
    args = parser.parse_args(argv)

    out = sys.stdout
    out.write(INTRODUCTION)
    for remaining in range(args.intro_seconds, 0, -1):
        out.write(f"{remaining} ")
        out.flush()
        time.sleep(1)

    screen = Screen(out)
    with Keyboard(sys.stdin) as keyboard:
        run_apples(screen, keyboard, random.Random())
    return 0


if __name__ == "__main__":
    sys.exit(main())