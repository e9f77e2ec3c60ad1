"""A steered snake on a walled board with random blocks; touching a wall kills it."""

from __future__ import annotations

import argparse
import random
import sys
import time

from serpent.direction import QUIT_KEY, Direction, resolve_key
from serpent.terminal import Keyboard, Screen

HEAD = "O"
BODY = "X"
WALL = "#"
BLANK = " "
SNAKE_LENGTH = 10

FIELD_WIDTH = 80
FIELD_HEIGHT = 40
LEFT_BORDER = 1
TOP_BORDER = 1
RIGHT_BORDER = FIELD_WIDTH + LEFT_BORDER + 1
BOTTOM_BORDER = FIELD_HEIGHT + TOP_BORDER + 1

START_X = LEFT_BORDER + 40
START_Y = TOP_BORDER + 20

BLOCK_COUNT = 4
BLOCK_WIDTH = 5
BLOCK_HEIGHT = 5
SPAWN_CLEARANCE = 3
BORDER_GAP = 1

MAX_BLOCKS = (
    FIELD_WIDTH * FIELD_HEIGHT
    - SNAKE_LENGTH
    - SPAWN_CLEARANCE
    - (RIGHT_BORDER - LEFT_BORDER) * BORDER_GAP * BORDER_GAP * 2
    - (BOTTOM_BORDER - TOP_BORDER - BORDER_GAP * 2) * BORDER_GAP * BORDER_GAP * 2
)

PAUSE = 0.3
INTRO_SECONDS = 3
INTRODUCTION = (
    "Pour arreter le serpent appuiyer sur 'a' à tout moment, "
    "pour vous deplacez utilisez les touches ZQSD.\nDebut dans : "
)

_X_CHOICES = RIGHT_BORDER - BLOCK_WIDTH - BORDER_GAP
_Y_CHOICES = BOTTOM_BORDER - BLOCK_HEIGHT - BORDER_GAP


def _block_allowed(x: int, y: int) -> bool:
    """Tell whether a block corner keeps clear of the borders and the spawn area."""
    if x <= LEFT_BORDER + BORDER_GAP or y <= TOP_BORDER + BORDER_GAP:
        return False
    near_spawn_x = START_X - SNAKE_LENGTH - BLOCK_WIDTH < x - 1 <= START_X + SPAWN_CLEARANCE - 1
    near_spawn_y = START_Y - BLOCK_HEIGHT < y <= START_Y
    return not (near_spawn_x and near_spawn_y)


def place_blocks(rng: random.Random, count: int = BLOCK_COUNT) -> list[tuple[int, int]]:
    """Pick the top-left corner of ``count`` blocks at random allowed positions."""
    if count < 0:
        raise ValueError("the number of blocks cannot be negative")
    count = min(count, MAX_BLOCKS)
    corners = []
    for _ in range(count):
        corner = (rng.randrange(_X_CHOICES), rng.randrange(_Y_CHOICES))
        while not _block_allowed(*corner):
            corner = (rng.randrange(_X_CHOICES), rng.randrange(_Y_CHOICES))
        corners.append(corner)
    return corners


class WalledBoard:
    """The playing field: a wall around its edge and square blocks inside."""

    def __init__(self, rng: random.Random) -> None:
        walls = {
            (x, y)
            for x in range(1, RIGHT_BORDER)
            for y in range(1, BOTTOM_BORDER)
            if y in (TOP_BORDER, BOTTOM_BORDER - 1) or x in (LEFT_BORDER, RIGHT_BORDER - 1)
        }
        self.blocks = place_blocks(rng, BLOCK_COUNT)
        for bx, by in self.blocks:
            walls.update(
                (bx + dx, by + dy) for dx in range(BLOCK_WIDTH) for dy in range(BLOCK_HEIGHT)
            )
        self.walls = frozenset(walls)

    def is_wall(self, x: int, y: int) -> bool:
        return (x, y) in self.walls

    def draw(self, screen: Screen) -> None:
        """Draw every cell of the field, walls and empty space alike."""
        for x in range(1, RIGHT_BORDER):
            for y in range(1, BOTTOM_BORDER):
                screen.put(x, y, WALL if self.is_wall(x, y) else BLANK)


class WallSnake:
    """A steered snake that dies on walls and on its own body."""

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
        """Draw the visible body cells, then the head."""
        for x, y in self.segments[1:]:
            if self.visible(x, y):
                screen.put(x, y, BODY)
        if self.visible(*self.head):
            screen.put(*self.head, HEAD)

    def advance(self, screen: Screen, key: str, board: WalledBoard) -> bool:
        """Move one cell according to ``key``; return True on a collision."""
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
        return board.is_wall(*head) or head in self.segments[1:]


def run_walls(
    screen: Screen, keyboard: Keyboard, rng: random.Random, pause: float = PAUSE
) -> bool:
    """Play one game; return True if the snake crashed, False if the player quit."""
    snake = WallSnake()
    keyboard.drain()
    key = Direction.RIGHT.value
    previous = key
    screen.clear()
    board = WalledBoard(rng)
    board.draw(screen)
    snake.draw(screen)
    screen.flush()
    while True:
        time.sleep(pause)
        if keyboard.key_pressed():
            key = resolve_key(previous, keyboard.read_key())
        collided = snake.advance(screen, key, board)
        screen.flush()
        previous = key
        if key == QUIT_KEY or collided:
            screen.clear()
            screen.stream.write("\n")
            screen.flush()
            return key != QUIT_KEY


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Steer a snake with ZQSD between walls; press 'a' to stop."
    )
    parser.add_argument("--pause", type=float, default=PAUSE, help="seconds between moves")
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
        run_walls(screen, keyboard, random.Random(), args.pause)
    return 0


if __name__ == "__main__":
    sys.exit(main())