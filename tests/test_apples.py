import io
import random
from unittest import mock

import pytest

from serpent.apples import (
    ACCELERATION,
    APPLE,
    APPLE_COUNT,
    BOTTOM_BORDER,
    HOLE_X,
    HOLE_Y,
    LEFT_BORDER,
    PAUSE,
    RIGHT_BORDER,
    SNAKE_LENGTH,
    START_X,
    START_Y,
    TOP_BORDER,
    AppleGame,
    HoledBoard,
    Outcome,
    place_blocks,
    run_apples,
)
from serpent.terminal import Screen, cursor_to


class FakeKeyboard:
    def __init__(self, keys, early=""):
        self.keys = list(keys)
        self.early = early
        self.drained = None

    def drain(self):
        self.drained, self.early = self.early, ""
        return self.drained

    def key_pressed(self):
        return bool(self.keys)

    def read_key(self):
        return self.keys.pop(0)


def make_game(seed=1):
    stream = io.StringIO()
    return AppleGame(Screen(stream), random.Random(seed)), stream


def test_border_has_holes_in_the_middle_of_each_side():
    board = HoledBoard(random.Random(3))
    assert not board.is_wall(HOLE_X, TOP_BORDER)
    assert not board.is_wall(HOLE_X, BOTTOM_BORDER - 1)
    assert not board.is_wall(LEFT_BORDER, HOLE_Y)
    assert not board.is_wall(RIGHT_BORDER - 1, HOLE_Y)
    assert board.is_wall(HOLE_X - 1, TOP_BORDER)
    assert board.is_wall(LEFT_BORDER, HOLE_Y - 1)


def test_board_outside_cells_are_not_walls():
    board = HoledBoard(random.Random(3))
    assert not board.is_wall(0, 0)
    assert not board.is_wall(RIGHT_BORDER, HOLE_Y)


def test_board_draw_covers_every_cell_from_origin():
    stream = io.StringIO()
    HoledBoard(random.Random(5)).draw(Screen(stream))
    text = stream.getvalue()
    assert text.count("\033[") == RIGHT_BORDER * BOTTOM_BORDER
    assert text.startswith(cursor_to(0, 0) + " ")
    assert cursor_to(LEFT_BORDER, TOP_BORDER) + "#" in text


def test_board_blocks_are_walls():
    board = HoledBoard(random.Random(8))
    assert len(board.blocks) == 4
    for bx, by in board.blocks:
        assert board.is_wall(bx, by)
        assert board.is_wall(bx + 4, by + 4)


@pytest.mark.parametrize("seed", range(10))
def test_place_blocks_keeps_clear_of_border(seed):
    corners = place_blocks(random.Random(seed), 6)
    assert len(corners) == 6
    assert all(x > LEFT_BORDER + 1 and y > TOP_BORDER + 1 for x, y in corners)


def test_place_blocks_is_deterministic_for_a_seed():
    six = place_blocks(random.Random(42), 6)
    three = place_blocks(random.Random(42), 3)
    assert len(six) == 6
    assert six[:3] == three
    assert place_blocks(random.Random(42), 6) == six


def test_place_blocks_rejects_negative_count():
    with pytest.raises(ValueError):
        place_blocks(random.Random(0), -1)


def test_new_game_starts_with_snake_lying_left_of_start():
    game, _ = make_game()
    assert game.head == (START_X, START_Y)
    assert len(game.segments) == SNAKE_LENGTH
    assert game.segments[-1] == (START_X - SNAKE_LENGTH + 1, START_Y)
    assert game.score == 0


@pytest.mark.parametrize("seed", range(15))
def test_place_apple_lands_on_free_cell_and_is_drawn(seed):
    game, stream = make_game(seed)
    x, y = game.place_apple()
    assert game.apple == (x, y)
    assert LEFT_BORDER < x < RIGHT_BORDER
    assert TOP_BORDER < y < BOTTOM_BORDER
    assert not game.board.is_wall(x, y)
    assert (x, y) not in game.segments
    assert stream.getvalue() == cursor_to(x, y) + APPLE


def test_step_right_moves_and_draws():
    game, stream = make_game()
    tail = game.segments[-1]
    assert game.step("d") is Outcome.PLAYING
    assert game.head == (START_X + 1, START_Y)
    assert len(game.segments) == SNAKE_LENGTH
    text = stream.getvalue()
    assert text.startswith(cursor_to(*tail) + " ")
    assert text.endswith(cursor_to(START_X + 1, START_Y) + "O")


def test_quit_key_stops_without_redrawing():
    game, stream = make_game()
    tail = game.segments[-1]
    assert game.step("a") is Outcome.QUIT
    assert game.head == (START_X, START_Y)
    assert stream.getvalue() == cursor_to(*tail) + " "


def test_hitting_the_border_crashes():
    game, _ = make_game()
    game.segments = [(80 - i, 5) for i in range(SNAKE_LENGTH)]
    assert game.step("d") is Outcome.CRASHED


def test_running_into_own_body_crashes():
    game, _ = make_game()
    game.segments = [(10, 10), (11, 10), (11, 11), (10, 11), (9, 11), (9, 10),
                     (8, 10), (7, 10), (6, 10), (5, 10)]
    assert game.step("s") is Outcome.CRASHED


def test_leaving_right_hole_wraps_to_left_side():
    game, stream = make_game()
    game.segments = [(RIGHT_BORDER - 1 - i, HOLE_Y) for i in range(SNAKE_LENGTH)]
    assert game.step("d") is Outcome.PLAYING
    assert game.head == (LEFT_BORDER - 1, HOLE_Y)
    assert cursor_to(LEFT_BORDER - 1, HOLE_Y) not in stream.getvalue()
    assert game.step("d") is Outcome.PLAYING
    assert game.head == (LEFT_BORDER, HOLE_Y)


def test_leaving_left_hole_wraps_to_right_side():
    game, _ = make_game()
    game.segments = [(LEFT_BORDER + i, HOLE_Y) for i in range(SNAKE_LENGTH)]
    assert game.step("q") is Outcome.PLAYING
    assert game.head == (RIGHT_BORDER, HOLE_Y)
    assert game.step("q") is Outcome.PLAYING
    assert game.head == (RIGHT_BORDER - 1, HOLE_Y)


def test_leaving_top_hole_wraps_to_bottom():
    game, _ = make_game()
    game.segments = [(HOLE_X, TOP_BORDER + 1 + i) for i in range(SNAKE_LENGTH)]
    assert game.step("z") is Outcome.PLAYING
    assert game.head == (HOLE_X, TOP_BORDER)
    assert game.step("z") is Outcome.PLAYING
    assert game.head == (HOLE_X, BOTTOM_BORDER)
    assert game.step("z") is Outcome.PLAYING
    assert game.head == (HOLE_X, BOTTOM_BORDER - 1)


def test_eating_an_apple_grows_the_snake():
    game, _ = make_game()
    game.apple = (START_X + 1, START_Y)
    assert game.step("d") is Outcome.PLAYING
    assert game.score == 1
    assert game.length == SNAKE_LENGTH + 1
    assert game.apple != (START_X + 1, START_Y)
    assert not game.board.is_wall(*game.apple)
    tail = game.segments[-1]
    game.apple = None
    assert game.step("d") is Outcome.PLAYING
    assert len(game.segments) == SNAKE_LENGTH + 1
    assert game.segments[-1] == tail


def test_last_apple_wins():
    game, _ = make_game()
    game.score = APPLE_COUNT - 1
    game.apple = (START_X + 1, START_Y)
    assert game.step("d") is Outcome.WON
    assert game.score == APPLE_COUNT
    assert game.apple is None


def test_delay_shrinks_with_score():
    game, _ = make_game()
    assert game.delay() == pytest.approx(PAUSE)
    game.score = 3
    assert game.delay() == pytest.approx(PAUSE - 3 * ACCELERATION)
    assert PAUSE == pytest.approx(0.15)


@mock.patch("serpent.apples.time.sleep")
def test_run_apples_quits_on_a(sleep):
    stream = io.StringIO()
    keyboard = FakeKeyboard(["a"], early="zq")
    outcome = run_apples(Screen(stream), keyboard, random.Random(2))
    assert outcome is Outcome.QUIT
    assert keyboard.drained == "zq"
    assert stream.getvalue().endswith("\033[H\033[2J\n")
    assert sleep.call_count == 2


@mock.patch("serpent.apples.time.sleep")
def test_run_apples_ends_when_snake_crashes(sleep):
    stream = io.StringIO()
    keyboard = FakeKeyboard(["d", "z"])
    outcome = run_apples(Screen(stream), keyboard, random.Random(4))
    assert outcome is Outcome.CRASHED
    assert stream.getvalue().endswith("\n")