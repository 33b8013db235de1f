"""Game session tests — step counting, keyboard moves, and results."""

from __future__ import annotations

import pytest

from rollingcubes.engine.gameplay import GamePlay
from rollingcubes.models.board import Board
from rollingcubes.models.cube import Cube
from rollingcubes.models.direction import Direction


def _almost_solved() -> Board:
    rows = [[2] * 4 for _ in range(4)]
    rows[0][1] = 0
    rows[1][1] = 6
    return Board.from_rows(rows)


def test_new_game_starts_from_initial_board() -> None:
    game = GamePlay("alice")
    assert game.state.board == Board.initial()
    assert game.state.steps == 0
    assert not game.is_won


def test_roll_counts_steps() -> None:
    game = GamePlay("alice")
    assert game.roll(0, 0)
    assert game.roll(0, 1)
    assert game.state.steps == 2


@pytest.mark.parametrize("pos", [(0, 1), (3, 3), (2, 1), (-1, 1)])
def test_illegal_roll_is_not_counted(pos: tuple[int, int]) -> None:
    game = GamePlay("alice")
    before = game.state.board.copy()

    assert not game.roll(*pos)
    assert game.state.steps == 0
    assert game.state.board == before


@pytest.mark.parametrize(
    "direction,source",
    [
        (Direction.UP, (1, 1)),
        (Direction.RIGHT, (0, 0)),
        (Direction.LEFT, (0, 2)),
    ],
)
def test_move_rolls_the_cube_opposite_the_direction(
    direction: Direction, source: tuple[int, int]
) -> None:
    game = GamePlay("alice")
    assert game.move(direction)
    assert game.state.board.empty_pos == source
    assert game.state.board.get_cube(0, 1) is Cube.CUBE1.roll_to(direction)


def test_move_off_the_board_is_rejected() -> None:
    game = GamePlay("alice")
    assert not game.move(Direction.DOWN)
    assert game.state.steps == 0


def test_finish_reports_solved_game() -> None:
    game = GamePlay("bob", board=_almost_solved())
    assert game.roll(1, 1)
    assert game.is_won

    result = game.finish()
    assert result.player == "bob"
    assert result.solved
    assert result.steps == 1
    assert result.duration.total_seconds() >= 0
    assert result.created is None


def test_finish_reports_abandoned_game() -> None:
    game = GamePlay("bob")
    game.roll(0, 0)
    result = game.finish()
    assert not result.solved
    assert result.steps == 1


def test_paused_clock_does_not_advance() -> None:
    game = GamePlay("bob")
    game.state.pause()
    elapsed = game.state.elapsed_time
    assert game.state.elapsed_time == elapsed
    game.state.resume()
    assert game.state.elapsed_time >= elapsed


def test_custom_goal() -> None:
    game = GamePlay("carol", goal=1)
    assert game.is_won
