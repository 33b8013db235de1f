"""Core gameplay logic — processes rolls and checks the win condition."""

from __future__ import annotations

import logging

from rollingcubes.config import GOAL
from rollingcubes.engine.gamestate import GameState
from rollingcubes.models.board import Board
from rollingcubes.models.direction import Direction
from rollingcubes.models.result import GameResult

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self, player: str, board: Board | None = None, goal: int = GOAL) -> None:
        if board is None:
            board = Board.initial(goal=goal)
        self.state = GameState(board, player)

    # -- movement (direction = where the *cube* rolls) ------------------------

    def move(self, direction: Direction) -> bool:
        """Roll a cube in *direction* into the adjacent empty cell.

        E.g. ``Direction.UP`` rolls the cube **below** the empty cell upward.
        Returns True if the move was valid.
        """
        er, ec = self.state.board.empty_pos
        return self.roll(er - direction.dx, ec - direction.dy)

    def roll(self, row: int, col: int) -> bool:
        """Roll the cube at (row, col) into the adjacent empty cell.

        Returns True if the cube was adjacent to the empty cell and the roll
        was applied.
        """
        board = self.state.board
        if not board.can_roll_to_empty(row, col):
            return False

        board.roll_to_empty(row, col)
        self.state.increment_steps()
        if board.is_solved():
            logger.info("%s solved the puzzle in %d steps", self.state.player, self.state.steps)
        return True

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

    def finish(self) -> GameResult:
        """Stop the clock and return the session's result."""
        self.state.pause()
        return self.state.to_result()
