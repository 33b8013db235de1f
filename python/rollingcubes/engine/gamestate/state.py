"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import time
from datetime import timedelta

from rollingcubes.models.board import Board
from rollingcubes.models.result import GameResult


class GameState:
    """Holds the current board, the player, step counter, and elapsed time."""

    def __init__(self, board: Board, player: str) -> None:
        self.board = board
        self.player = player
        self.steps: int = 0
        self._start_time: float = time.monotonic()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.monotonic() - self._start_time)
        return self._elapsed_banked

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += time.monotonic() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running:
            self._start_time = time.monotonic()
            self._running = True

    # -- steps ----------------------------------------------------------------

    def increment_steps(self) -> None:
        self.steps += 1

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()

    def to_result(self) -> GameResult:
        return GameResult(
            player=self.player,
            solved=self.is_solved,
            steps=self.steps,
            duration=timedelta(seconds=self.elapsed_time),
        )
