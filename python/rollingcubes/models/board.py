"""Board model for the rolling cubes puzzle."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from rollingcubes.config import GOAL, SIZE
from rollingcubes.errors import InvalidBoardError, InvalidMoveError, InvalidValueError
from rollingcubes.models.cube import Cube
from rollingcubes.models.direction import Direction

logger = logging.getLogger(__name__)

INITIAL: tuple[tuple[int, ...], ...] = (
    (1, 0, 1, 1),
    (1, 1, 1, 1),
    (1, 1, 1, 1),
    (1, 1, 1, 1),
)

# Reference layout for tutorials and tests; the engine never reads it.
NEAR_GOAL: tuple[tuple[int, ...], ...] = (
    (1, 1, 1, 1),
    (1, 1, 1, 1),
    (1, 1, 1, 1),
    (1, 0, 1, 1),
)


@dataclass
class Board:
    """The 4×4 tray of cubes.

    ``tiles`` holds one :class:`Cube` per cell and ``empty_pos`` the
    ``(row, col)`` of the single empty cell.  The board is solved when every
    cube shows ``goal``.
    """

    tiles: list[list[Cube]]
    empty_pos: tuple[int, int]
    goal: Cube = Cube(GOAL)

    def __post_init__(self) -> None:
        self._validate()

    # -- construction helpers -------------------------------------------------

    @classmethod
    def initial(cls, goal: int = GOAL) -> Board:
        """Return the canonical starting board."""
        return cls.from_rows(INITIAL, goal=goal)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]] | None, goal: int = GOAL) -> Board:
        """Create a board from a 4×4 layout of cube codes.

        Example::

            Board.from_rows([[1, 0, 1, 1], [1, 1, 1, 1], [1, 1, 1, 1], [1, 1, 1, 1]])
        """
        if rows is None or len(rows) != SIZE:
            raise InvalidBoardError(f"Expected {SIZE} rows, got {rows!r}.")

        tiles: list[list[Cube]] = []
        empty_cells: list[tuple[int, int]] = []
        for r, row in enumerate(rows):
            if row is None or len(row) != SIZE:
                raise InvalidBoardError(f"Row {r} must hold {SIZE} cells, got {row!r}.")
            cubes: list[Cube] = []
            for c, value in enumerate(row):
                try:
                    cube = Cube.of(value)
                except InvalidValueError as exc:
                    raise InvalidBoardError(f"Cell ({r}, {c}): {exc}") from exc
                if cube is Cube.EMPTY:
                    empty_cells.append((r, c))
                cubes.append(cube)
            tiles.append(cubes)

        if len(empty_cells) != 1:
            raise InvalidBoardError(
                f"Expected exactly one empty cell, found {len(empty_cells)}."
            )
        return cls(tiles=tiles, empty_pos=empty_cells[0], goal=_goal_cube(goal))

    def _validate(self) -> None:
        if len(self.tiles) != SIZE or any(len(row) != SIZE for row in self.tiles):
            raise InvalidBoardError(f"The board must be {SIZE}×{SIZE}.")
        if not all(isinstance(cube, Cube) for row in self.tiles for cube in row):
            raise InvalidBoardError("Every cell must hold a Cube.")
        empties = sum(cube is Cube.EMPTY for row in self.tiles for cube in row)
        if empties != 1:
            raise InvalidBoardError(f"Expected exactly one empty cell, found {empties}.")
        er, ec = self.empty_pos
        if not (0 <= er < SIZE and 0 <= ec < SIZE) or self.tiles[er][ec] is not Cube.EMPTY:
            raise InvalidBoardError(f"{self.empty_pos} is not the empty cell.")
        self.goal = _goal_cube(self.goal)

    # -- queries --------------------------------------------------------------

    def get_cube(self, row: int, col: int) -> Cube:
        return self.tiles[row][col]

    def to_rows(self) -> list[list[int]]:
        return [[cube.to_int() for cube in row] for row in self.tiles]

    def is_solved(self) -> bool:
        """Check if every cube shows the goal face. The empty cell is ignored."""
        return all(
            cube is Cube.EMPTY or cube is self.goal
            for row in self.tiles
            for cube in row
        )

    def can_roll_to_empty(self, row: int, col: int) -> bool:
        """Check if the cube at (row, col) is a direct neighbour of the empty cell."""
        er, ec = self.empty_pos
        return (
            0 <= row < SIZE
            and 0 <= col < SIZE
            and abs(er - row) + abs(ec - col) == 1
        )

    def legal_moves(self) -> list[tuple[int, int]]:
        """Return every cell that can roll into the empty cell."""
        er, ec = self.empty_pos
        moves: list[tuple[int, int]] = []
        for direction in Direction:
            r, c = er + direction.dx, ec + direction.dy
            if self.can_roll_to_empty(r, c):
                moves.append((r, c))
        return moves

    def roll_direction(self, row: int, col: int) -> Direction:
        """Return the direction the cube at (row, col) travels to reach the empty cell."""
        if not self.can_roll_to_empty(row, col):
            raise InvalidMoveError(f"The cube at ({row}, {col}) cannot roll to the empty cell.")
        er, ec = self.empty_pos
        return Direction.of(er - row, ec - col)

    # -- mutation -------------------------------------------------------------

    def roll_to_empty(self, row: int, col: int) -> Direction:
        """Roll the cube at (row, col) into the empty cell.

        The cube and the empty cell swap places and the cube's top face
        changes according to the direction it travelled, which is returned.
        An illegal move raises :class:`InvalidMoveError` and leaves the board
        untouched.
        """
        direction = self.roll_direction(row, col)
        logger.info("Cube at (%d, %d) is rolled %s", row, col, direction)
        er, ec = self.empty_pos
        self.tiles[er][ec] = self.tiles[row][col].roll_to(direction)
        self.tiles[row][col] = Cube.EMPTY
        self.empty_pos = (row, col)
        return direction

    def copy(self) -> Board:
        return Board(
            tiles=[row[:] for row in self.tiles],
            empty_pos=self.empty_pos,
            goal=self.goal,
        )

    def __str__(self) -> str:
        return "\n".join(" ".join(str(cube) for cube in row) for row in self.tiles)


def _goal_cube(goal: int) -> Cube:
    try:
        cube = Cube.of(goal)
    except InvalidValueError as exc:
        raise InvalidBoardError(f"Invalid goal face: {exc}") from exc
    if cube is Cube.EMPTY:
        raise InvalidBoardError("The goal face cannot be empty.")
    return cube
