"""Cube orientations and the roll transition table."""

from __future__ import annotations

from enum import IntEnum

from rollingcubes.errors import InvalidValueError, UnsupportedOperationError
from rollingcubes.models.direction import Direction


class Cube(IntEnum):
    """The face shown on top of a die, or ``EMPTY`` for the vacant cell.

    Opposite faces sum to seven (1-6, 2-5, 3-4).
    """

    EMPTY = 0
    CUBE1 = 1
    CUBE2 = 2
    CUBE3 = 3
    CUBE4 = 4
    CUBE5 = 5
    CUBE6 = 6

    @classmethod
    def of(cls, value: int) -> Cube:
        """Return the cube for the integer code *value* (0 is empty)."""
        if not isinstance(value, int) or not 0 <= value <= 6:
            raise InvalidValueError(f"{value!r} is not a cube code (0-6).")
        return cls(value)

    def to_int(self) -> int:
        return int(self.value)

    def roll_to(self, direction: Direction) -> Cube:
        """Return the orientation after rolling one cell in *direction*."""
        if self is Cube.EMPTY:
            raise UnsupportedOperationError("The empty cell cannot be rolled.")
        return Cube(_TRANSITIONS[self][_COLUMNS[direction]])

    @property
    def face(self) -> str:
        return _FACES[self]

    def __str__(self) -> str:
        return str(self.value)


# Rows are indexed by cube code, columns follow _COLUMNS.
_TRANSITIONS: tuple[tuple[int, int, int, int], ...] = (
    (0, 0, 0, 0),
    (3, 4, 2, 5),
    (1, 2, 6, 2),
    (6, 3, 1, 3),
    (4, 6, 4, 1),
    (5, 1, 5, 6),
    (2, 5, 3, 4),
)

_COLUMNS: dict[Direction, int] = {
    Direction.UP: 0,
    Direction.RIGHT: 1,
    Direction.DOWN: 2,
    Direction.LEFT: 3,
}

_FACES: dict[Cube, str] = {
    Cube.EMPTY: "·",
    Cube.CUBE1: "⚀",
    Cube.CUBE2: "⚁",
    Cube.CUBE3: "⚂",
    Cube.CUBE4: "⚃",
    Cube.CUBE5: "⚄",
    Cube.CUBE6: "⚅",
}
