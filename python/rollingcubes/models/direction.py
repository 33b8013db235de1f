"""Directions a cube can roll in."""

from __future__ import annotations

from enum import StrEnum

from rollingcubes.errors import InvalidValueError


class Direction(StrEnum):
    """Grid-axis unit moves. ``dx`` is the row delta, ``dy`` the column delta."""

    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"

    @property
    def dx(self) -> int:
        return _DELTAS[self][0]

    @property
    def dy(self) -> int:
        return _DELTAS[self][1]

    @classmethod
    def of(cls, dx: int, dy: int) -> Direction:
        """Return the direction whose delta is ``(dx, dy)``."""
        for direction, delta in _DELTAS.items():
            if delta == (dx, dy):
                return direction
        raise InvalidValueError(f"({dx}, {dy}) is not a unit direction.")

    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.RIGHT: Direction.LEFT,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
}
