"""Exceptions raised by the puzzle engine."""


class RollingCubesError(Exception):
    """Base class for every engine error."""


class InvalidValueError(RollingCubesError, ValueError):
    """An integer code does not name a cube or a direction."""


class InvalidBoardError(RollingCubesError, ValueError):
    """A layout is not a 4×4 grid of cube codes with exactly one empty cell."""


class InvalidMoveError(RollingCubesError, ValueError):
    """The requested cell cannot roll into the empty cell."""


class UnsupportedOperationError(RollingCubesError, TypeError):
    """The operation is not defined for the empty cell."""
