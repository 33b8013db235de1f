from rollingcubes.models.board import Board
from rollingcubes.models.cube import Cube
from rollingcubes.models.direction import Direction
from rollingcubes.models.result import GameResult, GameResultStore

__all__ = ["Board", "Cube", "Direction", "GameResult", "GameResultStore"]
