"""Grid Snake — single-player snake state engine."""

from grid_snake.config import EngineConfig
from grid_snake.engine import GameEngine, GameStatus
from grid_snake.grid import Board, CellType
from grid_snake.snake import Direction, Position

__all__ = [
    "Board",
    "CellType",
    "Direction",
    "EngineConfig",
    "GameEngine",
    "GameStatus",
    "Position",
]
