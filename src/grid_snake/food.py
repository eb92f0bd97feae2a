"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from grid_snake.grid import CellType
from grid_snake.snake import Position

if TYPE_CHECKING:
    from grid_snake.grid import Board

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places the single food cell on a uniformly random empty cell.

    Rejection-samples random cells for up to *attempts* tries, then falls
    back to choosing among an explicit list of empty cells so a crowded
    board still terminates. Uses a seeded NumPy RNG for reproducible
    placement.
    """

    def __init__(
        self,
        board: Board,
        rng: np.random.Generator | None = None,
        attempts: int = 64,
    ) -> None:
        if attempts < 0:
            raise ValueError("attempts must be >= 0.")
        self.board = board
        self.rng = rng if rng is not None else np.random.default_rng()
        self.attempts = attempts
        self.position: Position | None = None

    def spawn(self) -> Position | None:
        """Place food on an empty cell and return its position.

        Returns ``None`` when the board has no empty cell left.
        """
        for _ in range(self.attempts):
            row = int(self.rng.integers(self.board.height))
            col = int(self.rng.integers(self.board.width))
            if self.board.get(row, col) == CellType.EMPTY:
                return self._place(Position(row, col))

        empty = self.board.empty_cells()
        if not empty:
            logger.warning("No empty cells available for food.")
            self.position = None
            return None
        row, col = empty[int(self.rng.integers(len(empty)))]
        return self._place(Position(row, col))

    def forget(self) -> None:
        """Drop the recorded position without touching the board."""
        self.position = None

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {
            "position": list(self.position) if self.position else None,
        }

    def _place(self, pos: Position) -> Position:
        self.board.set(pos.row, pos.col, CellType.FOOD)
        self.position = pos
        return pos
