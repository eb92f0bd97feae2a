"""Board representation for the snake game."""

from __future__ import annotations

import enum

import numpy as np

from grid_snake.snake import Direction

# Set on every occupied cell; the low two bits carry the direction code.
OCCUPIED_FLAG = 0b100
_DIRECTION_MASK = 0b011

_DIRECTION_CODES: dict[Direction, int] = {
    Direction.LEFT: 0,
    Direction.RIGHT: 1,
    Direction.UP: 2,
    Direction.DOWN: 3,
}
_CODE_DIRECTIONS: dict[int, Direction] = {
    code: direction for direction, code in _DIRECTION_CODES.items()
}


class CellType(enum.IntEnum):
    """Integer codes stored in the board array."""

    EMPTY = 0
    FOOD = 1
    OCCUPIED_LEFT = 4
    OCCUPIED_RIGHT = 5
    OCCUPIED_UP = 6
    OCCUPIED_DOWN = 7

    @classmethod
    def occupied(cls, direction: Direction) -> CellType:
        """Return the occupied code carrying *direction*."""
        return cls(OCCUPIED_FLAG | _DIRECTION_CODES[direction])

    @property
    def is_occupied(self) -> bool:
        return bool(self & OCCUPIED_FLAG)

    @property
    def direction(self) -> Direction | None:
        """Direction stored in an occupied cell, ``None`` otherwise."""
        if not self.is_occupied:
            return None
        return _CODE_DIRECTIONS[self & _DIRECTION_MASK]


class Board:
    """NumPy-backed board of cell codes.

    Coordinates use (row, col) ordering consistent with NumPy indexing.
    Reads and writes outside the board raise :class:`IndexError` instead
    of falling through to NumPy's negative indexing.
    """

    def __init__(self, height: int = 48, width: int = 48) -> None:
        if height < 1 or width < 1:
            raise ValueError("Board dimensions must be at least 1x1.")
        self.height = height
        self.width = width
        self.cells = np.zeros((height, width), dtype=np.int8)

    def clear(self) -> None:
        """Reset all cells to empty."""
        self.cells[:] = CellType.EMPTY

    def in_bounds(self, row: int, col: int) -> bool:
        """Check whether a coordinate lies on the board."""
        return 0 <= row < self.height and 0 <= col < self.width

    def get(self, row: int, col: int) -> CellType:
        """Return the cell type at the given coordinate."""
        self._check(row, col)
        return CellType(int(self.cells[row, col]))

    def set(self, row: int, col: int, cell_type: CellType) -> None:
        """Set the cell type at the given coordinate."""
        self._check(row, col)
        self.cells[row, col] = cell_type

    def empty_cells(self) -> list[tuple[int, int]]:
        """Return a list of all empty cell coordinates."""
        rows, cols = np.where(self.cells == CellType.EMPTY)
        return list(zip(rows.tolist(), cols.tolist(), strict=True))

    def occupied_count(self) -> int:
        """Number of cells currently occupied by the snake."""
        return int(np.count_nonzero(self.cells & OCCUPIED_FLAG))

    def food_cells(self) -> list[tuple[int, int]]:
        rows, cols = np.where(self.cells == CellType.FOOD)
        return list(zip(rows.tolist(), cols.tolist(), strict=True))

    def to_dict(self) -> dict:
        """Serialize board state to a dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "cells": self.cells.tolist(),
        }

    def _check(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise IndexError(
                f"Cell ({row}, {col}) is outside the "
                f"{self.height}x{self.width} board."
            )
