"""Directions, positions, and implicit snake-body tracing."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from grid_snake.grid import Board


class Direction(enum.Enum):
    """Cardinal movement directions with (row_delta, col_delta) values."""

    LEFT = (0, -1)
    RIGHT = (0, 1)
    UP = (-1, 0)
    DOWN = (1, 0)

    @classmethod
    def parse(cls, value: object) -> Direction | None:
        """Map a member or a case-insensitive name to a direction.

        Returns ``None`` for anything that is not a recognised direction.
        """
        if isinstance(value, Direction):
            return value
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper())
        return None


class Position(NamedTuple):
    """A (row, col) board coordinate."""

    row: int
    col: int

    def moved(self, direction: Direction) -> Position:
        """Return the neighbouring position one step in *direction*."""
        dr, dc = direction.value
        return Position(self.row + dr, self.col + dc)


def trace_body(board: Board, tail: Position, head: Position) -> list[Position]:
    """Reconstruct the snake body from *tail* to *head*.

    Each occupied cell stores the direction the head left it in, so the
    body is recovered by walking those directions starting at the tail.
    """
    body = [tail]
    current = tail
    limit = board.height * board.width
    while current != head:
        direction = board.get(current.row, current.col).direction
        if direction is None:
            raise ValueError(f"Snake path is broken at {tuple(current)}.")
        current = current.moved(direction)
        body.append(current)
        if len(body) > limit:
            raise ValueError("Snake path never reaches the head.")
    return body
