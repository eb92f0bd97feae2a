"""Step-based game engine owning the board, snake ends, and food."""

from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING

import numpy as np

from grid_snake.food import FoodSpawner
from grid_snake.grid import Board, CellType
from grid_snake.snake import Direction, Position, trace_body

if TYPE_CHECKING:
    from grid_snake.config import EngineConfig

logger = logging.getLogger(__name__)

# Placeholder stored in the starting cell; the first step overwrites it
# before the tail ever reads it.
_START_DIRECTION = Direction.RIGHT


class GameStatus(enum.Enum):
    """Outcome of a tick."""

    CONTINUE = "continue"
    LOST = "lost"


class GameEngine:
    """Single-snake, step-based game engine.

    The snake is never stored as a list of segments. Only ``head`` and
    ``tail`` are tracked; every occupied cell remembers the direction the
    head left it in, and the tail follows those directions one cell per
    tick. Each call to :meth:`step` consumes exactly one direction.
    """

    def __init__(
        self,
        height: int = 48,
        width: int = 48,
        seed: int | None = None,
        food_attempts: int = 64,
    ) -> None:
        self.board = Board(height=height, width=width)
        self.rng = np.random.default_rng(seed)
        self.food_spawner = FoodSpawner(
            self.board, rng=self.rng, attempts=food_attempts,
        )
        self.head = Position(height // 2, width // 2)
        self.tail = self.head
        self.status = GameStatus.CONTINUE
        self.tick = 0
        self.length = 1
        self.reset()

    @classmethod
    def from_config(cls, config: EngineConfig) -> GameEngine:
        return cls(
            height=config.height,
            width=config.width,
            seed=config.seed,
            food_attempts=config.food_attempts,
        )

    @property
    def height(self) -> int:
        return self.board.height

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def food(self) -> Position | None:
        """Current food cell, or ``None`` when the board is full."""
        return self.food_spawner.position

    @property
    def game_over(self) -> bool:
        return self.status == GameStatus.LOST

    def reset(self) -> None:
        """Start a new round: empty board, length-1 snake at the centre."""
        self.board.clear()
        self.food_spawner.forget()
        self.head = Position(self.height // 2, self.width // 2)
        self.tail = self.head
        self.board.set(
            self.head.row, self.head.col, CellType.occupied(_START_DIRECTION),
        )
        self.status = GameStatus.CONTINUE
        self.tick = 0
        self.length = 1
        self.generate_food()
        logger.debug(
            "New round on %dx%d board, food at %s.",
            self.height, self.width, self.food,
        )

    def generate_food(self) -> Position | None:
        """Place food on a random empty cell and return its position."""
        return self.food_spawner.spawn()

    def step(self, direction: Direction | str) -> GameStatus:
        """Advance the round by one tick in *direction*.

        Unrecognised directions are ignored: the board is left untouched
        and the current status is returned. A lost round stays lost until
        :meth:`reset`.
        """
        if self.status == GameStatus.LOST:
            return self.status

        move = Direction.parse(direction)
        if move is None:
            logger.debug("Ignoring invalid direction %r.", direction)
            return self.status

        head, tail = self.head, self.tail
        marker = CellType.occupied(move)

        # The cell being left remembers which way the snake went.
        self.board.set(head.row, head.col, marker)
        self.tick += 1

        target = head.moved(move)
        if not self.board.in_bounds(target.row, target.col):
            return self._lose(target, "wall")

        target_cell = self.board.get(target.row, target.col)
        # The tail cell is vacated this tick, so moving onto it is legal.
        if target != tail and target_cell.is_occupied:
            return self._lose(target, "self")

        if target_cell == CellType.FOOD:
            self.length += 1
            self.generate_food()
        else:
            tail_direction = self.board.get(tail.row, tail.col).direction
            self.board.set(tail.row, tail.col, CellType.EMPTY)
            self.tail = tail.moved(tail_direction)

        self.head = target
        self.board.set(target.row, target.col, marker)
        return self.status

    def cell_at(self, row: int, col: int) -> CellType:
        """Return the state of one cell; raises ``IndexError`` off-board."""
        return self.board.get(row, col)

    def body(self) -> list[Position]:
        """Snake segments ordered from tail to head."""
        return trace_body(self.board, self.tail, self.head)

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "status": self.status.value,
            "head": list(self.head),
            "tail": list(self.tail),
            "food": list(self.food) if self.food is not None else None,
            "length": self.length,
            "body": [list(seg) for seg in self.body()],
            "board": self.board.to_dict(),
        }

    def _lose(self, target: Position, cause: str) -> GameStatus:
        self.status = GameStatus.LOST
        logger.info(
            "Snake lost (%s collision at %s) at tick %d with length %d.",
            cause, tuple(target), self.tick, self.length,
        )
        return self.status
