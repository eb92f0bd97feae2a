"""In-memory game registry and serialized access to engines."""

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from dataclasses import dataclass, field

from grid_snake.config import EngineConfig
from grid_snake.engine import GameEngine, GameStatus
from grid_snake.server.models import GameSummary, StepResponse
from grid_snake.snake import Direction

logger = logging.getLogger(__name__)

_MAX_GAMES = 100


@dataclass
class GameInstance:
    """One engine plus the lock that serializes its ticks."""

    game_id: str
    config: EngineConfig
    engine: GameEngine
    created_at: float = field(default_factory=time.monotonic)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    def summary(self) -> GameSummary:
        return GameSummary(
            game_id=self.game_id,
            status=self.engine.status.value,
            height=self.engine.height,
            width=self.engine.width,
            tick=self.engine.tick,
            length=self.engine.length,
        )


class GameManager:
    """Central registry of independent game engines.

    Holds at most *max_games* games; creating one more evicts the oldest.
    """

    def __init__(self, max_games: int = _MAX_GAMES) -> None:
        if max_games < 1:
            raise ValueError("max_games must be at least 1.")
        self._games: dict[str, GameInstance] = {}
        self._max_games = max_games

    def create_game(
        self,
        height: int = 48,
        width: int = 48,
        seed: int | None = None,
    ) -> GameInstance:
        """Create a new game and return the instance."""
        config = EngineConfig(height=height, width=width, seed=seed)
        game_id = uuid.uuid4().hex[:12]
        instance = GameInstance(
            game_id=game_id,
            config=config,
            engine=GameEngine.from_config(config),
        )
        self._games[game_id] = instance
        self._evict_overflow()
        logger.info("Game %s created (%dx%d).", game_id, height, width)
        return instance

    def get_game(self, game_id: str) -> GameInstance | None:
        return self._games.get(game_id)

    def list_games(self) -> list[GameSummary]:
        return [g.summary() for g in self._games.values()]

    def delete_game(self, game_id: str) -> None:
        if self._games.pop(game_id, None) is None:
            raise KeyError(f"Game {game_id} not found.")
        logger.info("Game %s deleted.", game_id)

    async def reset_game(self, game_id: str) -> GameInstance:
        """Start a new round in an existing game."""
        game = self._require(game_id)
        async with game.lock:
            game.engine.reset()
        return game

    async def step_game(
        self, game_id: str, direction: Direction | str,
    ) -> StepResponse:
        """Apply one tick; concurrent calls on one game run in order."""
        game = self._require(game_id)
        async with game.lock:
            engine = game.engine
            status = engine.step(direction)
            if status == GameStatus.LOST:
                logger.info(
                    "Game %s lost at tick %d.", game_id, engine.tick,
                )
            return StepResponse(
                status=status.value,
                tick=engine.tick,
                length=engine.length,
                head=tuple(engine.head),
                tail=tuple(engine.tail),
                food=tuple(engine.food) if engine.food else None,
            )

    def _require(self, game_id: str) -> GameInstance:
        game = self._games.get(game_id)
        if game is None:
            raise KeyError(f"Game {game_id} not found.")
        return game

    def _evict_overflow(self) -> None:
        overflow = len(self._games) - self._max_games
        if overflow <= 0:
            return
        oldest = sorted(self._games.values(), key=lambda g: g.created_at)
        for stale in oldest[:overflow]:
            self._games.pop(stale.game_id, None)
        logger.info(
            "Evicted %d games (retaining up to %d).",
            overflow, self._max_games,
        )
