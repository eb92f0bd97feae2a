"""Throughput benchmark for the step engine."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from grid_snake.engine import GameEngine, GameStatus
from grid_snake.snake import Direction

logger = logging.getLogger(__name__)

_DIRECTIONS = list(Direction)


@dataclass
class BenchmarkResult:
    """Results from a throughput benchmark run."""

    total_games: int
    total_steps: int
    wall_time_seconds: float
    games_per_second: float
    steps_per_second: float

    def summary(self) -> str:
        return (
            f"Benchmark: {self.total_games} games, "
            f"{self.total_steps} steps in {self.wall_time_seconds:.2f}s | "
            f"{self.games_per_second:.1f} games/s, "
            f"{self.steps_per_second:.1f} steps/s"
        )


def benchmark_throughput(
    *,
    num_games: int = 100,
    max_steps: int = 500,
    height: int = 48,
    width: int = 48,
    seed: int = 42,
) -> BenchmarkResult:
    """Measure raw engine throughput with random moves.

    Plays *num_games* rounds on one engine, resetting between rounds.
    A round ends on loss or after *max_steps* ticks.
    """
    if num_games < 1:
        raise ValueError("num_games must be at least 1.")

    engine = GameEngine(height=height, width=width, seed=seed)
    rng = np.random.default_rng(seed)

    total_steps = 0
    start = time.perf_counter()

    for game in range(num_games):
        if game:
            engine.reset()
        for _ in range(max_steps):
            move = _DIRECTIONS[int(rng.integers(len(_DIRECTIONS)))]
            total_steps += 1
            if engine.step(move) == GameStatus.LOST:
                break

    elapsed = time.perf_counter() - start
    result = BenchmarkResult(
        total_games=num_games,
        total_steps=total_steps,
        wall_time_seconds=elapsed,
        games_per_second=num_games / max(elapsed, 1e-9),
        steps_per_second=total_steps / max(elapsed, 1e-9),
    )
    logger.info(result.summary())
    return result
