"""Headless command-line driver for the snake engine."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from grid_snake.config import EngineConfig
from grid_snake.engine import GameEngine, GameStatus
from grid_snake.snake import Direction

logger = logging.getLogger(__name__)

_LETTERS: dict[str, Direction] = {
    "L": Direction.LEFT,
    "R": Direction.RIGHT,
    "U": Direction.UP,
    "D": Direction.DOWN,
}


def parse_moves(text: str) -> list[Direction | str]:
    """Split a move string into directions.

    Accepts compact letters (``"RRDL"``) or comma-separated names
    (``"right,right,down"``). Unknown tokens are kept as strings so the
    engine treats them as ignored ticks.
    """
    text = text.strip()
    if "," in text:
        tokens = [t.strip() for t in text.split(",") if t.strip()]
        return [Direction.parse(t) or t for t in tokens]
    return [_LETTERS.get(ch.upper(), ch) for ch in text if not ch.isspace()]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Headless snake engine: replay moves or benchmark.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- replay ---
    replay_p = sub.add_parser(
        "replay", help="Play a move sequence and print the final state.",
    )
    replay_p.add_argument(
        "moves", help="Moves as letters (LRUD) or comma-separated names.",
    )
    replay_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override it).",
    )
    replay_p.add_argument("--height", type=int, default=None)
    replay_p.add_argument("--width", type=int, default=None)
    replay_p.add_argument("--seed", type=int, default=None)
    replay_p.add_argument(
        "--full", action="store_true",
        help="Include the raw board cells in the output.",
    )

    # --- benchmark ---
    bench_p = sub.add_parser(
        "benchmark", help="Measure engine throughput with random moves.",
    )
    bench_p.add_argument("--games", type=int, default=100)
    bench_p.add_argument("--max-steps", type=int, default=500)
    bench_p.add_argument("--height", type=int, default=48)
    bench_p.add_argument("--width", type=int, default=48)
    bench_p.add_argument("--seed", type=int, default=42)

    return parser


def _run_replay(args: argparse.Namespace) -> int:
    config = EngineConfig.load(args.config) if args.config else EngineConfig()
    overrides = {
        name: getattr(args, name)
        for name in ("height", "width", "seed")
        if getattr(args, name) is not None
    }
    if overrides:
        config = EngineConfig(**{**config.to_dict(), **overrides})

    engine = GameEngine.from_config(config)
    applied = 0
    for move in parse_moves(args.moves):
        applied += 1
        if engine.step(move) == GameStatus.LOST:
            break

    state = engine.get_state()
    if not args.full:
        state.pop("board")
    state["moves_applied"] = applied
    print(json.dumps(state))  # noqa: T201
    return 0


def _run_benchmark(args: argparse.Namespace) -> int:
    from grid_snake.benchmark import benchmark_throughput

    result = benchmark_throughput(
        num_games=args.games,
        max_steps=args.max_steps,
        height=args.height,
        width=args.width,
        seed=args.seed,
    )
    print(result.summary())  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``grid-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "replay": _run_replay,
        "benchmark": _run_benchmark,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
