"""Tests for the headless CLI."""

import json

import pytest

from grid_snake.cli import _build_parser, main, parse_moves
from grid_snake.config import EngineConfig
from grid_snake.snake import Direction


class TestParseMoves:
    def test_letters(self):
        assert parse_moves("RrDl") == [
            Direction.RIGHT, Direction.RIGHT, Direction.DOWN, Direction.LEFT,
        ]

    def test_names(self):
        assert parse_moves("up, Left ,down") == [
            Direction.UP, Direction.LEFT, Direction.DOWN,
        ]

    def test_unknown_tokens_kept(self):
        assert parse_moves("RXU") == [Direction.RIGHT, "X", Direction.UP]
        assert parse_moves("up,sideways") == [Direction.UP, "sideways"]


class TestCLIParser:
    def test_no_command_returns_1(self):
        assert main([]) == 1

    def test_replay_defaults(self):
        args = _build_parser().parse_args(["replay", "RRU"])
        assert args.command == "replay"
        assert args.moves == "RRU"
        assert args.config is None
        assert args.height is None
        assert not args.full

    def test_benchmark_defaults(self):
        args = _build_parser().parse_args(["benchmark"])
        assert args.games == 100
        assert args.max_steps == 500
        assert args.height == 48


class TestCLIReplay:
    def test_replay_prints_state(self, capsys):
        result = main([
            "replay", "UU", "--height", "10", "--width", "10", "--seed", "0",
        ])
        assert result == 0
        state = json.loads(capsys.readouterr().out)
        assert state["status"] == "continue"
        assert state["head"] == [3, 5]
        assert state["moves_applied"] == 2
        assert "board" not in state

    def test_replay_stops_on_loss(self, capsys):
        result = main([
            "replay", "UUUUUUUU", "--height", "4", "--width", "4",
            "--seed", "0",
        ])
        assert result == 0
        state = json.loads(capsys.readouterr().out)
        assert state["status"] == "lost"
        assert state["moves_applied"] == 3

    def test_replay_with_config_and_full(self, tmp_path, capsys):
        path = tmp_path / "cfg.json"
        EngineConfig(height=6, width=8, seed=1).save(path)
        assert main(["replay", "L", "--config", str(path), "--full"]) == 0
        state = json.loads(capsys.readouterr().out)
        assert state["board"]["height"] == 6
        assert state["board"]["width"] == 8

    def test_replay_invalid_dimensions(self):
        with pytest.raises(ValueError, match="at least 1"):
            main(["replay", "R", "--height", "0"])


class TestCLIBenchmark:
    def test_benchmark_runs(self, capsys):
        result = main([
            "benchmark", "--games", "3", "--max-steps", "20",
            "--height", "10", "--width", "10",
        ])
        assert result == 0
        out = capsys.readouterr().out
        assert "Benchmark:" in out
        assert "games/s" in out
