"""Tests for the throughput benchmark."""

import pytest

from grid_snake.benchmark import BenchmarkResult, benchmark_throughput


class TestBenchmarkResult:
    def test_summary_format(self):
        result = BenchmarkResult(
            total_games=10,
            total_steps=500,
            wall_time_seconds=1.5,
            games_per_second=6.67,
            steps_per_second=333.3,
        )
        summary = result.summary()
        assert "10 games" in summary
        assert "500 steps" in summary
        assert "games/s" in summary
        assert "steps/s" in summary


class TestBenchmarkThroughput:
    def test_basic_benchmark(self):
        result = benchmark_throughput(
            num_games=5, max_steps=30, height=10, width=10,
        )
        assert result.total_games == 5
        assert 5 <= result.total_steps <= 150
        assert result.wall_time_seconds > 0
        assert result.steps_per_second > 0

    def test_max_steps_caps_each_game(self, monkeypatch):
        class _NeverLoses:
            def __init__(self, **_kwargs):
                self.resets = 0

            def reset(self):
                self.resets += 1

            def step(self, move):
                _ = move
                return "continue"

        monkeypatch.setattr("grid_snake.benchmark.GameEngine", _NeverLoses)
        result = benchmark_throughput(num_games=4, max_steps=3)
        assert result.total_steps == 12

    def test_num_games_must_be_positive(self):
        with pytest.raises(ValueError, match="num_games must be at least 1"):
            benchmark_throughput(num_games=0)
