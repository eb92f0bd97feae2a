"""Tests for the in-memory game registry."""

from __future__ import annotations

import asyncio

import pytest

from grid_snake.server.game_manager import GameManager


class TestGameManager:
    def test_invalid_max_games(self):
        with pytest.raises(ValueError, match="at least 1"):
            GameManager(max_games=0)

    def test_create_and_get(self):
        manager = GameManager()
        game = manager.create_game(height=8, width=8, seed=1)
        assert manager.get_game(game.game_id) is game
        assert game.engine.head == (4, 4)

    def test_oldest_games_evicted(self):
        manager = GameManager(max_games=2)
        first = manager.create_game(height=4, width=4)
        manager.create_game(height=4, width=4)
        manager.create_game(height=4, width=4)
        assert manager.get_game(first.game_id) is None
        assert len(manager.list_games()) == 2

    def test_delete_missing_raises(self):
        with pytest.raises(KeyError):
            GameManager().delete_game("nope")

    @pytest.mark.asyncio
    async def test_concurrent_steps_are_serialized(self):
        manager = GameManager()
        game = manager.create_game(height=20, width=20, seed=0)
        moves = ["up"] * 8
        await asyncio.gather(
            *(manager.step_game(game.game_id, m) for m in moves)
        )
        engine = game.engine
        assert engine.tick == len(moves)
        assert engine.head == (2, 10)
        assert engine.board.occupied_count() == engine.length
        assert len(engine.body()) == engine.length

    @pytest.mark.asyncio
    async def test_independent_games(self):
        manager = GameManager()
        a = manager.create_game(height=10, width=10, seed=0)
        b = manager.create_game(height=10, width=10, seed=0)
        await manager.step_game(a.game_id, "up")
        assert a.engine.tick == 1
        assert b.engine.tick == 0

    @pytest.mark.asyncio
    async def test_step_missing_raises(self):
        with pytest.raises(KeyError):
            await GameManager().step_game("nope", "up")
