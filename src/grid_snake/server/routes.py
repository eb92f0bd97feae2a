"""REST API route handlers for game lifecycle and play."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, Response

from grid_snake.server.game_manager import GameManager
from grid_snake.server.models import (
    CellResponse,
    CreateGameRequest,
    GameSummary,
    StepRequest,
    StepResponse,
)

router = APIRouter(prefix="/games", tags=["games"])


def _get_manager(request: Request) -> GameManager:
    return request.app.state.game_manager


@router.post("", status_code=201)
async def create_game(body: CreateGameRequest, request: Request) -> GameSummary:
    """Create a new game with a fresh round."""
    game = _get_manager(request).create_game(
        height=body.height, width=body.width, seed=body.seed,
    )
    return game.summary()


@router.get("")
async def list_games(request: Request) -> list[GameSummary]:
    """List all registered games."""
    return _get_manager(request).list_games()


@router.get("/{game_id}")
async def get_game(game_id: str, request: Request) -> dict:
    """Get game summary and full state."""
    game = _get_manager(request).get_game(game_id)
    if game is None:
        raise HTTPException(status_code=404, detail="Game not found.")
    result = game.summary().model_dump()
    result["state"] = game.engine.get_state()
    return result


@router.delete("/{game_id}", status_code=204)
async def delete_game(game_id: str, request: Request) -> Response:
    try:
        _get_manager(request).delete_game(game_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Game not found.") from exc
    return Response(status_code=204)


@router.post("/{game_id}/reset")
async def reset_game(game_id: str, request: Request) -> GameSummary:
    """Start a new round."""
    try:
        game = await _get_manager(request).reset_game(game_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Game not found.") from exc
    return game.summary()


@router.post("/{game_id}/step")
async def step_game(
    game_id: str, body: StepRequest, request: Request,
) -> StepResponse:
    """Advance the game by one tick."""
    try:
        return await _get_manager(request).step_game(game_id, body.direction)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Game not found.") from exc


@router.get("/{game_id}/cells/{row}/{col}")
async def get_cell(
    game_id: str, row: int, col: int, request: Request,
) -> CellResponse:
    """Read one cell of the board."""
    game = _get_manager(request).get_game(game_id)
    if game is None:
        raise HTTPException(status_code=404, detail="Game not found.")
    try:
        cell = game.engine.cell_at(row, col)
    except IndexError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    direction = cell.direction
    return CellResponse(
        row=row,
        col=col,
        kind="occupied" if cell.is_occupied else cell.name.lower(),
        direction=direction.name.lower() if direction else None,
    )
