"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CreateGameRequest(BaseModel):
    """Request body for POST /games."""

    height: int = Field(default=48, ge=1, le=512)
    width: int = Field(default=48, ge=1, le=512)
    seed: int | None = None


class StepRequest(BaseModel):
    """Request body for POST /games/{game_id}/step.

    Unknown direction names are accepted and produce an ignored tick.
    """

    direction: str = Field(min_length=1, max_length=16)


class GameSummary(BaseModel):
    """Compact game info for list endpoints."""

    game_id: str
    status: str
    height: int
    width: int
    tick: int
    length: int


class StepResponse(BaseModel):
    """Result of a single tick."""

    status: str
    tick: int
    length: int
    head: tuple[int, int]
    tail: tuple[int, int]
    food: tuple[int, int] | None


class CellResponse(BaseModel):
    """State of one board cell."""

    row: int
    col: int
    kind: str
    direction: str | None = None
