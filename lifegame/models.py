from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field

MAX_NICKNAME_LENGTH = 30
MAX_LEVEL = 256
MAX_HEALTH = 1000


class GamePhase(StrEnum):
    lobby = "lobby"
    running = "running"
    finished = "finished"


class Position(BaseModel):
    x: int
    y: int


class PlayerState(BaseModel):
    nickname: str = Field(..., max_length=MAX_NICKNAME_LENGTH)
    role: str
    level: int = Field(..., ge=0, le=MAX_LEVEL)
    health: int = Field(..., ge=0, le=MAX_HEALTH)
    position: Position
    checkpoint: Position

    # Buff descriptions, in display order.
    buffs: list[str] = Field(default_factory=list)


class GameResults(BaseModel):
    phase: GamePhase
    turns: int
    admin_alive: bool
    finished_at: datetime
    players: list[PlayerState]
