from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

EventType = Literal[
    "TURN_STARTED",
    "ACTION_EXECUTED",
    "INPUT_IGNORED",
    "GAME_FINISHED",
]


@dataclass(frozen=True, slots=True)
class GameEvent:
    """One entry of a game's history, stamped with the turn it happened on."""

    type: EventType
    turn_id: int
    payload: dict[str, Any]
    ts: datetime

    @classmethod
    def now(cls, type: EventType, turn_id: int, **payload: Any) -> GameEvent:
        return cls(type=type, turn_id=turn_id, payload=payload, ts=datetime.now(tz=UTC))

    @property
    def summary(self) -> str:
        fields = " ".join(f"{k}={v!r}" for k, v in sorted(self.payload.items()))
        return f"turn {self.turn_id} {self.type} {fields}".rstrip()
