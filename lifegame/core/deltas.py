from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lifegame.buffs import Buff


@dataclass(frozen=True, slots=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True, slots=True)
class StatsDelta:
    delta_level: int = 0
    delta_health: int = 0


@dataclass(frozen=True, slots=True)
class StatsDeltaMultiply:
    multiply_level: float
    multiply_health: float


@dataclass(frozen=True, slots=True)
class PositionDelta:
    x: int
    y: int


@dataclass(frozen=True, slots=True)
class BuffsDelta:
    add: frozenset[Buff] = field(default_factory=frozenset)
    remove: frozenset[Buff] = field(default_factory=frozenset)
