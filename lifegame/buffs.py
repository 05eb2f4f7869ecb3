from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

from lifegame.core.deltas import StatsDeltaMultiply
from lifegame.errors import DomainError

MAX_DESCRIPTION_LENGTH = 30
MAX_BUFF_SUM = 10


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Buff:
    """A named stat multiplier a player can carry.

    Buffs are identified by their description: two buffs with the same
    description are the same buff, whatever their effect. Sorting orders
    them by description length.
    """

    effect: StatsDeltaMultiply
    description: str

    def __post_init__(self) -> None:
        if len(self.description) > MAX_DESCRIPTION_LENGTH:
            raise DomainError("Buff description length greater than max")
        if self.effect.multiply_level + self.effect.multiply_health > MAX_BUFF_SUM:
            raise DomainError("Buff sum greater than max")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Buff):
            return NotImplemented
        return self.description == other.description

    def __hash__(self) -> int:
        return hash(self.description)

    def __lt__(self, other: Buff) -> bool:
        if not isinstance(other, Buff):
            return NotImplemented
        return (len(self.description), self.description) < (len(other.description), other.description)


def herb() -> Buff:
    return Buff(StatsDeltaMultiply(multiply_level=1.5, multiply_health=1.5), "🌿")


def coffee() -> Buff:
    return Buff(StatsDeltaMultiply(multiply_level=1.3, multiply_health=1.3), "☕")


def bad_potion() -> Buff:
    # Slows levelling; health untouched.
    return Buff(StatsDeltaMultiply(multiply_level=0.1, multiply_health=1.0), "🧪⚰️")
