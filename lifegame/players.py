from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from lifegame.buffs import Buff
from lifegame.core.deltas import BuffsDelta, Point, PositionDelta, StatsDelta
from lifegame.errors import DomainError
from lifegame.models import MAX_HEALTH, MAX_LEVEL, MAX_NICKNAME_LENGTH, PlayerState, Position

logger = logging.getLogger(__name__)

Delta = StatsDelta | BuffsDelta | PositionDelta


class ActionSubscriber(ABC):
    """Anything an action can act upon.

    Actions only ever talk to this interface; concrete subscribers decide
    how a delta changes their state.
    """

    @abstractmethod
    def apply_stats(self, delta: StatsDelta) -> None:
        raise NotImplementedError

    @abstractmethod
    def apply_buffs(self, delta: BuffsDelta) -> None:
        raise NotImplementedError

    @abstractmethod
    def apply_position(self, delta: PositionDelta) -> None:
        raise NotImplementedError

    @property
    @abstractmethod
    def subscriber_description(self) -> str:
        raise NotImplementedError

    def apply(self, delta: Delta) -> None:
        if isinstance(delta, StatsDelta):
            self.apply_stats(delta)
        elif isinstance(delta, BuffsDelta):
            self.apply_buffs(delta)
        elif isinstance(delta, PositionDelta):
            self.apply_position(delta)
        else:
            raise TypeError(f"Unsupported delta: {type(delta).__name__}")


def _validate_nickname(nickname: str) -> None:
    if len(nickname) > MAX_NICKNAME_LENGTH:
        raise DomainError(
            f"Nickname length greater than max. Expected {MAX_NICKNAME_LENGTH}, got {len(nickname)}"
        )


class Player(ActionSubscriber):
    def __init__(self, nickname: str, level: int, position: Point):
        _validate_nickname(nickname)
        if level < 0 or level > MAX_LEVEL:
            raise DomainError(f"Level must be between 0 and {MAX_LEVEL}, got {level}")

        self._nickname = nickname
        self._level = level
        self._health = MAX_HEALTH
        self._buffs: set[Buff] = set()
        self._position = position
        self._checkpoint = position

    def __repr__(self) -> str:
        return f"Player(nickname={self._nickname!r}, level={self._level}, health={self._health})"

    @property
    def nickname(self) -> str:
        return self._nickname

    @nickname.setter
    def nickname(self, nickname: str) -> None:
        _validate_nickname(nickname)
        self._nickname = nickname

    @property
    def level(self) -> int:
        return self._level

    @property
    def health(self) -> int:
        return self._health

    @property
    def current_position(self) -> Point:
        return self._position

    @property
    def checkpoint(self) -> Point:
        return self._checkpoint

    @property
    def buffs(self) -> frozenset[Buff]:
        return frozenset(self._buffs)

    @property
    def is_alive(self) -> bool:
        return self._health > 0

    @property
    def buffs_description(self) -> str:
        return "".join(b.description for b in sorted(self._buffs))

    @property
    def description(self) -> str:
        pos = self._position
        return f"🤫 {self._nickname} {self._level} {self._health} ({pos.x}, {pos.y}) {self.buffs_description}"

    @property
    def subscriber_description(self) -> str:
        return self._nickname

    def apply_stats(self, delta: StatsDelta) -> None:
        self._level = (self._level + delta.delta_level) % (MAX_LEVEL + 1)
        self._health = min(max(self._health + delta.delta_health, 0), MAX_HEALTH)
        logger.debug("stats %s -> level=%d health=%d", self._nickname, self._level, self._health)

    def apply_buffs(self, delta: BuffsDelta) -> None:
        self._buffs -= delta.remove
        self._buffs |= delta.add

    def apply_position(self, delta: PositionDelta) -> None:
        self._position = Point(x=self._position.x + delta.x, y=self._position.y + delta.y)

    def snapshot(self, *, role: str) -> PlayerState:
        return PlayerState(
            nickname=self._nickname,
            role=role,
            level=self._level,
            health=self._health,
            position=Position(x=self._position.x, y=self._position.y),
            checkpoint=Position(x=self._checkpoint.x, y=self._checkpoint.y),
            buffs=[b.description for b in sorted(self._buffs)],
        )
