from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Literal

from lifegame.buffs import bad_potion, coffee, herb
from lifegame.core.deltas import BuffsDelta, PositionDelta, StatsDelta
from lifegame.display import Display
from lifegame.players import ActionSubscriber, Delta

logger = logging.getLogger(__name__)

ActionName = Literal["move", "jog", "mountain_jog", "admin_suicide"]

SUICIDE_HEALTH_DELTA = -10_000


@dataclass(frozen=True, slots=True)
class ActionOutcome:
    action: ActionName
    subscriber: str
    deltas: list[Delta] = field(default_factory=list)


class Action(ABC):
    """A menu entry bound to one subscriber.

    The game loop only knows this interface; which concrete action runs is
    decided at call time.
    """

    name: ActionName

    def __init__(self, subscriber: ActionSubscriber, *, display: Display, rng: random.Random):
        self.subscriber = subscriber
        self.display = display
        self.rng = rng

    @abstractmethod
    def execute(self) -> ActionOutcome:
        raise NotImplementedError

    @property
    @abstractmethod
    def description(self) -> str:
        raise NotImplementedError

    def _apply(self, deltas: list[Delta]) -> ActionOutcome:
        for delta in deltas:
            self.subscriber.apply(delta)
        who = self.subscriber.subscriber_description
        logger.debug("%s applied %d delta(s) to %s", self.name, len(deltas), who)
        return ActionOutcome(action=self.name, subscriber=who, deltas=deltas)


class Move(Action):
    name: ActionName = "move"
    RAND_LIMIT = 12

    def _draw_position(self) -> PositionDelta:
        return PositionDelta(x=self.rng.randrange(self.RAND_LIMIT), y=self.rng.randrange(self.RAND_LIMIT))

    def execute(self) -> ActionOutcome:
        who = self.subscriber.subscriber_description
        self.display.write(f"🚶🏻‍♂️ Moved player {who}")

        position = self._draw_position()
        found = position.x % 3
        if found == 0:
            self.display.write(f"{who} found magical herb in the Himalayas 🌿")
            buffs = BuffsDelta(add=frozenset({herb()}))
        elif found == 1:
            self.display.write(f"{who} ordered coffee ☕")
            buffs = BuffsDelta(add=frozenset({coffee()}))
        else:
            buffs = BuffsDelta()

        return self._apply([buffs, position])

    @property
    def description(self) -> str:
        return f"🚶🏻‍♂️ Move player {self.subscriber.subscriber_description}"


class Jog(Move):
    """Overrides Move: covers more ground, never picks anything up."""

    name: ActionName = "jog"
    RAND_LIMIT = 24

    def execute(self) -> ActionOutcome:
        self.display.write(f"🏃 Player's running {self.subscriber.subscriber_description}")
        return self._apply([self._draw_position()])

    @property
    def description(self) -> str:
        return f"🏃 Run player {self.subscriber.subscriber_description}"


class MountainJog(Jog):
    """Extends Jog with extra narration."""

    name: ActionName = "mountain_jog"

    def execute(self) -> ActionOutcome:
        outcome = super().execute()
        self.display.write(" He/she seems to be running over the mountains!")
        return outcome

    @property
    def description(self) -> str:
        return f"⛰️ Mountain run player {self.subscriber.subscriber_description}"


class AdminSuicide(Action):
    name: ActionName = "admin_suicide"

    def execute(self) -> ActionOutcome:
        if self.rng.randrange(2):
            self.display.write("gg 🙂")
            return self._apply([StatsDelta(delta_level=0, delta_health=SUICIDE_HEALTH_DELTA)])

        self.display.write(
            "uh oh 🤔 your potion didn't work so you didn't die but you'll level up much slower;"
            " you can try this one again 😋"
        )
        return self._apply([BuffsDelta(add=frozenset({bad_potion()}))])

    @property
    def description(self) -> str:
        return "💀 Admin Suicide"
