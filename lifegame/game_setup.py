from __future__ import annotations

import random
from dataclasses import dataclass

from lifegame.core.deltas import Point
from lifegame.display import Display
from lifegame.game import Game
from lifegame.players import Player


@dataclass(frozen=True, slots=True)
class PlayerSeed:
    nickname: str
    level: int
    position: Point

    def build(self) -> Player:
        return Player(self.nickname, self.level, self.position)


DEFAULT_ADMIN = PlayerSeed("aldrt23", 32, Point(x=3, y=2))
DEFAULT_PLAYERS: tuple[PlayerSeed, ...] = (PlayerSeed("fersp63", 16, Point(x=6, y=7)),)


def build_default_game(*, display: Display, rng: random.Random) -> Game:
    """Create the stock game: one admin plus the default roster, ready to start."""

    game = Game(DEFAULT_ADMIN.build(), display=display, rng=rng)
    for seed in DEFAULT_PLAYERS:
        game.add(seed.build())
    return game
