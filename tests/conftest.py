from __future__ import annotations

import pytest

from lifegame.core.deltas import Point
from lifegame.display import ScriptedDisplay
from lifegame.players import Player


@pytest.fixture(autouse=True)
def _hermetic_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's LIFEGAME_* variables out of the tests."""

    monkeypatch.delenv("LIFEGAME_SEED", raising=False)
    monkeypatch.delenv("LIFEGAME_LOG_LEVEL", raising=False)


@pytest.fixture()
def display() -> ScriptedDisplay:
    return ScriptedDisplay([])


@pytest.fixture()
def player() -> Player:
    return Player("fersp63", 16, Point(x=6, y=7))


@pytest.fixture()
def admin() -> Player:
    return Player("aldrt23", 32, Point(x=3, y=2))
