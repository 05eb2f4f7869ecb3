from __future__ import annotations

import logging
import random
from datetime import UTC, datetime
from typing import Any

from lifegame.actions import Action
from lifegame.core.events import EventType, GameEvent
from lifegame.display import Display
from lifegame.errors import DomainError
from lifegame.fsm import GameFSM
from lifegame.models import GamePhase, GameResults
from lifegame.players import Player
from lifegame.roles import CommandSpec, RoleName, bind_commands

logger = logging.getLogger(__name__)

WELCOME = "🤡 Welcome to the game of Life. To quit the game enter `/q`."
COMMAND_COLUMN_WIDTH = 25


class Game:
    """One admin, any number of extra players, and a fixed command menu.

    The loop keeps going until the admin's health reaches zero or input runs out.
    """

    def __init__(self, admin: Player, *, display: Display, rng: random.Random | None = None):
        self.display = display
        self.rng = rng or random.Random()
        self.phase = GamePhase.lobby
        self.turn_id = 0
        self.history: list[GameEvent] = []

        self.admin = admin
        self._seats: list[tuple[Player, RoleName]] = []
        self._commands: list[tuple[CommandSpec, Player, Action]] = []
        self._seat(admin, RoleName.admin)

    @property
    def players(self) -> list[Player]:
        return [p for p, _ in self._seats]

    @property
    def available_actions(self) -> dict[str, Action]:
        """Command -> action, keyed by each player's current nickname."""

        commands: dict[str, Action] = {}
        for spec, player, action in self._commands:
            command = spec.command_for(player)
            if command in commands:
                raise DomainError(f"Command {command} is bound to more than one player")
            commands[command] = action
        return commands

    def _seat(self, player: Player, role: RoleName) -> None:
        if any(p.nickname == player.nickname for p in self.players):
            raise DomainError(f"Nickname already taken: {player.nickname}")
        for spec, action in bind_commands(role, player, display=self.display, rng=self.rng):
            self._commands.append((spec, player, action))
        self._seats.append((player, role))
        logger.debug("seated %s as %s", player.nickname, role.value)

    def add(self, player: Player) -> None:
        fsm = GameFSM(self)
        if fsm.current_state != fsm.lobby:
            raise DomainError("Players can only join before the game starts")
        self._seat(player, RoleName.player)

    def start(self) -> GameResults:
        fsm = GameFSM(self)
        fsm.begin()
        fsm.sync_phase_to_model()

        try:
            self._run_loop()
        except KeyboardInterrupt:
            logger.debug("interrupted at turn %d", self.turn_id)

        fsm = GameFSM(self)
        fsm.finish()
        fsm.sync_phase_to_model()
        self._record("GAME_FINISHED", admin_alive=self.admin.is_alive)

        self.print_game_results()
        return self.results()

    def _run_loop(self) -> None:
        self.display.write(WELCOME)
        while self.admin.is_alive:
            self.print_player_stats()
            self.print_available_actions()
            line = self.display.read("> ")
            if line is None:
                logger.debug("input exhausted at turn %d", self.turn_id)
                return

            self.play_turn(line)

    def play_turn(self, line: str) -> None:
        command = line.strip()
        self._record("TURN_STARTED", input=command)

        action = self.available_actions.get(command)
        if action is None:
            self._record("INPUT_IGNORED", input=command)
        else:
            outcome = action.execute()
            self._record("ACTION_EXECUTED", command=command, action=outcome.action, subscriber=outcome.subscriber)

        self.turn_id += 1

    def _record(self, type: EventType, **payload: Any) -> None:
        event = GameEvent.now(type, self.turn_id, **payload)
        self.history.append(event)
        logger.debug("%s", event.summary)

    def print_player_stats(self) -> None:
        for player in self.players:
            self.display.write(player.description)

    def print_available_actions(self) -> None:
        self.display.write("Available Actions:")
        for command, action in sorted(self.available_actions.items()):
            self.display.write(f"{command:<{COMMAND_COLUMN_WIDTH}}: {action.description}")

    def print_game_results(self) -> None:
        self.display.write("Game Results: ")
        self.print_player_stats()

    def results(self) -> GameResults:
        return GameResults(
            phase=self.phase,
            turns=self.turn_id,
            admin_alive=self.admin.is_alive,
            finished_at=datetime.now(tz=UTC),
            players=[p.snapshot(role=role.value) for p, role in self._seats],
        )
