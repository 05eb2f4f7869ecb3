from __future__ import annotations

from typing import TYPE_CHECKING

from statemachine import State, StateMachine

from lifegame.models import GamePhase

if TYPE_CHECKING:
    from lifegame.game import Game


class GameFSM(StateMachine):
    """FSM wrapper around a Game's phase.

    - phases: lobby -> running -> finished
    - the game mutates itself; the FSM only guards transitions.
    """

    lobby = State(GamePhase.lobby.value, value=GamePhase.lobby.value, initial=True)
    running = State(GamePhase.running.value, value=GamePhase.running.value)
    finished = State(GamePhase.finished.value, value=GamePhase.finished.value, final=True)

    begin = lobby.to(running)
    finish = running.to(finished)

    def __init__(self, game: Game):
        self.game = game
        super().__init__(start_value=game.phase.value)

    def sync_phase_to_model(self) -> None:
        self.game.phase = GamePhase(str(self.current_state.value))
