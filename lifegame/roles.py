from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

from lifegame.actions import Action, AdminSuicide, Jog, MountainJog, Move
from lifegame.display import Display
from lifegame.players import Player


class RoleName(str, Enum):
    admin = "admin"
    player = "player"


@dataclass(frozen=True, slots=True)
class CommandSpec:
    # `{nickname}` is filled in with the owning player's nickname.
    template: str
    action_cls: type[Action]

    def command_for(self, player: Player) -> str:
        return self.template.format(nickname=player.nickname)


ROLE_COMMANDS: dict[RoleName, tuple[CommandSpec, ...]] = {
    RoleName.admin: (
        CommandSpec("/q", AdminSuicide),
        CommandSpec("/m", Move),
    ),
    RoleName.player: (
        CommandSpec("/move:{nickname}", Move),
        CommandSpec("/jog:{nickname}", Jog),
        CommandSpec("/mjog:{nickname}", MountainJog),
    ),
}


def bind_commands(
    role: RoleName | str,
    player: Player,
    *,
    display: Display,
    rng: random.Random,
) -> list[tuple[CommandSpec, Action]]:
    """Create one action per command of `role`, all acting on `player`."""

    role_name = RoleName(role) if not isinstance(role, RoleName) else role
    return [(spec, spec.action_cls(player, display=display, rng=rng)) for spec in ROLE_COMMANDS[role_name]]

