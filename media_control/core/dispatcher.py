"""Apply one command: a transport call on the active player, or a player switch."""
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from media_control.core.cycler import cycle
from media_control.core.resolver import require_active_player
from media_control.models.command import COMMAND_ACTIONS, CYCLING_COMMANDS, Command, CommandAction
from media_control.models.player import PlaybackStatus, PlayerHandle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DispatchResult:
    """What was done, and the state the notification is composed from."""
    command: Command
    action: CommandAction
    players: Sequence[PlayerHandle]
    active_index: int
    # Status read before the command was applied (PLAY_PAUSE only)
    status: Optional[PlaybackStatus] = None

    @property
    def active_player(self) -> PlayerHandle:
        return self.players[self.active_index]


def resolve_action(command: Command, status: Optional[PlaybackStatus] = None) -> CommandAction:
    """Look up the table row; PLAY_PAUSE becomes PAUSE while playing, PLAY otherwise."""
    if command is Command.PLAY_PAUSE:
        command = Command.PAUSE if status is PlaybackStatus.PLAYING else Command.PLAY
    return COMMAND_ACTIONS[command]


def dispatch(command: Command, players: Sequence[PlayerHandle], active_index: int) -> DispatchResult:
    """Run the command against the roster. RegistryError propagates."""
    player = require_active_player(players, active_index)

    if command in CYCLING_COMMANDS:
        action = COMMAND_ACTIONS[command]
        new_index = cycle(len(players), active_index, action.step)
        logger.info(
            "Switched player %s -> %s", player.stable_id, players[new_index].stable_id
        )
        return DispatchResult(command, action, players, new_index)

    # Read once: the same snapshot picks the action and labels the notification
    status = player.playback_state() if command is Command.PLAY_PAUSE else None
    action = resolve_action(command, status)
    logger.info("%s on %s", action.label, player.stable_id)
    action.transport(player)
    return DispatchResult(command, action, players, active_index, status)
