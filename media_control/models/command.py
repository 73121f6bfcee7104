"""Commands and the dispatch table (transport or cycling action, label, icon)."""
from dataclasses import dataclass
from enum import Enum
from operator import methodcaller
from typing import Callable, Dict, Optional

from media_control.errors import ParseError


class Command(Enum):
    PLAY = "play"
    PAUSE = "pause"
    PLAY_PAUSE = "playpause"
    NEXT = "next"
    PREVIOUS = "previous"
    NEXT_PLAYER = "next_player"
    PREVIOUS_PLAYER = "previous_player"


# Accepted command-line spellings
COMMAND_NAMES: Dict[str, Command] = {
    "play": Command.PLAY,
    "pause": Command.PAUSE,
    "playpause": Command.PLAY_PAUSE,
    "play-pause": Command.PLAY_PAUSE,
    "next": Command.NEXT,
    "previous": Command.PREVIOUS,
    "next_player": Command.NEXT_PLAYER,
    "previous_player": Command.PREVIOUS_PLAYER,
}


@dataclass(frozen=True)
class CommandAction:
    """One row of the dispatch table.

    Exactly one of ``transport`` (called with the active player) or a
    nonzero ``step`` (player cycling) is set.
    """
    label: str
    icon: str
    transport: Optional[Callable[[object], None]] = None
    step: int = 0

    @property
    def is_cycling(self) -> bool:
        return self.step != 0


# PLAY_PAUSE has no row: it resolves to PLAY or PAUSE from the live status.
COMMAND_ACTIONS: Dict[Command, CommandAction] = {
    Command.PLAY: CommandAction("Play", "gtk-media-play-ltr", transport=methodcaller("play")),
    Command.PAUSE: CommandAction("Pause", "gtk-media-pause", transport=methodcaller("pause")),
    Command.NEXT: CommandAction("Next track", "gtk-media-next-ltr", transport=methodcaller("next")),
    Command.PREVIOUS: CommandAction(
        "Previous track", "gtk-media-previous-ltr", transport=methodcaller("previous")
    ),
    Command.NEXT_PLAYER: CommandAction("Selected player", "forward", step=1),
    Command.PREVIOUS_PLAYER: CommandAction("Selected player", "back", step=-1),
}

CYCLING_COMMANDS = frozenset(
    command for command, action in COMMAND_ACTIONS.items() if action.is_cycling
)


def parse_command(value: Optional[str]) -> Command:
    """Return the Command for a CLI argument; raise ParseError otherwise."""
    if value is None:
        raise ParseError("Not enough arguments!")
    try:
        return COMMAND_NAMES[value]
    except KeyError:
        raise ParseError(f'Unknown command "{value}"!') from None
