"""Pick the active player from the live roster and the persisted stable id."""
from typing import Sequence

from media_control.errors import NoPlayersError
from media_control.models.player import PlayerHandle


def resolve_active_index(players: Sequence[PlayerHandle], stable_id: str) -> int:
    """Index of the first player whose stable id matches, else 0 (also for an empty roster)."""
    for index, player in enumerate(players):
        if player.stable_id == stable_id:
            return index
    return 0


def require_active_player(players: Sequence[PlayerHandle], index: int) -> PlayerHandle:
    if not players:
        raise NoPlayersError("No media players found!")
    return players[index]
