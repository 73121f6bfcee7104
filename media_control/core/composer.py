"""Build the confirmation notification for a dispatched command."""
import os
from html import escape
from typing import Optional

from media_control.config import ICON_DIR, PLAYER_SWITCH_TIMEOUT_MS, TRANSPORT_TIMEOUT_MS
from media_control.core.dispatcher import DispatchResult
from media_control.models.notification import NotificationRequest, Urgency
from media_control.models.player import PlaybackState, PlaybackStatus, TrackMetadata
from media_control.models.selection import NO_NOTIFICATION

ACTIVE_MARKER = "→"
MUTED_COLOR = "grey"


def icon_path(icon: str) -> str:
    return os.path.join(ICON_DIR, f"{icon}.png")


def track_body(metadata: Optional[TrackMetadata]) -> str:
    """``"<artists> - <title>"``; missing fields render empty (so ``" - "`` is possible)."""
    artists = ", ".join(metadata.artists) if metadata and metadata.artists else ""
    title = metadata.title if metadata and metadata.title else ""
    return escape(f"{artists} - {title}", quote=False)


def roster_body(result: DispatchResult) -> str:
    """One line per player; the active one marked, the rest muted."""
    lines = []
    for index, player in enumerate(result.players):
        name = escape(player.display_name, quote=False)
        if index == result.active_index:
            lines.append(f"{ACTIVE_MARKER} {name}")
        else:
            lines.append(f'<span color="{MUTED_COLOR}">{name}</span>')
    return "\n".join(lines)


def compose_notification(result: DispatchResult, previous_handle: int) -> NotificationRequest:
    """Compose the notification; replaces the previous one when its id is known.

    Transport bodies read metadata live from the active player, after the
    command was applied, so ``next``/``previous`` show the new track.
    """
    player = result.active_player
    action = result.action
    summary = f"{action.label} ({player.display_name})"

    if action.is_cycling:
        body = roster_body(result)
        urgency = Urgency.NORMAL
        timeout_ms = PLAYER_SWITCH_TIMEOUT_MS
    else:
        state = PlaybackState(result.status or PlaybackStatus.UNKNOWN, player.metadata())
        body = track_body(state.metadata)
        urgency = Urgency.LOW
        timeout_ms = TRANSPORT_TIMEOUT_MS

    # 0 doubles as "nothing to replace", even if a service could hand out id 0
    replaces_id = previous_handle if previous_handle != NO_NOTIFICATION else None
    return NotificationRequest(
        summary=summary,
        body=body,
        icon=icon_path(action.icon),
        urgency=urgency,
        timeout_ms=timeout_ms,
        replaces_id=replaces_id,
    )
