"""Data models for players, commands, selection state and notifications."""
from media_control.models.command import COMMAND_ACTIONS, Command, CommandAction, parse_command
from media_control.models.notification import NotificationRequest, Urgency
from media_control.models.player import PlaybackState, PlaybackStatus, PlayerHandle, TrackMetadata
from media_control.models.selection import SelectionRecord

__all__ = [
    "COMMAND_ACTIONS",
    "Command",
    "CommandAction",
    "NotificationRequest",
    "PlaybackState",
    "PlaybackStatus",
    "PlayerHandle",
    "SelectionRecord",
    "TrackMetadata",
    "Urgency",
    "parse_command",
]
