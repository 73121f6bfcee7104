"""Player handle contract and playback snapshots."""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol


class PlaybackStatus(Enum):
    PLAYING = "Playing"
    PAUSED = "Paused"
    STOPPED = "Stopped"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, value: object) -> "PlaybackStatus":
        """Map an MPRIS PlaybackStatus string; anything unexpected is UNKNOWN."""
        for status in cls:
            if status.value == str(value):
                return status
        return cls.UNKNOWN


@dataclass(frozen=True)
class TrackMetadata:
    """Subset of MPRIS metadata shown in notifications."""
    artists: Optional[List[str]] = None
    title: Optional[str] = None


@dataclass(frozen=True)
class PlaybackState:
    """Read-only snapshot; re-fetched on demand, never persisted."""
    status: PlaybackStatus
    metadata: Optional[TrackMetadata] = None


class PlayerHandle(Protocol):
    """One discovered player. Owned by the registry for a single invocation."""

    @property
    def stable_id(self) -> str: ...

    @property
    def display_name(self) -> str: ...

    def playback_state(self) -> PlaybackStatus: ...

    def metadata(self) -> TrackMetadata: ...

    def play(self) -> None: ...

    def pause(self) -> None: ...

    def play_pause(self) -> None: ...

    def next(self) -> None: ...

    def previous(self) -> None: ...


class PlayerRegistry(Protocol):
    def find_all_players(self) -> List[PlayerHandle]: ...
