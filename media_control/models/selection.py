"""Persisted cross-invocation selection."""
from dataclasses import dataclass

# Reserved: never a real notification id
NO_NOTIFICATION = 0


@dataclass(frozen=True)
class SelectionRecord:
    """Last acted-on player (stable id) and the id of the notification we showed."""
    last_active_stable_id: str = ""
    notification_handle: int = NO_NOTIFICATION
