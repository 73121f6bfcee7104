"""Notification request sent to the desktop notification service."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Urgency(Enum):
    """Values of the freedesktop ``urgency`` hint byte."""
    LOW = 0
    NORMAL = 1
    CRITICAL = 2


@dataclass(frozen=True)
class NotificationRequest:
    summary: str
    body: str
    icon: str
    urgency: Urgency
    timeout_ms: int
    replaces_id: Optional[int] = None  # None: let the service allocate a new id
