"""One invocation: load selection, apply command, notify, persist."""
import logging
from dataclasses import dataclass
from enum import Enum

from media_control.core.composer import compose_notification
from media_control.core.dispatcher import dispatch
from media_control.core.resolver import resolve_active_index
from media_control.models.command import Command
from media_control.models.notification import NotificationRequest
from media_control.models.player import PlayerRegistry

logger = logging.getLogger(__name__)


class Phase(Enum):
    IDLE = "idle"
    APPLYING = "applying"
    NOTIFYING = "notifying"
    PERSISTING = "persisting"
    DONE = "done"


@dataclass(frozen=True)
class SessionOutcome:
    stable_id: str
    notification_handle: int
    notification: NotificationRequest


class ControlSession:
    """Runs a single command to completion.

    Collaborators are injected: ``registry`` (find_all_players), ``notifier``
    (show) and ``store`` (load/save). Nothing is rolled back on failure; the
    player may already have changed when notify or save fails, and
    ``phase`` is left where the error happened.
    """

    def __init__(self, registry: PlayerRegistry, notifier, store) -> None:
        self.registry = registry
        self.notifier = notifier
        self.store = store
        self.phase = Phase.IDLE

    def run(self, command: Command) -> SessionOutcome:
        record = self.store.load()
        players = self.registry.find_all_players()
        index = resolve_active_index(players, record.last_active_stable_id)
        logger.debug(
            "%d player(s), last=%r, active index %d",
            len(players),
            record.last_active_stable_id,
            index,
        )

        self.phase = Phase.APPLYING
        result = dispatch(command, players, index)

        self.phase = Phase.NOTIFYING
        request = compose_notification(result, record.notification_handle)
        handle = self.notifier.show(request)

        self.phase = Phase.PERSISTING
        stable_id = result.active_player.stable_id
        self.store.save(stable_id, handle)

        self.phase = Phase.DONE
        return SessionOutcome(stable_id=stable_id, notification_handle=handle, notification=request)
