"""Core services: selection store, player registry, dispatch, notifications."""
from media_control.core.notifier import DesktopNotifier
from media_control.core.player_registry import MprisRegistry
from media_control.core.selection_store import SelectionStore
from media_control.core.session import ControlSession

__all__ = ["ControlSession", "DesktopNotifier", "MprisRegistry", "SelectionStore"]
