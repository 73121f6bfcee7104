"""Desktop notifications via org.freedesktop.Notifications (dbus-python)."""
import logging

from media_control.config import APP_NAME
from media_control.errors import NotifyError
from media_control.models.notification import NotificationRequest

logger = logging.getLogger(__name__)

try:
    import dbus
except ImportError:
    dbus = None

NOTIFY_BUS_NAME = "org.freedesktop.Notifications"
NOTIFY_PATH = "/org/freedesktop/Notifications"
NOTIFY_IFACE = "org.freedesktop.Notifications"


class DesktopNotifier:
    """Shows (or replaces in place) one notification per call."""

    def __init__(self, bus=None, app_name: str = APP_NAME) -> None:
        self._bus = bus
        self._app_name = app_name

    def _service(self):
        if dbus is None:
            raise NotifyError("dbus-python is not installed; cannot show notifications")
        try:
            if self._bus is None:
                self._bus = dbus.SessionBus()
            return self._bus.get_object(NOTIFY_BUS_NAME, NOTIFY_PATH)
        except dbus.exceptions.DBusException as e:
            raise NotifyError(f"Notification service unavailable: {e}") from e

    def show(self, request: NotificationRequest) -> int:
        """Return the id the service assigned (the same id when replacing)."""
        service = self._service()
        hints = {"urgency": dbus.Byte(request.urgency.value)}
        try:
            handle = service.Notify(
                self._app_name,
                dbus.UInt32(request.replaces_id or 0),
                request.icon,
                request.summary,
                request.body,
                dbus.Array([], signature="s"),
                dbus.Dictionary(hints, signature="sv"),
                dbus.Int32(request.timeout_ms),
                dbus_interface=NOTIFY_IFACE,
            )
        except dbus.exceptions.DBusException as e:
            raise NotifyError(f"Could not show notification: {e}") from e
        logger.debug("Notification %s (replaces %s)", handle, request.replaces_id)
        return int(handle)
