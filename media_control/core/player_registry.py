"""MPRIS2 players on the D-Bus session bus (dbus-python)."""
import logging
from typing import Any, Callable, List, Optional

from media_control.errors import RegistryError
from media_control.models.player import PlaybackStatus, TrackMetadata

logger = logging.getLogger(__name__)

# Optional: dbus-python needs libdbus; without it every registry call fails cleanly
try:
    import dbus
except ImportError:
    dbus = None

MPRIS_PREFIX = "org.mpris.MediaPlayer2."
MPRIS_PATH = "/org/mpris/MediaPlayer2"
ROOT_IFACE = "org.mpris.MediaPlayer2"
PLAYER_IFACE = "org.mpris.MediaPlayer2.Player"
PROPERTIES_IFACE = "org.freedesktop.DBus.Properties"


def _dbus_errors() -> tuple:
    return (dbus.exceptions.DBusException,)


def session_bus():
    """Connect to the session bus; RegistryError if that is impossible."""
    if dbus is None:
        raise RegistryError("dbus-python is not installed; cannot reach media players")
    try:
        return dbus.SessionBus()
    except _dbus_errors() as e:
        raise RegistryError(f"Could not connect to the session bus: {e}") from e


def parse_metadata(raw: Any) -> TrackMetadata:
    """Pick artists/title out of an MPRIS ``Metadata`` dict."""
    raw = raw or {}
    artists = raw.get("xesam:artist")
    if isinstance(artists, str):
        artists = [artists]
    elif artists is not None:
        artists = [str(a) for a in artists]
    title = raw.get("xesam:title")
    return TrackMetadata(
        artists=artists,
        title=str(title) if title is not None else None,
    )


class MprisPlayer:
    """One ``org.mpris.MediaPlayer2.*`` bus name."""

    def __init__(self, bus, bus_name: str) -> None:
        self._bus_name = bus_name
        self._obj = self._call("connect", lambda: bus.get_object(bus_name, MPRIS_PATH))
        self._display_name: Optional[str] = None

    def __repr__(self) -> str:
        return f"MprisPlayer({self._bus_name!r})"

    def _call(self, what: str, fn: Callable[[], Any]) -> Any:
        try:
            return fn()
        except _dbus_errors() as e:
            raise RegistryError(f"{what} failed for {self._bus_name}: {e}") from e

    def _get_property(self, iface: str, name: str) -> Any:
        return self._call(
            f"reading {name}",
            lambda: self._obj.Get(iface, name, dbus_interface=PROPERTIES_IFACE),
        )

    def _player_method(self, method: str) -> None:
        self._call(method, lambda: getattr(self._obj, method)(dbus_interface=PLAYER_IFACE))

    @property
    def stable_id(self) -> str:
        """Well-known bus name; survives across invocations unlike the unique ``:1.N`` name."""
        return self._bus_name

    @property
    def display_name(self) -> str:
        if self._display_name is None:
            try:
                self._display_name = str(self._get_property(ROOT_IFACE, "Identity"))
            except RegistryError as e:
                logger.warning("%s; using bus name", e)
                self._display_name = self._bus_name[len(MPRIS_PREFIX):]
        return self._display_name

    def playback_state(self) -> PlaybackStatus:
        return PlaybackStatus.parse(self._get_property(PLAYER_IFACE, "PlaybackStatus"))

    def metadata(self) -> TrackMetadata:
        return parse_metadata(self._get_property(PLAYER_IFACE, "Metadata"))

    def play(self) -> None:
        self._player_method("Play")

    def pause(self) -> None:
        self._player_method("Pause")

    def play_pause(self) -> None:
        self._player_method("PlayPause")

    def next(self) -> None:
        self._player_method("Next")

    def previous(self) -> None:
        self._player_method("Previous")


class MprisRegistry:
    """Enumerates running MPRIS players, sorted by bus name for a stable cycling order."""

    def __init__(self, bus=None) -> None:
        self._bus = bus

    @property
    def bus(self):
        if self._bus is None:
            self._bus = session_bus()
        return self._bus

    def find_all_players(self) -> List[MprisPlayer]:
        bus = self.bus
        try:
            names = [str(n) for n in bus.list_names()]
        except _dbus_errors() as e:
            raise RegistryError(f"Could not list bus names: {e}") from e
        players = [MprisPlayer(bus, n) for n in sorted(names) if n.startswith(MPRIS_PREFIX)]
        logger.debug("Found players: %s", [p.stable_id for p in players])
        return players
