"""Persist and load the last active player and notification id."""
import logging
from pathlib import Path
from typing import Optional

from media_control.config import last_player_file_path
from media_control.errors import ConfigError, StorageError
from media_control.models.selection import SelectionRecord

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ";"
# Notification ids are uint32 on the bus
MAX_HANDLE = 0xFFFFFFFF


def parse_record(text: str) -> Optional[SelectionRecord]:
    """Parse ``"<stable_id>;<handle>"``. Returns None if malformed."""
    fields = text.split(FIELD_SEPARATOR)
    if len(fields) < 2:
        return None
    handle = fields[1].strip()
    if not (handle.isascii() and handle.isdigit()) or int(handle) > MAX_HANDLE:
        return None
    return SelectionRecord(last_active_stable_id=fields[0], notification_handle=int(handle))


def format_record(stable_id: str, notification_handle: int) -> str:
    return f"{stable_id}{FIELD_SEPARATOR}{notification_handle}"


class SelectionStore:
    """Reads once at start, writes once at the end. Not locked: last writer wins."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path

    def _resolve_path(self) -> Path:
        if self._path is not None:
            return self._path
        return last_player_file_path()

    def load(self) -> SelectionRecord:
        """Load the record; any problem degrades to the empty default."""
        try:
            p = self._resolve_path()
        except ConfigError as e:
            logger.warning("Unknown path to load from: %s", e)
            return SelectionRecord()
        if not p.exists():
            logger.info("No last-player file at %s", p)
            return SelectionRecord()
        try:
            text = p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read %s: %s", p, e)
            return SelectionRecord()
        record = parse_record(text)
        if record is None:
            logger.warning("Ignoring malformed last-player file %s", p)
            return SelectionRecord()
        return record

    def save(self, stable_id: str, notification_handle: int) -> None:
        """Overwrite the record file. Raises StorageError (ConfigError if no runtime dir)."""
        p = self._resolve_path()
        try:
            p.write_text(format_record(stable_id, notification_handle), encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Could not write {p}: {e}") from e
        logger.debug("Saved selection %s;%s to %s", stable_id, notification_handle, p)
