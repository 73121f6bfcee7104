"""Configuration: env, notification look, runtime state location."""
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from media_control.errors import ConfigError

# Base paths (project root = parent of media_control package)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env from project root so MEDIA_CONTROL_* overrides are set
load_dotenv(BASE_DIR / ".env")

APP_NAME = os.getenv("MEDIA_CONTROL_APP_NAME", "media-control")
LOG_LEVEL = os.getenv("MEDIA_CONTROL_LOG_LEVEL", "WARNING").upper()

# Runtime state (last active player + notification id), per login session
RUNTIME_DIR_ENV = os.getenv("MEDIA_CONTROL_RUNTIME_DIR_ENV", "XDG_RUNTIME_DIR")
LAST_PLAYER_FILENAME = "media_control_last_player_file"

# Notifications
ICON_DIR = os.getenv("MEDIA_CONTROL_ICON_DIR", "/usr/share/icons/gnome/48x48/actions")
TRANSPORT_TIMEOUT_MS = int(os.getenv("MEDIA_CONTROL_TRANSPORT_TIMEOUT_MS", "1500"))
# Longer so the player roster can be read
PLAYER_SWITCH_TIMEOUT_MS = int(os.getenv("MEDIA_CONTROL_PLAYER_SWITCH_TIMEOUT_MS", "6000"))


def get_runtime_dir() -> Optional[Path]:
    """Return the session runtime directory, or None if the env var is unset."""
    value = os.environ.get(RUNTIME_DIR_ENV, "").strip()
    return Path(value) if value else None


def last_player_file_path() -> Path:
    runtime_dir = get_runtime_dir()
    if runtime_dir is None:
        raise ConfigError(f"{RUNTIME_DIR_ENV} is not set; cannot locate {LAST_PLAYER_FILENAME}")
    return runtime_dir / LAST_PLAYER_FILENAME
