"""Error taxonomy. Everything raised on purpose derives from MediaControlError."""


class MediaControlError(Exception):
    """Base class; main() turns these into a message and exit status 1."""


class StorageError(MediaControlError):
    """The last-player file could not be written."""


class ConfigError(StorageError):
    """Runtime directory env var missing. Only fatal when saving."""


class RegistryError(MediaControlError):
    """Player enumeration or a per-player call failed."""


class NoPlayersError(RegistryError):
    """No MPRIS player is running, so there is nothing to target."""


class NotifyError(MediaControlError):
    """The notification service rejected the show/replace request."""


class ParseError(MediaControlError):
    """Bad or missing command-line argument."""
