"""Error kinds raised by the indexing pipeline, configuration and playback."""


class TunepaneError(Exception):
    """Base exception for tunepane."""

    pass


class ConfigUnavailable(TunepaneError):
    """Raised when the configuration file cannot be read or parsed."""

    pass


class ScanFailure(TunepaneError):
    """Raised when the library root cannot be enumerated."""

    pass


class TagReadFailure(TunepaneError):
    """Raised when a single audio file's tags cannot be parsed."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Could not read tags from {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class CacheCorrupt(TunepaneError):
    """Raised when the metadata cache cannot be decoded."""

    pass


class CacheWriteFailure(TunepaneError):
    """Raised when the metadata cache cannot be written."""

    pass


class PlaybackFailure(TunepaneError):
    """Raised when a file cannot be handed to the player."""

    pass


class CacheStale(TunepaneError):
    """Raised when the metadata cache was built from a different library root."""

    pass
