class SongChordsError(Exception):
    """Base exception for songchords."""


class ConfigError(SongChordsError):
    """Raised when a settings file cannot be read or fails validation."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid config {path}: {reason}")


class CacheError(SongChordsError):
    """Raised by a cache that refuses to store an entry.

    The annotator treats this as non-fatal: the computed markup is still
    returned to the caller.
    """


class UnknownClassifierError(SongChordsError):
    """Raised when no line classifier is registered under the given name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No line classifier named: {name}")
