"""Error hierarchy.

Absence is never an error here: a missing file, a missing key or a missing
world all come back as empty results. Only persistence and parse failures
raise.
"""


class SpawnPointsError(Exception):
    """Base class for all spawnpoints errors."""

    pass


class PersistError(SpawnPointsError, OSError):
    """Raised when the spawn document cannot be written to disk.

    Subclasses OSError so callers that already handle I/O failures keep working.
    The cache has been mutated by the time this is raised.
    """

    pass


class StoreLoadError(SpawnPointsError):
    """Raised when the spawn document exists but cannot be parsed."""

    pass


class MalformedLocationError(SpawnPointsError, ValueError):
    """Raised when serialized location data is missing fields or has bad values."""

    pass
