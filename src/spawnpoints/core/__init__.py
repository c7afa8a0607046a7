"""Core primitives: value types and the error hierarchy.

Architecture Note:
    core/ holds stateless building blocks with no I/O.
    For stateful services, see storage/ and registry/.
"""

from spawnpoints.core.errors import (
    MalformedLocationError,
    PersistError,
    SpawnPointsError,
    StoreLoadError,
)
from spawnpoints.core.location import Location

__all__ = [
    "Location",
    "SpawnPointsError",
    "PersistError",
    "StoreLoadError",
    "MalformedLocationError",
]
