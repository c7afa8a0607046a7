"""Host world access: protocols plus an in-memory provider."""

from spawnpoints.world.local import LocalWorld, LocalWorldProvider
from spawnpoints.world.protocol import HostWorld, WorldProvider

__all__ = [
    "WorldProvider",
    "HostWorld",
    "LocalWorldProvider",
    "LocalWorld",
]
