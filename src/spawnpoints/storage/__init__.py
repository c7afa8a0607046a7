"""Storage backends."""

from spawnpoints.storage.config_store import ConfigStore
from spawnpoints.storage.protocol import SpawnStore

__all__ = [
    "SpawnStore",
    "ConfigStore",
]
