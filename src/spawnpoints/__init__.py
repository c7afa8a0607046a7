"""spawnpoints: per-world spawn overrides and a global hub spawn for game servers.

Usage:
    from spawnpoints import (
        ConfigStore, InitializationTrigger, Location, SpawnRegistry, SpawnSettings,
    )

    store = ConfigStore.from_settings(SpawnSettings(data_dir=plugin_data_folder))
    registry = SpawnRegistry(store, host_worlds)
    InitializationTrigger(registry, host_ready_signal)

    registry.get_spawn_point("overworld")
    registry.set_spawn_point("overworld", Location("overworld", 10, 70, 10))
"""

__version__ = "0.1.0"

# Config
from spawnpoints.config import SpawnSettings

# Core primitives
from spawnpoints.core import (
    Location,
    MalformedLocationError,
    PersistError,
    SpawnPointsError,
    StoreLoadError,
)

# Registry
from spawnpoints.registry import (
    InitializationTrigger,
    LocalReadySignal,
    ReadySignal,
    SpawnRegistry,
)

# Storage
from spawnpoints.storage import (
    ConfigStore,
    SpawnStore,
)

# Host worlds
from spawnpoints.world import (
    HostWorld,
    LocalWorld,
    LocalWorldProvider,
    WorldProvider,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Location",
    "SpawnPointsError",
    "PersistError",
    "StoreLoadError",
    "MalformedLocationError",
    # Config
    "SpawnSettings",
    # Storage
    "SpawnStore",
    "ConfigStore",
    # Worlds
    "WorldProvider",
    "HostWorld",
    "LocalWorldProvider",
    "LocalWorld",
    # Registry
    "SpawnRegistry",
    "InitializationTrigger",
    "ReadySignal",
    "LocalReadySignal",
]
