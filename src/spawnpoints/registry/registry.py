"""SpawnRegistry: cached spawn overrides with host fallback.

Usage:
    registry = SpawnRegistry(ConfigStore(path), worlds)
    registry.load()  # once, after the host is ready

    registry.get_spawn_point("overworld")  # override, else host default
    registry.set_spawn_point("overworld", Location("overworld", 10, 70, 10))
    registry.set_global_spawn(Location("lobby", 0, 80, 0))

Writes update the cache first and then persist. If persisting fails the error
propagates and the cache stays ahead of the document until the next load.
No locking: callers are expected to use the registry from one thread.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from spawnpoints.core.location import Location
from spawnpoints.storage.protocol import SpawnStore
from spawnpoints.world.protocol import HostWorld, WorldProvider

logger = logging.getLogger(__name__)


class SpawnRegistry:
    """In-memory spawn points synchronized with a SpawnStore.

    Starts empty. Lookups before load() see no overrides and fall back to the
    host defaults rather than failing.

    Args:
        store: Persistence backend.
        worlds: Host world lookup used for default spawns.
    """

    def __init__(self, store: SpawnStore, worlds: WorldProvider):
        self._store = store
        self._worlds = worlds
        self._locations: dict[str, Location] = {}
        self._global_spawn: Location | None = None
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    def load(self) -> bool:
        """Populate the cache from the store. Only the first call does anything.

        Entries set before loading are newer than the document and are kept.

        Returns:
            True if this call loaded, False if the registry was already loaded.
        """
        if self._loaded:
            logger.debug("Spawn registry already loaded; ignoring repeated load")
            return False

        overrides, global_spawn = self._store.load()
        for world_name, location in overrides.items():
            self._locations.setdefault(world_name, location)
        if self._global_spawn is None:
            self._global_spawn = global_spawn

        self._loaded = True
        logger.info("Spawn registry loaded with %d override(s)", len(self._locations))
        return True

    def get_spawn_point(self, world: str | HostWorld) -> Location | None:
        """Spawn location of a world.

        Args:
            world: World name, or a world object from the host.

        Returns:
            The override if one is set, otherwise the host's default spawn.
            None only when given a name and the host has no such world.
        """
        if isinstance(world, str):
            override = self._locations.get(world)
            if override is not None:
                return override
            if not self._worlds.world_exists(world):
                return None
            return self._worlds.default_spawn_of(world)

        override = self._locations.get(world.name)
        if override is not None:
            return override
        return world.spawn_location

    def set_spawn_point(self, world_name: str, location: Location) -> None:
        """Set the spawn override for a world and persist it.

        Raises:
            ValueError: If world_name is the reserved global key.
            PersistError: If saving fails. The cache is already updated.
        """
        if world_name == self._store.global_key:
            raise ValueError(f"{world_name!r} is reserved for the global spawn")

        self._locations[world_name] = location
        self._store.save(world_name, location)

    def get_global_spawn(self) -> Location | None:
        """Global "hub" spawn, or None if never set or loaded."""
        return self._global_spawn

    def set_global_spawn(self, location: Location) -> None:
        """Set the global spawn and persist it.

        Raises:
            PersistError: If saving fails. The cache is already updated.
        """
        self._global_spawn = location
        self._store.save(self._store.global_key, location)

    def overrides(self) -> Mapping[str, Location]:
        """Read-only snapshot of the per-world overrides."""
        return MappingProxyType(dict(self._locations))

    def __contains__(self, world_name: object) -> bool:
        return world_name in self._locations
