"""Local in-memory world provider.

Dict-based stand-in for the host's world list, for standalone hosts and tests.

Usage:
    worlds = LocalWorldProvider()
    overworld = worlds.add_world("overworld", Location("overworld", 0, 64, 0))
"""

from __future__ import annotations

from dataclasses import dataclass

from spawnpoints.core.location import Location


@dataclass(frozen=True, slots=True)
class LocalWorld:
    """Minimal HostWorld implementation."""

    name: str
    spawn_location: Location


class LocalWorldProvider:
    """WorldProvider backed by a dict of world name to LocalWorld."""

    def __init__(self, worlds: dict[str, Location] | None = None):
        self._worlds: dict[str, LocalWorld] = {}
        for name, spawn in (worlds or {}).items():
            self.add_world(name, spawn)

    def add_world(self, name: str, spawn: Location) -> LocalWorld:
        """Register (or replace) a world and its default spawn."""
        world = LocalWorld(name=name, spawn_location=spawn)
        self._worlds[name] = world
        return world

    def get_world(self, name: str) -> LocalWorld | None:
        """World object for name, or None if unknown."""
        return self._worlds.get(name)

    def world_exists(self, name: str) -> bool:
        return name in self._worlds

    def default_spawn_of(self, name: str) -> Location:
        """Default spawn of a registered world.

        Raises:
            KeyError: If the world is unknown.
        """
        return self._worlds[name].spawn_location
