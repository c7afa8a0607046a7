"""Protocols for the host environment's worlds.

The host game server owns worlds and their default spawns. The registry only
sees them through these interfaces, so tests can pass LocalWorldProvider.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from spawnpoints.core.location import Location


@runtime_checkable
class WorldProvider(Protocol):
    """Lookup of loaded worlds by name."""

    def world_exists(self, name: str) -> bool:
        """Check if the host has a world with this name loaded."""
        ...

    def default_spawn_of(self, name: str) -> Location:
        """Host's own spawn location for an existing world."""
        ...


@runtime_checkable
class HostWorld(Protocol):
    """A world object handed out by the host."""

    @property
    def name(self) -> str: ...

    @property
    def spawn_location(self) -> Location: ...
