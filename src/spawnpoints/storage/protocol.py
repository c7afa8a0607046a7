"""Storage protocol for swappable spawn persistence backends."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from spawnpoints.core.location import Location


@runtime_checkable
class SpawnStore(Protocol):
    """Abstract persistence interface. Implementations own any file handles."""

    @property
    def global_key(self) -> str:
        """Reserved document key holding the global spawn."""
        ...

    def load(self) -> tuple[dict[str, Location], Location | None]:
        """Read every persisted override plus the global spawn.

        Returns:
            (overrides, global_spawn). A missing document yields ({}, None).
        """
        ...

    def save(self, key: str, location: Location) -> None:
        """Persist a single key, writing the whole document synchronously.

        Raises:
            PersistError: If the write cannot complete.
        """
        ...
