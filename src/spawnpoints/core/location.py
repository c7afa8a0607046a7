"""Location value type.

Usage:
    spawn = Location("overworld", 0.5, 64.0, 0.5)
    data = spawn.to_dict()
    assert Location.from_dict(data) == spawn
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from spawnpoints.core.errors import MalformedLocationError

_COORDINATES = ("x", "y", "z")
_ORIENTATION = ("yaw", "pitch")


@dataclass(frozen=True, slots=True)
class Location:
    """A point in a world plus a facing direction.

    Attributes:
        world: Name of the world the location belongs to.
        x: East/west coordinate.
        y: Height.
        z: North/south coordinate.
        yaw: Horizontal facing in degrees.
        pitch: Vertical facing in degrees.
    """

    world: str
    x: float
    y: float
    z: float
    yaw: float = 0.0
    pitch: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain mapping suitable for YAML."""
        return {
            "world": self.world,
            "x": self.x,
            "y": self.y,
            "z": self.z,
            "yaw": self.yaw,
            "pitch": self.pitch,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Location:
        """Create from a mapping produced by to_dict().

        Orientation fields are optional and default to 0.

        Raises:
            MalformedLocationError: If data is not a mapping, the world name is
                missing, or a coordinate is missing or not a number.
        """
        if not isinstance(data, dict):
            raise MalformedLocationError(f"Expected a mapping, got {type(data).__name__}")

        world = data.get("world")
        if not isinstance(world, str) or not world:
            raise MalformedLocationError("Location is missing a world name")

        values: dict[str, float] = {}
        for key in _COORDINATES + _ORIENTATION:
            raw = data.get(key, 0.0 if key in _ORIENTATION else None)
            # bool is an int subclass; reject it explicitly
            if isinstance(raw, bool) or not isinstance(raw, (int, float)):
                raise MalformedLocationError(f"Location field {key!r} is not a number: {raw!r}")
            values[key] = float(raw)

        return cls(world=world, **values)
