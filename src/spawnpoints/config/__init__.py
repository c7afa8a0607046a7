"""Configuration module using Pydantic Settings."""

from spawnpoints.config.settings import SpawnSettings

__all__ = [
    "SpawnSettings",
]
