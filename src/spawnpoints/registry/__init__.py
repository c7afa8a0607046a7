"""Spawn registry and its deferred initialization."""

from spawnpoints.registry.registry import SpawnRegistry
from spawnpoints.registry.trigger import InitializationTrigger, LocalReadySignal, ReadySignal

__all__ = [
    "SpawnRegistry",
    "InitializationTrigger",
    "ReadySignal",
    "LocalReadySignal",
]
