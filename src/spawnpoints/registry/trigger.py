"""Deferred, exactly-once registry initialization.

Hosts that announce readiness through an event hook wire it up like this:

    signal = LocalReadySignal()
    trigger = InitializationTrigger(registry, signal)
    ...
    signal.emit()  # host finished starting; registry loads once

Hosts with an explicit bootstrap can skip this and call registry.load().
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from spawnpoints.registry.registry import SpawnRegistry

logger = logging.getLogger(__name__)

ReadyCallback = Callable[[], None]


@runtime_checkable
class ReadySignal(Protocol):
    """Host's one-shot "environment ready" notification."""

    def subscribe(self, callback: ReadyCallback) -> None:
        """Register callback to run when the host is ready."""
        ...

    def unsubscribe(self, callback: ReadyCallback) -> None:
        """Stop delivering to callback. Unknown callbacks are ignored."""
        ...


class LocalReadySignal:
    """In-process ReadySignal. emit() may be called any number of times."""

    def __init__(self) -> None:
        self._subscribers: list[ReadyCallback] = []

    def subscribe(self, callback: ReadyCallback) -> None:
        self._subscribers.append(callback)

    def unsubscribe(self, callback: ReadyCallback) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def emit(self) -> None:
        """Deliver the ready notification to every current subscriber."""
        # Copy: subscribers may unsubscribe during delivery
        for callback in list(self._subscribers):
            callback()


class InitializationTrigger:
    """Loads a registry on the first ready notification, then unsubscribes.

    Args:
        registry: Registry to load.
        signal: Host readiness signal; subscribed to immediately.
    """

    def __init__(self, registry: SpawnRegistry, signal: ReadySignal):
        self._registry = registry
        self._signal = signal
        self._fired = False
        signal.subscribe(self._on_ready)

    @property
    def fired(self) -> bool:
        return self._fired

    def _on_ready(self) -> None:
        if self._fired:
            logger.debug("Ready signal delivered again; spawn registry already initialized")
            return
        self._fired = True
        try:
            self._registry.load()
        finally:
            self._signal.unsubscribe(self._on_ready)
