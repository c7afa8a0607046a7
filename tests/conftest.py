"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from pathlib import Path

from spawnpoints import ConfigStore, Location, LocalWorldProvider, PersistError, SpawnRegistry

OVERWORLD_DEFAULT = Location("overworld", 0.5, 64.0, 0.5)
NETHER_DEFAULT = Location("nether", 8.0, 70.0, -8.0, yaw=180.0)


class MemoryStore:
    """SpawnStore that keeps the document in a dict and counts calls."""

    global_key = "Global_Spawn"

    def __init__(self, document: dict[str, Location] | None = None, fail_saves: bool = False):
        self.document: dict[str, Location] = dict(document or {})
        self.fail_saves = fail_saves
        self.load_calls = 0
        self.saved: list[tuple[str, Location]] = []

    def load(self) -> tuple[dict[str, Location], Location | None]:
        self.load_calls += 1
        overrides = {k: v for k, v in self.document.items() if k != self.global_key}
        return overrides, self.document.get(self.global_key)

    def save(self, key: str, location: Location) -> None:
        if self.fail_saves:
            raise PersistError("disk full")
        self.saved.append((key, location))
        self.document[key] = location


@pytest.fixture
def worlds() -> LocalWorldProvider:
    """Host with an overworld and a nether."""
    return LocalWorldProvider({"overworld": OVERWORLD_DEFAULT, "nether": NETHER_DEFAULT})


@pytest.fixture
def spawn_file(tmp_path: Path) -> Path:
    return tmp_path / "WraithLib" / "spawns.yml"


@pytest.fixture
def store(spawn_file: Path) -> ConfigStore:
    return ConfigStore(spawn_file)


@pytest.fixture
def registry(store: ConfigStore, worlds: LocalWorldProvider) -> SpawnRegistry:
    """Fresh, unloaded registry over an empty file."""
    return SpawnRegistry(store, worlds)


@pytest.fixture
def memory_store_cls():
    return MemoryStore
