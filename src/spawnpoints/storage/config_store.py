"""YAML file storage for spawn points.

The document is a flat mapping: world names map to serialized locations, and
one reserved key (Global_Spawn by default) holds the global spawn.

    Global_Spawn: {world: lobby, x: 0.5, y: 80.0, z: 0.5, yaw: 0.0, pitch: 0.0}
    overworld: {world: overworld, x: 12.0, y: 64.0, z: -3.0, yaw: 90.0, pitch: 0.0}

Usage:
    store = ConfigStore.from_settings(SpawnSettings(data_dir=data_folder))
    overrides, global_spawn = store.load()
    store.save("overworld", Location("overworld", 12, 64, -3))
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from spawnpoints.config.settings import SpawnSettings
from spawnpoints.core.errors import MalformedLocationError, PersistError, StoreLoadError
from spawnpoints.core.location import Location

logger = logging.getLogger(__name__)

DEFAULT_GLOBAL_KEY = "Global_Spawn"


class ConfigStore:
    """Spawn document on disk plus its in-memory mirror.

    The file is opened per call and never held open. Entries that fail to
    parse are skipped on load but kept in the document, so a save never
    drops data it did not understand.

    Args:
        path: Location of the YAML document.
        global_key: Reserved key for the global spawn.
    """

    def __init__(self, path: Path | str, global_key: str = DEFAULT_GLOBAL_KEY):
        self._path = Path(path)
        self._global_key = global_key
        self._document: dict[str, Any] | None = None

    @classmethod
    def from_settings(cls, settings: SpawnSettings) -> ConfigStore:
        """Build a store from settings."""
        return cls(settings.config_path, global_key=settings.global_key)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def global_key(self) -> str:
        return self._global_key

    def load(self) -> tuple[dict[str, Location], Location | None]:
        """Read the document and decode every well-formed entry.

        Returns:
            (overrides, global_spawn). A missing file yields ({}, None).

        Raises:
            StoreLoadError: If the file exists but cannot be read, is not valid
                YAML, or does not hold a mapping.
        """
        try:
            self._document = self._read_document()
        except OSError as e:
            raise StoreLoadError(f"Could not read spawn document {self._path}: {e}") from e

        overrides: dict[str, Location] = {}
        global_spawn: Location | None = None
        for key, value in self._document.items():
            if not isinstance(key, str):
                logger.warning("Skipping non-string spawn key %r in %s", key, self._path)
                continue
            try:
                location = Location.from_dict(value)
            except MalformedLocationError as e:
                logger.warning("Skipping malformed spawn entry %r in %s: %s", key, self._path, e)
                continue
            if key == self._global_key:
                global_spawn = location
            else:
                overrides[key] = location

        logger.info(
            "Loaded %d spawn point(s) from %s (global spawn %s)",
            len(overrides),
            self._path,
            "set" if global_spawn is not None else "unset",
        )
        return overrides, global_spawn

    def save(self, key: str, location: Location) -> None:
        """Set one key and write the whole document.

        Raises:
            PersistError: If the directory or file cannot be written, or the
                document was never loaded and the existing file cannot be parsed.
        """
        try:
            if self._document is None:
                # Saving before load must not clobber entries already on disk
                self._document = self._read_document()
            self._document[key] = location.to_dict()

            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", encoding="utf-8") as f:
                yaml.safe_dump(
                    self._document,
                    f,
                    default_flow_style=False,
                    sort_keys=False,
                    allow_unicode=True,
                )
        except (OSError, StoreLoadError) as e:
            raise PersistError(f"Could not save spawn point {key!r} to {self._path}: {e}") from e

        logger.info("Saved spawn point %r to %s", key, self._path)

    def _read_document(self) -> dict[str, Any]:
        """Parse the file into a mapping. Missing or empty files are empty mappings.

        Raises:
            OSError: If the file exists but cannot be read.
            StoreLoadError: If the file is not valid YAML or not a mapping.
        """
        try:
            with self._path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            logger.debug("No spawn document at %s", self._path)
            return {}
        except yaml.YAMLError as e:
            raise StoreLoadError(f"Could not parse spawn document {self._path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            # Refuse rather than let the next save overwrite it
            raise StoreLoadError(
                f"Spawn document {self._path} holds {type(data).__name__}, not a mapping"
            )
        return data
