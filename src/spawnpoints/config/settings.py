"""Configuration settings using Pydantic Settings.

The host normally passes its plugin data folder explicitly; environment
variables (SPAWNS_*) only override the defaults.

Usage:
    from spawnpoints.config import SpawnSettings

    settings = SpawnSettings(data_dir="plugins/WraithLib")
    settings.config_path  # plugins/WraithLib/spawns.yml
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class SpawnSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the persisted spawn document.

    Attributes:
        data_dir: Host-provided data folder for this plugin.
        file_name: Name of the YAML document inside data_dir.
        global_key: Reserved document key holding the global spawn.

    Environment Variables:
        SPAWNS_DATA_DIR
        SPAWNS_FILE_NAME
        SPAWNS_GLOBAL_KEY
    """

    model_config = SettingsConfigDict(
        env_prefix="SPAWNS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_dir: Path = Path(".")
    file_name: str = "spawns.yml"
    global_key: str = "Global_Spawn"

    @property
    def config_path(self) -> Path:
        """Full path of the spawn document."""
        return self.data_dir / self.file_name
