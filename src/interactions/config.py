"""Configuration loading from environment variables and interactions.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

_CONFIG_FILENAME = "interactions.toml"
_USER_CONFIG_DIR = Path.home() / ".interactions"


@dataclass
class StorageConfig:
    """Where the shared and private trees live."""

    workspace: Path = field(default_factory=Path.cwd)
    shared_dir: str = ".team"
    private_dir: str = ".personal"


@dataclass
class AppConfig:
    """Top-level application configuration."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    user: str | None = None
    log_level: str = "INFO"


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load configuration from environment variables and optional interactions.toml.

    Priority: environment variables > interactions.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        for candidate in [Path.cwd() / _CONFIG_FILENAME, _USER_CONFIG_DIR / _CONFIG_FILENAME]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    storage_data = file_data.get("storage", {})
    workspace = os.getenv("INTERACTIONS_WORKSPACE", storage_data.get("workspace"))

    return AppConfig(
        storage=StorageConfig(
            workspace=Path(workspace).expanduser() if workspace else Path.cwd(),
            shared_dir=os.getenv(
                "INTERACTIONS_SHARED_DIR", storage_data.get("shared_dir", ".team")
            ),
            private_dir=os.getenv(
                "INTERACTIONS_PRIVATE_DIR", storage_data.get("private_dir", ".personal")
            ),
        ),
        user=os.getenv("INTERACTIONS_USER", file_data.get("user")),
        log_level=os.getenv("INTERACTIONS_LOG_LEVEL", file_data.get("log_level", "INFO")),
    )
