"""Configuration loader."""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from .models import ConfigModel, ServerConfig

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "eprintfeed" / "config.yaml"


class Config:
    """Configuration manager."""

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initialize config manager."""
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH
        self.config_path = config_path
        self._config: Optional[ConfigModel] = None

    @property
    def config(self) -> ConfigModel:
        """Get loaded config, falling back to defaults when no file exists."""
        if self._config is None:
            if self.config_path.exists():
                config = load_config(self.config_path)
            else:
                config = ConfigModel()
            self._config = apply_env_overrides(config)
        return self._config


def apply_env_overrides(config: ConfigModel) -> ConfigModel:
    """Apply environment overrides (currently PORT)."""
    port = os.environ.get("PORT")
    if not port:
        return config
    try:
        server = ServerConfig(**{**config.server.model_dump(), "port": port})
    except ValidationError as e:
        raise ValueError(f"Invalid PORT environment variable {port!r}: {e}")
    return config.model_copy(update={"server": server})


def load_config(config_path: Path) -> ConfigModel:
    """
    Read an eprintfeed YAML config. An empty file means all defaults.

    Raises:
        FileNotFoundError: if there is no file at *config_path*
        ValueError: if the file is not YAML or does not describe a valid config
    """
    if not config_path.exists():
        raise FileNotFoundError(f"No eprintfeed config at {config_path} (run `eprintfeed init`)")

    try:
        sections = yaml.safe_load(config_path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in eprintfeed config {config_path}: {e}") from e

    if not isinstance(sections, dict):
        raise ValueError(
            f"Invalid configuration in {config_path}: expected feed/refresh/server sections, "
            f"got {type(sections).__name__}"
        )
    try:
        return ConfigModel.model_validate(sections)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {config_path}: {e}") from e


def save_config(config: ConfigModel, config_path: Path) -> None:
    """Write *config* as YAML, keeping the feed/refresh/server section order."""
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(yaml.safe_dump(config.model_dump(mode="json"), sort_keys=False))
