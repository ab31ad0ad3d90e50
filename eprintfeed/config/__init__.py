"""Configuration management for eprintfeed."""

from .loader import DEFAULT_CONFIG_PATH, Config, apply_env_overrides, load_config, save_config
from .models import ATOM_FEED_URL, LEGACY_FEED_URL, ConfigModel, FeedConfig, RefreshConfig, ServerConfig

__all__ = [
    "ATOM_FEED_URL",
    "DEFAULT_CONFIG_PATH",
    "LEGACY_FEED_URL",
    "Config",
    "ConfigModel",
    "FeedConfig",
    "RefreshConfig",
    "ServerConfig",
    "apply_env_overrides",
    "load_config",
    "save_config",
]
