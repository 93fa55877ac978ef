"""Configuration loading and location helpers."""

from .config import DEFAULT_ENV_VAR, Config, ConfigError
from .paths import default_config_dir, default_config_path

__all__ = ["Config", "ConfigError", "DEFAULT_ENV_VAR", "default_config_dir", "default_config_path"]
