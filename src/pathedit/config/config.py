"""Configuration management for pathedit."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from pathedit.config.paths import default_config_path
from pathedit.platform.logging import logger

DEFAULT_ENV_VAR: Final[str] = "PATH"


class ConfigError(Exception):
    """Raised when the configuration file exists but cannot be used."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid configuration file {path}: {reason}")
        self.path: Path = path


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Environment variable edited when --env is not given
    env_var: str = DEFAULT_ENV_VAR

    # Optional rotating debug log
    log_file: Path | None = _path_field()

    # Include the shadowed-files section in `analyze` by default
    analyze_shadows: bool = False

    _expected_types: ClassVar[dict[str, type]] = {
        "env_var": str,
        "log_file": str,
        "analyze_shadows": bool,
    }

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

        if not self.env_var.strip():
            self.env_var = DEFAULT_ENV_VAR

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields defaults; the file is never created.

        Args:
            config_file: Explicit file to read; defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file cannot be read or holds invalid values.
        """
        target = config_file or default_config_path()
        if not target.exists():
            logger.debug("No configuration file at %s; using defaults", target)
            return cls()

        try:
            with open(target, "rb") as f:
                raw = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(target, str(e)) from e

        values: dict[str, Any] = {}
        for key, value in raw.items():
            expected = cls._expected_types.get(key)
            if expected is None:
                logger.warning("Ignoring unknown configuration key %r in %s", key, target)
                continue
            if not isinstance(value, expected):
                raise ConfigError(
                    target, f"{key} must be of type {expected.__name__}"
                )
            values[key] = value

        logger.debug("Configuration loaded from %s", target)
        return cls(**values)


__all__ = ["Config", "ConfigError", "DEFAULT_ENV_VAR"]
