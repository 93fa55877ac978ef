"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from pathedit.config import Config, ConfigError


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    config_file = tmp_path / "config.toml"

    config = Config.load(config_file)

    assert config == Config()
    assert config.env_var == "PATH"
    assert config.log_file is None
    assert config.analyze_shadows is False
    assert not config_file.exists()


def test_load_reads_values(tmp_path: Path) -> None:
    config_file = tmp_path / "config.toml"
    _ = config_file.write_text(
        'env_var = "MANPATH"\n'
        'log_file = "~/logs/pathedit.log"\n'
        "analyze_shadows = true\n",
        encoding="utf-8",
    )

    config = Config.load(config_file)

    assert config.env_var == "MANPATH"
    assert config.log_file == Path("~/logs/pathedit.log").expanduser()
    assert config.analyze_shadows is True


def test_load_uses_environment_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_file = tmp_path / "custom.toml"
    _ = config_file.write_text('env_var = "LD_LIBRARY_PATH"\n', encoding="utf-8")
    monkeypatch.setenv("PATHEDIT_CONFIG", str(config_file))

    assert Config.load().env_var == "LD_LIBRARY_PATH"


def test_blank_values_fall_back_to_defaults(tmp_path: Path) -> None:
    config_file = tmp_path / "config.toml"
    _ = config_file.write_text('env_var = "  "\nlog_file = ""\n', encoding="utf-8")

    config = Config.load(config_file)

    assert config.env_var == "PATH"
    assert config.log_file is None


def test_unknown_keys_are_ignored(tmp_path: Path) -> None:
    config_file = tmp_path / "config.toml"
    _ = config_file.write_text('colour = "red"\n', encoding="utf-8")

    assert Config.load(config_file) == Config()


def test_invalid_toml_raises(tmp_path: Path) -> None:
    config_file = tmp_path / "config.toml"
    _ = config_file.write_text("env_var = \n", encoding="utf-8")

    with pytest.raises(ConfigError) as excinfo:
        _ = Config.load(config_file)
    assert excinfo.value.path == config_file


def test_wrong_value_type_raises(tmp_path: Path) -> None:
    config_file = tmp_path / "config.toml"
    _ = config_file.write_text('analyze_shadows = "yes"\n', encoding="utf-8")

    with pytest.raises(ConfigError, match="analyze_shadows must be of type bool"):
        _ = Config.load(config_file)
