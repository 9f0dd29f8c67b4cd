from __future__ import annotations

import logging
from pathlib import Path

import pytest

from packages.clearing import FilterConfig, configure_logging, load_config
from packages.clearing.config import CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH, DEFAULT_LOG_FORMAT


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path / "missing.yaml")

    assert config.log_level == "INFO"
    assert config.log_format == DEFAULT_LOG_FORMAT


def test_load_config_parses_values(tmp_path: Path) -> None:
    config_path = tmp_path / "clearing.yaml"
    config_path.write_text("log_level: debug\nlog_format: '%(message)s'\n", encoding="utf-8")

    config = load_config(config_path)

    assert config.log_level == "DEBUG"
    assert config.log_format == "%(message)s"


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    config_path = tmp_path / "clearing.yaml"
    config_path.write_text("- log_level\n- debug\n", encoding="utf-8")

    with pytest.raises(ValueError, match="must be a mapping"):
        load_config(config_path)


def test_load_config_honors_environment_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = tmp_path / "override.yaml"
    config_path.write_text("log_level: warning\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_PATH_ENV, str(config_path))

    assert load_config().log_level == "WARNING"


def test_bundled_config_loads() -> None:
    assert DEFAULT_CONFIG_PATH.exists()
    assert load_config(DEFAULT_CONFIG_PATH) == FilterConfig()


def test_from_mapping_falls_back_on_blank_values() -> None:
    config = FilterConfig.from_mapping({"log_level": "  ", "log_format": None})

    assert config == FilterConfig()


def test_configure_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Invalid log level"):
        configure_logging(FilterConfig(log_level="CHATTY"))


def test_configure_logging_applies_level(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging(FilterConfig(log_level="DEBUG"))

    assert calls == [{"level": logging.DEBUG, "format": DEFAULT_LOG_FORMAT}]
