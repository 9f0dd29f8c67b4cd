"""Configuration helpers for the clearing decision filter."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).with_name("config.yaml")
CONFIG_PATH_ENV = "CLEARING_FILTER_CONFIG"
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


@dataclass
class FilterConfig:
    """Top-level configuration for the clearing decision filter."""

    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "FilterConfig":
        log_level_value = data.get("log_level", cls.log_level)
        log_level = str(log_level_value or "").strip() or cls.log_level
        log_format_value = data.get("log_format")
        if log_format_value in (None, "", "null", "None"):
            log_format = cls.log_format
        else:
            log_format = str(log_format_value)
        return cls(log_level=log_level.upper(), log_format=log_format)


def resolve_config_path(path: Path | None = None) -> Path:
    """Resolve the configuration path, honoring overrides and environment variables."""

    if path is not None:
        return Path(path)
    override = os.getenv(CONFIG_PATH_ENV)
    return Path(override) if override else DEFAULT_CONFIG_PATH


def load_config(path: Path | None = None) -> FilterConfig:
    """Load filter configuration from YAML."""

    config_path = resolve_config_path(path)
    if not config_path.exists():
        return FilterConfig()
    text = config_path.read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Clearing filter configuration must be a mapping")
    return FilterConfig.from_mapping(data)


def configure_logging(config: FilterConfig | None = None) -> None:
    """Apply the configured log level and format to the root logger."""

    config = config or load_config()
    level = logging.getLevelName(config.log_level)
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {config.log_level!r}")
    logging.basicConfig(level=level, format=config.log_format)


__all__ = [
    "CONFIG_PATH_ENV",
    "DEFAULT_CONFIG_PATH",
    "FilterConfig",
    "configure_logging",
    "load_config",
    "resolve_config_path",
]
