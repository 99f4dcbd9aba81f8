"""Settings loading for logstats runs."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .errors import ConfigError

DEFAULT_CONFIG_PATH = "config.yaml"

LOG_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


class Settings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    log_level: str = "info"
    input_file: str = "small.log"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().lower()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}, expected one of {sorted(LOG_LEVELS)}")
        return level

    @property
    def logging_level(self) -> int:
        return LOG_LEVELS[self.log_level]


def default_config_path() -> Path:
    return Path(os.getenv("LOGSTATS_CONFIG", DEFAULT_CONFIG_PATH))


def load_settings(path: str | Path | None = None, **overrides: Any) -> Settings:
    """Load settings from YAML, falling back to defaults when the file is absent.

    Non-``None`` keyword overrides win over values from the file.
    """
    config_path = Path(path) if path is not None else default_config_path()
    data = _load_yaml(config_path) if config_path.exists() else {}
    data.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings in {config_path}: {exc}") from exc


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fin:
            data = yaml.safe_load(fin) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Error loading config {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must contain a mapping, got {type(data).__name__}")
    return data
