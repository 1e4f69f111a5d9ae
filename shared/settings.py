from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from pathlib import Path

from dotenv import load_dotenv

from shared.protocol.constants import DEFAULT_BIT_DELAY_US, DEFAULT_BUFFER_CAPACITY
from shared.protocol.errors import ConfigError
from shared.protocol.validator import validate_config


@dataclass
class Settings:
    """Shared baseline settings (both client/server build on top)."""

    bit_delay_us: int = DEFAULT_BIT_DELAY_US
    buffer_capacity: int = DEFAULT_BUFFER_CAPACITY
    log_level: str = "INFO"

    def as_dict(self) -> dict:
        return asdict(self)


SETTINGS = Settings()


def _int_env(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{key} must be an integer, got {raw!r}") from exc


def load_settings(env_path: str = ".env") -> Settings:
    """Load shared settings from env/.env."""
    if Path(env_path).exists():
        load_dotenv(env_path)
    SETTINGS.bit_delay_us = _int_env("SIGTALK_BIT_DELAY_US", SETTINGS.bit_delay_us)
    SETTINGS.buffer_capacity = _int_env("SIGTALK_BUFFER_CAPACITY", SETTINGS.buffer_capacity)
    SETTINGS.log_level = os.getenv("SIGTALK_LOG_LEVEL", SETTINGS.log_level).upper()
    validate_config(SETTINGS.as_dict(), "settings")
    return SETTINGS


__all__ = ["Settings", "SETTINGS", "load_settings"]
