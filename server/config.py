from __future__ import annotations

import os
from typing import Any, Dict

from shared.protocol.constants import DEFAULT_BUFFER_CAPACITY
from shared.protocol.errors import ConfigError
from shared.protocol.validator import validate_config
from shared.settings import load_settings

DEFAULT_SERVER_CONFIG: Dict[str, Any] = {
    "buffer_capacity": DEFAULT_BUFFER_CAPACITY,
    "log_level": "INFO",
}

SERVER_CONFIG = DEFAULT_SERVER_CONFIG.copy()


def _int_env(key: str, default: int) -> int:
    raw = os.getenv(key, default)
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{key} must be an integer, got {raw!r}") from exc


def load_server_config(env_path: str = ".env") -> Dict[str, Any]:
    settings = load_settings(env_path)
    SERVER_CONFIG["buffer_capacity"] = _int_env("SERVER_BUFFER_CAPACITY", settings.buffer_capacity)
    SERVER_CONFIG["log_level"] = os.getenv("SERVER_LOG_LEVEL", settings.log_level).upper()
    validate_config(SERVER_CONFIG, "server")
    return SERVER_CONFIG


__all__ = ["DEFAULT_SERVER_CONFIG", "SERVER_CONFIG", "load_server_config"]
