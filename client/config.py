from __future__ import annotations

import logging
import os
from typing import Any, Dict

from shared.protocol.errors import ConfigError
from shared.protocol.validator import validate_config
from shared.settings import load_settings

DEFAULT_CONFIG: Dict[str, Any] = {
    "bit_delay_us": 100,
    "stop_on_delivery_error": True,
    "log_level": "WARNING",
}

CLIENT_CONFIG: Dict[str, Any] = DEFAULT_CONFIG.copy()


def load_config(env_path: str = ".env") -> Dict[str, Any]:
    """Load client configuration from env file/environment variables."""
    settings = load_settings(env_path)
    defaults = dict(DEFAULT_CONFIG, bit_delay_us=settings.bit_delay_us)

    for key, default_value in defaults.items():
        env_key = f"CLIENT_{key.upper()}"
        value = os.getenv(env_key, default_value)
        CLIENT_CONFIG[key] = _coerce_type(value, type(default_value))
    CLIENT_CONFIG["log_level"] = str(CLIENT_CONFIG["log_level"]).upper()

    validate_config(CLIENT_CONFIG, "client")
    logging.getLogger().setLevel(CLIENT_CONFIG["log_level"])
    return CLIENT_CONFIG


def _coerce_type(value: Any, target_type: type) -> Any:
    if isinstance(value, target_type):
        return value
    try:
        if target_type is bool:
            return str(value).lower() in ("1", "true", "yes", "on")
        return target_type(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Cannot convert {value} to {target_type.__name__}") from exc


__all__ = ["CLIENT_CONFIG", "DEFAULT_CONFIG", "load_config"]
