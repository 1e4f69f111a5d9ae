from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema

from .errors import ConfigError

SCHEMA_DIR = Path(__file__).parent / "schemas"

# Mapping config section -> schema filename (relative to SCHEMA_DIR)
SCHEMA_REGISTRY: Dict[str, str] = {
    "settings": "settings.json",
    "client": "client.config.json",
    "server": "server.config.json",
}


def _schema_path(name: str) -> Optional[Path]:
    filename = SCHEMA_REGISTRY.get(name)
    if not filename:
        return None
    path = SCHEMA_DIR / filename
    return path if path.exists() else None


@lru_cache(maxsize=8)
def load_schema(name: str) -> Optional[dict]:
    """Load JSON schema for a config section if present."""
    path = _schema_path(name)
    if not path:
        return None
    with path.open("r", encoding="utf-8") as fp:
        return json.load(fp)


def validate_config(config: Dict[str, Any], name: str, schema: Optional[dict] = None) -> None:
    """Check a loaded config dict against its json-schema."""
    if not schema:
        schema = load_schema(name)
    if not schema:
        raise ConfigError(f"No schema registered for {name!r}")
    try:
        jsonschema.validate(instance=config, schema=schema)
    except jsonschema.ValidationError as exc:
        field = ".".join(str(part) for part in exc.path) or name
        raise ConfigError(f"Invalid {field}: {exc.message}") from exc


__all__ = ["SCHEMA_DIR", "SCHEMA_REGISTRY", "load_schema", "validate_config"]
