"""Configuration for the nodeid gateway.

Reads from config/nodeid.ini if present, environment variables override.
The vSphere provider prefix is not configurable; see nodeid.util.
"""

from __future__ import annotations

import configparser
import logging
import os
from dataclasses import dataclass
from pathlib import Path

_CONFIG_FILE = Path(__file__).resolve().parent.parent.parent / "config" / "nodeid.ini"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class NodeIdConfig:
    """Gateway configuration. Immutable once loaded."""

    api_key: str = ""
    host: str = "127.0.0.1"
    port: int = 8000
    strict_uuids: bool = False
    log_level: str = "INFO"


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"Not a boolean: {value!r}")


def _parse_log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in logging.getLevelNamesMapping():
        raise ValueError(f"Unknown log level: {value!r}")
    return level


_CONVERTERS = {
    "port": int,
    "strict_uuids": _parse_bool,
    "log_level": _parse_log_level,
}


def load_config(config_path: Path | None = None) -> NodeIdConfig:
    """Load config from INI file, then override with environment variables."""
    path = config_path or _CONFIG_FILE
    raw: dict[str, str] = {}

    if path.exists():
        parser = configparser.ConfigParser()
        parser.read(path)
        if parser.has_section("gateway"):
            for key in ("api_key", "host", "port", "strict_uuids", "log_level"):
                val = parser.get("gateway", key, fallback=None)
                if val is not None:
                    raw[key] = val

    env_map = {
        "NODEID_API_KEY": "api_key",
        "NODEID_HOST": "host",
        "NODEID_PORT": "port",
        "NODEID_STRICT_UUIDS": "strict_uuids",
        "NODEID_LOG_LEVEL": "log_level",
    }
    for env_key, config_key in env_map.items():
        val = os.getenv(env_key)
        if val is not None:
            raw[config_key] = val

    kwargs = {
        key: _CONVERTERS.get(key, str)(val) for key, val in raw.items()
    }
    return NodeIdConfig(**kwargs)
