"""Application settings read from a JSON file with environment overrides."""

from __future__ import annotations

import json
import logging
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

_log = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "config.json"

_ENV_BINDINGS: dict[tuple[str, str], str] = {
    ("server", "port"): "SERVER_PORT",
    ("server", "host"): "SERVER_HOST",
    ("database", "host"): "DB_HOST",
    ("database", "port"): "DB_PORT",
    ("database", "user"): "DB_USER",
    ("database", "password"): "DB_PASSWORD",
    ("database", "name"): "DB_NAME",
    ("database", "sslmode"): "DB_SSLMODE",
    ("redis", "host"): "REDIS_HOST",
    ("redis", "port"): "REDIS_PORT",
    ("redis", "password"): "REDIS_PASSWORD",
    ("redis", "db"): "REDIS_DB",
    ("jwt", "secret"): "JWT_SECRET",
    ("app", "name"): "APP_NAME",
    ("app", "version"): "APP_VERSION",
    ("app", "debug"): "APP_DEBUG",
    ("analytics", "api_key"): "ANALYTICS_API_KEY",
}

_DEFAULTS: dict[tuple[str, str], Any] = {
    ("server", "port"): 8080,
    ("server", "host"): "0.0.0.0",
    ("database", "host"): "localhost",
    ("database", "port"): 5432,
    ("database", "sslmode"): "disable",
    ("redis", "host"): "localhost",
    ("redis", "port"): 6379,
    ("redis", "db"): 0,
    ("app", "debug"): True,
}

_OCTAL_RE = re.compile(r"[+-]?0[0-7_]+")
_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}


class ConfigError(ValueError):
    """Raised when a setting cannot be converted to its expected type."""


@dataclass
class ServerConfig:
    port: int = 0
    host: str = ""


@dataclass
class DatabaseConfig:
    host: str = ""
    port: int = 0
    user: str = ""
    password: str = ""
    name: str = ""
    ssl_mode: str = field(default="", metadata={"key": "sslmode"})


@dataclass
class RedisConfig:
    host: str = ""
    port: int = 0
    password: str = ""
    db: int = 0


@dataclass
class JWTConfig:
    secret: str = ""


@dataclass
class AppConfig:
    name: str = ""
    version: str = ""
    debug: bool = False


@dataclass
class AnalyticsConfig:
    api_key: str = ""


@dataclass
class Config:
    server: ServerConfig = field(default_factory=ServerConfig)
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    redis: RedisConfig = field(default_factory=RedisConfig)
    jwt: JWTConfig = field(default_factory=JWTConfig)
    app: AppConfig = field(default_factory=AppConfig)
    analytics: AnalyticsConfig = field(default_factory=AnalyticsConfig)


_SECTIONS: dict[str, type] = {
    "server": ServerConfig,
    "database": DatabaseConfig,
    "redis": RedisConfig,
    "jwt": JWTConfig,
    "app": AppConfig,
    "analytics": AnalyticsConfig,
}


def _to_int(value: Any, key: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        if value == "":
            return 0
        try:
            if _OCTAL_RE.fullmatch(value):
                return int(value, 8)
            return int(value, 0)
        except ValueError:
            raise ConfigError(f"cannot parse '{key}' as int: {value!r}") from None
    raise ConfigError(f"'{key}' expected an int, got {type(value).__name__}")


def _to_str(value: Any, key: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    raise ConfigError(f"'{key}' expected a string, got {type(value).__name__}")


def _to_bool(value: Any, key: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        if value == "" or value in _FALSE:
            return False
        if value in _TRUE:
            return True
        raise ConfigError(f"cannot parse '{key}' as bool: {value!r}")
    raise ConfigError(f"'{key}' expected a bool, got {type(value).__name__}")


# Field annotations are strings because of the postponed-annotations import.
_CONVERTERS = {"int": _to_int, "str": _to_str, "bool": _to_bool}


def _build_section(cls: type, raw: Mapping[str, Any], section: str) -> Any:
    values = {}
    for f in fields(cls):
        key = f.metadata.get("key", f.name)
        if key in raw:
            type_name = f.type if isinstance(f.type, str) else f.type.__name__
            values[f.name] = _CONVERTERS[type_name](raw[key], f"{section}.{key}")
    return cls(**values)


def _read_file(path: Path) -> dict[str, Any]:
    try:
        with path.open(encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, ValueError) as exc:
        _log.warning("Config file not found, using environment variables: %s", exc)
        return {}
    if not isinstance(data, dict):
        _log.warning("Config file %s does not hold a JSON object; ignoring it", path)
        return {}
    return data


def load_config(path: str | os.PathLike[str] | None = None,
                environ: Mapping[str, str] | None = None) -> Config:
    """Load settings: environment variables override the file, which overrides defaults."""
    if environ is None:
        environ = os.environ
    file_data = _read_file(Path(path) if path is not None else Path(DEFAULT_CONFIG_FILE))

    merged: dict[str, dict[str, Any]] = {}
    for (section, key), value in _DEFAULTS.items():
        merged.setdefault(section, {})[key] = value
    for section, body in file_data.items():
        section = section.lower()
        if not isinstance(body, dict):
            raise ConfigError(f"'{section}' must be a JSON object")
        target = merged.setdefault(section, {})
        for key, value in body.items():
            target[key.lower()] = value
    for (section, key), env_name in _ENV_BINDINGS.items():
        value = environ.get(env_name, "")
        if value != "":
            merged.setdefault(section, {})[key] = value

    return Config(**{
        name: _build_section(cls, merged.get(name, {}), name)
        for name, cls in _SECTIONS.items()
    })