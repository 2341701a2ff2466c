import json

import pytest

from webporto.config import Config, ConfigError, load_config


def _write(tmp_path, data):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_defaults_when_file_missing(tmp_path):
    cfg = load_config(tmp_path / "missing.json", environ={})
    assert cfg.server.port == 8080
    assert cfg.server.host == "0.0.0.0"
    assert cfg.database.host == "localhost"
    assert cfg.database.port == 5432
    assert cfg.database.ssl_mode == "disable"
    assert cfg.redis.port == 6379
    assert cfg.redis.db == 0
    assert cfg.app.debug is True
    assert cfg.jwt.secret == ""


def test_file_values_override_defaults(tmp_path):
    path = _write(tmp_path, {
        "server": {"port": 3000, "host": "127.0.0.1"},
        "database": {"user": "user", "name": "blog", "sslmode": "require"},
        "app": {"name": "porto", "debug": False},
        "analytics": {"api_key": "placeholder"},
    })
    cfg = load_config(path, environ={})
    assert cfg.server.port == 3000
    assert cfg.server.host == "127.0.0.1"
    assert cfg.database.user == "user"
    assert cfg.database.name == "blog"
    assert cfg.database.ssl_mode == "require"
    assert cfg.database.port == 5432
    assert cfg.app.name == "porto"
    assert cfg.app.debug is False
    assert cfg.analytics.api_key == "placeholder"


def test_environment_overrides_file(tmp_path):
    path = _write(tmp_path, {"server": {"port": 3000}, "jwt": {"secret": "placeholder"}})
    env = {"SERVER_PORT": "9000", "JWT_SECRET": "secret", "APP_DEBUG": "false", "REDIS_DB": "2"}
    cfg = load_config(path, environ=env)
    assert cfg.server.port == 9000
    assert cfg.jwt.secret == "secret"
    assert cfg.app.debug is False
    assert cfg.redis.db == 2


def test_empty_environment_value_is_ignored(tmp_path):
    path = _write(tmp_path, {"server": {"port": 3000}})
    cfg = load_config(path, environ={"SERVER_PORT": ""})
    assert cfg.server.port == 3000


def test_bad_integer_raises(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.json", environ={"DB_PORT": "abc"})


def test_bad_boolean_raises(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.json", environ={"APP_DEBUG": "maybe"})


def test_invalid_json_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    cfg = load_config(path, environ={})
    assert cfg == load_config(tmp_path / "missing.json", environ={})
    assert isinstance(cfg, Config) and cfg.server.port == 8080