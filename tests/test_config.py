from __future__ import annotations

import pytest

from client.config import load_config
from server.config import load_server_config
from shared.protocol import ConfigError, load_schema
from shared.settings import load_settings


def test_defaults(tmp_path):
    env = str(tmp_path / ".env")
    assert load_settings(env).buffer_capacity == 4096
    client = load_config(env)
    assert client["bit_delay_us"] == 100
    assert client["stop_on_delivery_error"] is True
    server = load_server_config(env)
    assert server["buffer_capacity"] == 4096
    assert server["log_level"] == "INFO"


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("CLIENT_BIT_DELAY_US", "250")
    monkeypatch.setenv("CLIENT_STOP_ON_DELIVERY_ERROR", "no")
    monkeypatch.setenv("SERVER_BUFFER_CAPACITY", "16")
    monkeypatch.setenv("SERVER_LOG_LEVEL", "debug")
    env = str(tmp_path / ".env")

    client = load_config(env)
    assert client["bit_delay_us"] == 250
    assert client["stop_on_delivery_error"] is False

    server = load_server_config(env)
    assert server["buffer_capacity"] == 16
    assert server["log_level"] == "DEBUG"


def test_shared_settings_seed_both_sides(monkeypatch, tmp_path):
    monkeypatch.setenv("SIGTALK_BIT_DELAY_US", "500")
    monkeypatch.setenv("SIGTALK_BUFFER_CAPACITY", "64")
    env = str(tmp_path / ".env")
    assert load_config(env)["bit_delay_us"] == 500
    assert load_server_config(env)["buffer_capacity"] == 64


def test_dotenv_file_is_read(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("SERVER_BUFFER_CAPACITY=32\n")
    # load_dotenv writes into os.environ; let monkeypatch undo it
    monkeypatch.setenv("SERVER_BUFFER_CAPACITY", "")
    monkeypatch.delenv("SERVER_BUFFER_CAPACITY")
    assert load_server_config(str(env_file))["buffer_capacity"] == 32


def test_capacity_too_small_is_rejected(monkeypatch, tmp_path):
    monkeypatch.setenv("SERVER_BUFFER_CAPACITY", "1")
    with pytest.raises(ConfigError):
        load_server_config(str(tmp_path / ".env"))


def test_non_numeric_value_is_rejected(monkeypatch, tmp_path):
    monkeypatch.setenv("CLIENT_BIT_DELAY_US", "fast")
    with pytest.raises(ConfigError):
        load_config(str(tmp_path / ".env"))


def test_unknown_log_level_is_rejected(monkeypatch, tmp_path):
    monkeypatch.setenv("SIGTALK_LOG_LEVEL", "chatty")
    with pytest.raises(ConfigError):
        load_settings(str(tmp_path / ".env"))


def test_schemas_ship_with_package():
    for name in ("settings", "client", "server"):
        assert load_schema(name)["type"] == "object"
    assert load_schema("missing") is None
