from __future__ import annotations

import io

import pytest

import shared.settings as settings_module
from client import config as client_config
from server import config as server_config
from server.core import Receiver, ReceiverState, StreamSink


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Config loaders mutate module level state; start every test from defaults."""
    monkeypatch.setattr(settings_module, "SETTINGS", settings_module.Settings())
    client_config.CLIENT_CONFIG.clear()
    client_config.CLIENT_CONFIG.update(client_config.DEFAULT_CONFIG)
    server_config.SERVER_CONFIG.clear()
    server_config.SERVER_CONFIG.update(server_config.DEFAULT_SERVER_CONFIG)
    for key in (
        "SIGTALK_BIT_DELAY_US",
        "SIGTALK_BUFFER_CAPACITY",
        "SIGTALK_LOG_LEVEL",
        "CLIENT_BIT_DELAY_US",
        "CLIENT_STOP_ON_DELIVERY_ERROR",
        "CLIENT_LOG_LEVEL",
        "SERVER_BUFFER_CAPACITY",
        "SERVER_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def output():
    return io.BytesIO()


@pytest.fixture
def make_receiver(output):
    def _make(capacity=4096, on_message=None):
        return Receiver(ReceiverState.create(capacity), StreamSink(output), on_message=on_message)

    return _make
