from __future__ import annotations

import errno
import os

import pytest

from client.core import Transmitter, dispatch_event
from shared.protocol import BinaryEvent, DeliveryError, ErrorCode, TransmitRequest, UsageError, event_bits


class Recorder:
    def __init__(self, fail_at=None, error=None):
        self.events = []
        self.sleeps = []
        self.fail_at = fail_at
        self.error = error

    def dispatch(self, target, kind):
        if self.fail_at is not None and len(self.events) >= self.fail_at:
            self.events.append(None)
            raise self.error
        self.events.append((target, kind))

    def sleep(self, seconds):
        self.sleeps.append(seconds)


def _transmitter(recorder, **overrides):
    config = {"bit_delay_us": 100, "stop_on_delivery_error": True, "log_level": "INFO"}
    config.update(overrides)
    return Transmitter(config, dispatcher=recorder.dispatch, sleeper=recorder.sleep)


def test_send_dispatches_bits_msb_first_with_pacing():
    recorder = Recorder()
    sent = _transmitter(recorder).send(1234, "Hi")

    assert sent == 24
    assert {target for target, _ in recorder.events} == {1234}
    assert event_bits(kind for _, kind in recorder.events) == "01001000" "01101001" "00000000"
    assert recorder.sleeps == [0.0001] * 24


def test_empty_message_sends_only_terminator():
    recorder = Recorder()
    assert _transmitter(recorder).send(42, b"") == 8
    assert [kind for _, kind in recorder.events] == [BinaryEvent.ZERO] * 8


def test_embedded_nul_stops_transmission():
    recorder = Recorder()
    assert _transmitter(recorder).send(42, b"a\x00b") == 16


def test_send_byte_has_no_terminator():
    recorder = Recorder()
    assert _transmitter(recorder).send_byte(42, 0x80) == 8
    assert event_bits(kind for _, kind in recorder.events) == "10000000"


def test_delivery_error_aborts_by_default():
    error = DeliveryError(ErrorCode.PROCESS_NOT_FOUND, "gone", target=42)
    recorder = Recorder(fail_at=3, error=error)

    with pytest.raises(DeliveryError) as info:
        _transmitter(recorder).send(42, "abc")

    assert info.value is error
    assert len(recorder.events) == 4
    assert len(recorder.sleeps) == 3


def test_delivery_error_can_keep_going():
    error = DeliveryError(ErrorCode.PERMISSION_DENIED, "nope", target=42)
    recorder = Recorder(fail_at=0, error=error)

    with pytest.raises(DeliveryError):
        _transmitter(recorder, stop_on_delivery_error=False).send(42, "a")

    assert len(recorder.events) == 16
    assert len(recorder.sleeps) == 16


def test_non_positive_pid_is_refused_before_dispatch():
    recorder = Recorder()
    with pytest.raises(UsageError) as info:
        _transmitter(recorder).send(0, "hi")
    assert info.value.code == ErrorCode.INVALID_PID
    assert recorder.events == []


def test_dispatch_event_maps_missing_process(monkeypatch):
    def fake_kill(pid, signum):
        raise ProcessLookupError(errno.ESRCH, "No such process")

    monkeypatch.setattr(os, "kill", fake_kill)
    with pytest.raises(DeliveryError) as info:
        dispatch_event(99999, BinaryEvent.ONE)
    assert info.value.code == ErrorCode.PROCESS_NOT_FOUND
    assert info.value.target == 99999


def test_dispatch_event_maps_permission_error(monkeypatch):
    def fake_kill(pid, signum):
        raise PermissionError(errno.EPERM, "Operation not permitted")

    monkeypatch.setattr(os, "kill", fake_kill)
    with pytest.raises(DeliveryError) as info:
        dispatch_event(1, BinaryEvent.ZERO)
    assert info.value.code == ErrorCode.PERMISSION_DENIED


def test_dispatch_event_uses_carrier_signal(monkeypatch):
    calls = []
    monkeypatch.setattr(os, "kill", lambda pid, signum: calls.append((pid, signum)))
    dispatch_event(7, BinaryEvent.ZERO)
    dispatch_event(7, BinaryEvent.ONE)
    assert calls == [(7, BinaryEvent.ZERO.signum), (7, BinaryEvent.ONE.signum)]


def test_dispatch_event_maps_out_of_range_pid(monkeypatch):
    def fake_kill(pid, signum):
        raise OverflowError("Python int too large to convert to C long")

    monkeypatch.setattr(os, "kill", fake_kill)
    with pytest.raises(DeliveryError) as info:
        dispatch_event(2**70, BinaryEvent.ONE)
    assert info.value.code == ErrorCode.DELIVERY_FAILED


def test_invalid_fields_get_their_own_error_code():
    with pytest.raises(UsageError) as info:
        TransmitRequest.from_dict({"target": 2**31, "message": b"hi"})
    assert info.value.code == ErrorCode.INVALID_PID

    with pytest.raises(UsageError) as info:
        TransmitRequest.from_dict({"target": 42, "message": 12.5})
    assert info.value.code == ErrorCode.INVALID_MESSAGE
