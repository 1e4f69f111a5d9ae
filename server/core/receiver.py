from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import BinaryIO, Optional

from shared.protocol.constants import LINE_BREAK, TERMINATOR
from shared.protocol.events import BinaryEvent
from shared.protocol.messages import ReceivedMessage

from .state import ReceiverState

logger = logging.getLogger(__name__)

MessageCallback = Callable[[ReceivedMessage], None]


class StreamSink:
    """Writes emitted messages to a binary stream (stdout by default)."""

    def __init__(self, stream: Optional[BinaryIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> BinaryIO:
        return self._stream if self._stream is not None else sys.stdout.buffer

    def write_text(self, data: bytes) -> None:
        self.stream.write(data)

    def write_line_break(self) -> None:
        self.stream.write(LINE_BREAK)
        self.stream.flush()


class Receiver:
    """
    Turns binary events back into bytes and bytes into lines.

    `on_event` is the only entry point and must be called by a single consumer;
    the signal listener guarantees that by draining a queue from one task.
    """

    def __init__(
        self,
        state: Optional[ReceiverState] = None,
        sink: Optional[StreamSink] = None,
        on_message: Optional[MessageCallback] = None,
    ) -> None:
        self.state = state or ReceiverState.create()
        self.sink = sink or StreamSink()
        self.on_message = on_message

    def on_event(self, kind: BinaryEvent) -> None:
        value = self.state.accumulator.push(kind)
        if value is None:
            return
        buffer = self.state.buffer
        slot = buffer.store(value)
        if value == TERMINATOR:
            self._flush(forced=False)
        elif buffer.is_last_slot(slot):
            logger.debug("Buffer full at %s bytes, forcing flush", buffer.capacity)
            self._flush(forced=True)

    def _flush(self, forced: bool) -> None:
        payload = self.state.buffer.take()
        self.sink.write_text(payload)
        self.sink.write_line_break()
        logger.debug("Emitted %s byte message (forced=%s)", len(payload), forced)
        if self.on_message:
            try:
                self.on_message(ReceivedMessage(payload=payload, forced=forced))
            except Exception as exc:
                logger.error("Message callback failed: %s", exc)


__all__ = ["StreamSink", "Receiver", "MessageCallback"]
