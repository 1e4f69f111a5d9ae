from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from shared.protocol.constants import BITS_PER_BYTE, DEFAULT_BUFFER_CAPACITY, TERMINATOR
from shared.protocol.events import BinaryEvent


@dataclass
class ByteAccumulator:
    """Partial byte being assembled from incoming events, MSB first."""

    value: int = 0
    bit_count: int = 0

    def push(self, event: BinaryEvent) -> Optional[int]:
        """Fold one event in. Returns the completed byte on the 8th event, else None."""
        self.value = ((self.value << 1) | int(event)) & 0xFF
        self.bit_count += 1
        if self.bit_count < BITS_PER_BYTE:
            return None
        completed = self.value
        self.reset()
        return completed

    def reset(self) -> None:
        self.value = 0
        self.bit_count = 0

    def is_empty(self) -> bool:
        return self.value == 0 and self.bit_count == 0


@dataclass
class MessageBuffer:
    """Fixed size storage for the bytes of the message in progress."""

    capacity: int = DEFAULT_BUFFER_CAPACITY
    index: int = 0
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.capacity < 2:
            raise ValueError("capacity must leave room for at least one byte and the terminator")
        self.data = bytearray(self.capacity)

    def store(self, value: int) -> int:
        """
        Write `value` at the current index and advance. Returns the slot written.
        After a write to the last slot the index equals `capacity` until the caller
        runs `take`, which the receiver does before returning from `on_event`.
        """
        slot = self.index
        self.data[slot] = value
        self.index = slot + 1
        return slot

    def is_last_slot(self, slot: int) -> bool:
        return slot >= self.capacity - 1

    def take(self) -> bytes:
        """
        Terminate over the last written slot, return what precedes it and rewind to 0.
        For a terminator byte this is the whole message; on overflow the last byte is lost.
        """
        last = max(self.index - 1, 0)
        self.data[last] = TERMINATOR
        payload = bytes(self.data[:last])
        self.index = 0
        return payload

    def is_empty(self) -> bool:
        return self.index == 0


@dataclass
class ReceiverState:
    """Everything the receiver mutates; built once at startup and owned by one consumer."""

    accumulator: ByteAccumulator = field(default_factory=ByteAccumulator)
    buffer: MessageBuffer = field(default_factory=MessageBuffer)

    @classmethod
    def create(cls, capacity: int = DEFAULT_BUFFER_CAPACITY) -> "ReceiverState":
        return cls(accumulator=ByteAccumulator(), buffer=MessageBuffer(capacity=capacity))

    def is_idle(self) -> bool:
        return self.accumulator.is_empty() and self.buffer.is_empty()


__all__ = ["ByteAccumulator", "MessageBuffer", "ReceiverState"]
