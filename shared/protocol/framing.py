from __future__ import annotations

from typing import Iterable, Iterator, List, Union

from .constants import BITS_PER_BYTE, ENCODING, TERMINATOR
from .events import BinaryEvent

MessageLike = Union[bytes, bytearray, memoryview, str]


def to_payload(message: MessageLike) -> bytes:
    """Normalize a message into the bytes that go on the wire, terminator excluded."""
    data = message.encode(ENCODING) if isinstance(message, str) else bytes(message)
    # Anything after an embedded NUL would be read as a new message; cut it off.
    cut = data.find(bytes([TERMINATOR]))
    return data if cut < 0 else data[:cut]


def frame_message(message: MessageLike) -> bytes:
    """Payload plus the trailing terminator byte."""
    return to_payload(message) + bytes([TERMINATOR])


def encode_byte(value: int) -> List[BinaryEvent]:
    """Split one byte into its 8 events, most significant bit first."""
    if not (0 <= value <= 255):
        raise ValueError("Byte value must be 0-255")
    return [BinaryEvent.from_bit(value >> shift) for shift in range(BITS_PER_BYTE - 1, -1, -1)]


def encode_message(message: MessageLike) -> Iterator[BinaryEvent]:
    """Yield every event needed to transmit `message`, terminator included."""
    for value in frame_message(message):
        yield from encode_byte(value)


def decode_byte(events: Iterable[BinaryEvent]) -> int:
    """Fold exactly 8 events back into a byte."""
    value = 0
    count = 0
    for event in events:
        value = ((value << 1) | int(event)) & 0xFF
        count += 1
    if count != BITS_PER_BYTE:
        raise ValueError(f"Expected {BITS_PER_BYTE} events, got {count}")
    return value


def event_bits(events: Iterable[BinaryEvent]) -> str:
    """Render events as a '0'/'1' string, handy in logs and tests."""
    return "".join(str(int(event)) for event in events)


__all__ = [
    "MessageLike",
    "to_payload",
    "frame_message",
    "encode_byte",
    "encode_message",
    "decode_byte",
    "event_bits",
]
