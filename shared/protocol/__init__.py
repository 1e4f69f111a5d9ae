"""
Shared protocol package: event kinds, bit framing, error types, models and
config validation used by both the transmitting client and the receiving server.
"""

from .constants import (
    BITS_PER_BYTE,
    DEFAULT_BIT_DELAY_US,
    DEFAULT_BUFFER_CAPACITY,
    ENCODING,
    LINE_BREAK,
    TERMINATOR,
)
from .errors import ConfigError, DeliveryError, ErrorCode, ProtocolError, UsageError
from .events import BinaryEvent
from .framing import decode_byte, encode_byte, encode_message, event_bits, frame_message, to_payload
from .messages import ReceivedMessage, TransmitRequest
from .validator import load_schema, validate_config

__all__ = [
    "BITS_PER_BYTE",
    "DEFAULT_BIT_DELAY_US",
    "DEFAULT_BUFFER_CAPACITY",
    "ENCODING",
    "LINE_BREAK",
    "TERMINATOR",
    "BinaryEvent",
    "ErrorCode",
    "ProtocolError",
    "UsageError",
    "ConfigError",
    "DeliveryError",
    "to_payload",
    "frame_message",
    "encode_byte",
    "encode_message",
    "decode_byte",
    "event_bits",
    "TransmitRequest",
    "ReceivedMessage",
    "load_schema",
    "validate_config",
]
