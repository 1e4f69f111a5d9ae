from __future__ import annotations

import time
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationError, field_validator

from .constants import ENCODING, MAX_PID
from .errors import ErrorCode, UsageError
from .framing import frame_message, to_payload


def _default_timestamp() -> float:
    return time.time()


class TransmitRequest(BaseModel):
    """What the client was asked to send, validated before any signal goes out."""

    model_config = ConfigDict(frozen=True)

    target: PositiveInt = Field(..., le=MAX_PID, description="Process id of the receiving server")
    message: bytes = Field(default=b"", description="Raw message bytes, terminator excluded")

    @field_validator("message", mode="before")
    @classmethod
    def _encode_text(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.encode(ENCODING)
        if isinstance(value, (bytearray, memoryview)):
            return bytes(value)
        return value

    @property
    def payload(self) -> bytes:
        """Bytes actually transmitted before the terminator."""
        return to_payload(self.message)

    @property
    def frame(self) -> bytes:
        return frame_message(self.message)

    @property
    def truncated(self) -> bool:
        return len(self.payload) != len(self.message)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TransmitRequest":
        try:
            return cls(**data)
        except ValidationError as exc:
            loc = exc.errors()[0]["loc"] if exc.errors() else ()
            code = ErrorCode.INVALID_PID if loc[:1] == ("target",) else ErrorCode.INVALID_MESSAGE
            raise UsageError(f"Invalid transmit request: {exc}", code=code) from exc


class ReceivedMessage(BaseModel):
    """A line emitted by the receiver."""

    payload: bytes
    forced: bool = Field(default=False, description="True when emitted because the buffer filled up")
    received_at: float = Field(default_factory=_default_timestamp)


__all__ = ["TransmitRequest", "ReceivedMessage"]
