from __future__ import annotations

import errno
from enum import IntEnum
from typing import Optional


class ErrorCode(IntEnum):
    """Failure codes surfaced by the transmitter and the CLI glue."""

    USAGE = 1001
    INVALID_PID = 1002
    PROCESS_NOT_FOUND = 1003
    PERMISSION_DENIED = 1004
    DELIVERY_FAILED = 1005
    INVALID_CONFIG = 1006
    INVALID_MESSAGE = 1007


class ProtocolError(Exception):
    """Structured exception carrying an error code and a message."""

    def __init__(self, code: ErrorCode, message: str = "") -> None:
        self.code = code
        self.message = message
        super().__init__(f"{code.name} ({int(code)}): {message}")


class UsageError(ProtocolError):
    """Malformed command line invocation; nothing was dispatched."""

    def __init__(self, message: str = "", code: ErrorCode = ErrorCode.USAGE) -> None:
        super().__init__(code, message)


class ConfigError(ProtocolError):
    """Raised when configuration values are invalid."""

    def __init__(self, message: str = "") -> None:
        super().__init__(ErrorCode.INVALID_CONFIG, message)


class DeliveryError(ProtocolError):
    """An event could not be delivered to the target process."""

    def __init__(self, code: ErrorCode, message: str = "", target: Optional[int] = None) -> None:
        self.target = target
        super().__init__(code, message)

    @classmethod
    def from_os_error(cls, exc: OSError, target: int) -> "DeliveryError":
        if isinstance(exc, ProcessLookupError) or exc.errno == errno.ESRCH:
            code = ErrorCode.PROCESS_NOT_FOUND
        elif isinstance(exc, PermissionError) or exc.errno == errno.EPERM:
            code = ErrorCode.PERMISSION_DENIED
        else:
            code = ErrorCode.DELIVERY_FAILED
        return cls(code, f"Cannot signal process {target}: {exc.strerror or exc}", target=target)


__all__ = ["ErrorCode", "ProtocolError", "UsageError", "ConfigError", "DeliveryError"]
