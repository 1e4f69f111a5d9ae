from __future__ import annotations

import logging
import os
import time
from collections.abc import Callable
from typing import Any, Dict, Iterable, Optional

from client.config import CLIENT_CONFIG
from shared.protocol.errors import DeliveryError, ErrorCode
from shared.protocol.events import BinaryEvent
from shared.protocol.framing import MessageLike, encode_byte, encode_message
from shared.protocol.messages import TransmitRequest
from shared.utils.common import pacing_seconds

logger = logging.getLogger(__name__)

Dispatcher = Callable[[int, BinaryEvent], None]
Sleeper = Callable[[float], None]


def dispatch_event(target: int, kind: BinaryEvent) -> None:
    """Deliver one event to `target` as its carrier signal."""
    try:
        os.kill(target, kind.signum)
    except OSError as exc:
        raise DeliveryError.from_os_error(exc, target) from exc
    except OverflowError as exc:
        raise DeliveryError(ErrorCode.DELIVERY_FAILED, f"Process id {target} is out of range", target=target) from exc


class Transmitter:
    """Serializes messages into paced binary events aimed at one process."""

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        dispatcher: Dispatcher = dispatch_event,
        sleeper: Sleeper = time.sleep,
    ) -> None:
        self.config = config or CLIENT_CONFIG
        self.bit_delay_us: int = int(self.config["bit_delay_us"])
        self.stop_on_delivery_error: bool = bool(self.config["stop_on_delivery_error"])
        self.dispatcher = dispatcher
        self.sleeper = sleeper

    @property
    def delay(self) -> float:
        return pacing_seconds(self.bit_delay_us)

    def send(self, target: int, message: MessageLike) -> int:
        """
        Send `message` plus its terminator to `target`.

        Returns the number of events delivered. Raises DeliveryError if the target
        cannot be signalled; by default the rest of the message is abandoned.
        """
        request = TransmitRequest.from_dict({"target": target, "message": message})
        if request.truncated:
            logger.warning("Message contains a NUL byte, sending the first %s bytes only", len(request.payload))
        sent = self._send_events(request.target, encode_message(request.payload))
        logger.info("Sent %s bytes (%s events) to %s", len(request.frame), sent, request.target)
        return sent

    def send_byte(self, target: int, value: int) -> int:
        """Send a single byte without any terminator."""
        return self._send_events(target, encode_byte(value))

    def _send_events(self, target: int, events: Iterable[BinaryEvent]) -> int:
        sent = 0
        first_error: Optional[DeliveryError] = None
        for event in events:
            try:
                self.dispatcher(target, event)
                sent += 1
            except DeliveryError as exc:
                if self.stop_on_delivery_error:
                    logger.debug("Aborting after %s events: %s", sent, exc)
                    raise
                if first_error is None:
                    first_error = exc
            self.sleeper(self.delay)
        if first_error is not None:
            raise first_error
        return sent


__all__ = ["Dispatcher", "Sleeper", "dispatch_event", "Transmitter"]
