from __future__ import annotations

import asyncio
import logging
import sys
from typing import Optional, TextIO

from shared.utils.common import current_pid

from .listener import SignalListener
from .receiver import Receiver

logger = logging.getLogger(__name__)


class SignalServer:
    """Publishes its pid and accepts events until the process is terminated."""

    def __init__(self, receiver: Receiver, announce: Optional[TextIO] = None) -> None:
        self.receiver = receiver
        self.listener = SignalListener(receiver)
        self.announce = announce
        self.pid = current_pid()

    async def start(self) -> None:
        # Handlers go in before the pid is visible so no early event is lost.
        self.listener.start()
        self.publish_pid()
        logger.info("Server ready, pid %s", self.pid)

    def publish_pid(self) -> None:
        stream = self.announce if self.announce is not None else sys.stdout
        print(self.pid, file=stream, flush=True)

    async def serve_forever(self) -> None:
        await self.start()
        try:
            await asyncio.Event().wait()  # keep running
        finally:
            await self.listener.stop()

    async def stop(self) -> None:
        await self.listener.stop()


__all__ = ["SignalServer"]
