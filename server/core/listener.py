from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Optional

from shared.protocol.events import SIGNAL_FOR_EVENT, BinaryEvent

from .receiver import Receiver

logger = logging.getLogger(__name__)


class SignalListener:
    """
    Captures the two carrier signals and feeds them to the receiver.

    The signal callback only enqueues the raw event. Assembly happens in a single
    drain task, so the receiver state is never touched re-entrantly.
    """

    def __init__(self, receiver: Receiver) -> None:
        self.receiver = receiver
        self.events_received = 0
        self._queue: Optional[asyncio.Queue[BinaryEvent]] = None
        self._task: Optional[asyncio.Task] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    @property
    def running(self) -> bool:
        return self._task is not None

    def start(self) -> None:
        if self._task is not None:
            return
        self._loop = asyncio.get_running_loop()
        self._queue = asyncio.Queue()
        for event, signum in SIGNAL_FOR_EVENT.items():
            self._loop.add_signal_handler(signum, self.capture, event)
        self._task = asyncio.create_task(self._run(), name="signal-drain")
        logger.debug("Listening for signals %s", sorted(SIGNAL_FOR_EVENT.values()))

    async def stop(self) -> None:
        if self._loop is not None:
            for signum in SIGNAL_FOR_EVENT.values():
                self._loop.remove_signal_handler(signum)
            self._loop = None
        if self._task:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None

    def capture(self, event: BinaryEvent) -> None:
        """Signal-time callback: record the event and return."""
        assert self._queue is not None
        self._queue.put_nowait(event)

    async def drain(self) -> None:
        """Wait until every captured event has been applied."""
        if self._queue is not None:
            await self._queue.join()

    async def _run(self) -> None:
        assert self._queue is not None
        while True:
            event = await self._queue.get()
            try:
                self.receiver.on_event(event)
                self.events_received += 1
            except asyncio.CancelledError:
                raise
            except Exception as exc:
                logger.exception("Receiver failed on %s: %s", event.name, exc)
            finally:
                self._queue.task_done()


__all__ = ["SignalListener"]
