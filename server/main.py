from __future__ import annotations

import asyncio
import contextlib
import logging

from server.config import SERVER_CONFIG, load_server_config
from server.core import Receiver, ReceiverState, SignalServer, StreamSink
from shared.protocol.errors import ConfigError

logger = logging.getLogger(__name__)


async def run_server() -> None:
    load_server_config()
    logging.basicConfig(level=SERVER_CONFIG["log_level"])

    state = ReceiverState.create(SERVER_CONFIG["buffer_capacity"])
    receiver = Receiver(state, StreamSink())
    server = SignalServer(receiver)
    await server.serve_forever()


def main() -> int:
    try:
        with contextlib.suppress(KeyboardInterrupt):
            asyncio.run(run_server())
    except ConfigError as exc:
        logging.basicConfig()
        logger.error("%s", exc.message)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
