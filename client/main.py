from __future__ import annotations

import logging
import os
import sys
from typing import List, Optional

from client.config import load_config
from client.core import Transmitter
from shared.protocol.errors import ConfigError, DeliveryError, ErrorCode, UsageError
from shared.protocol.messages import TransmitRequest
from shared.utils.common import parse_integer

logger = logging.getLogger(__name__)

USAGE = "Usage: sigtalk-client <server_pid> <message>"


def parse_args(argv: List[str]) -> TransmitRequest:
    if len(argv) != 2:
        raise UsageError(USAGE)
    raw_pid, text = argv
    try:
        pid = parse_integer(raw_pid)
    except ValueError as exc:
        raise UsageError(f"Invalid server pid: {raw_pid!r}", code=ErrorCode.INVALID_PID) from exc
    # os.fsencode gives back the exact bytes the shell passed in.
    return TransmitRequest.from_dict({"target": pid, "message": os.fsencode(text)})


def run_client(argv: List[str]) -> int:
    try:
        request = parse_args(argv)
    except UsageError as exc:
        if exc.code != ErrorCode.USAGE:
            print(exc.message)
        print(USAGE)
        return 1

    try:
        config = load_config()
    except ConfigError as exc:
        print(exc.message, file=sys.stderr)
        return 1
    logging.basicConfig(level=config["log_level"])

    transmitter = Transmitter(config)
    try:
        transmitter.send(request.target, request.message)
    except DeliveryError as exc:
        logger.error("%s", exc.message)
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    return run_client(sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":
    raise SystemExit(main())
