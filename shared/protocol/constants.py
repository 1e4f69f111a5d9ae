"""Protocol-wide constants shared by client and server."""

import signal

BITS_PER_BYTE = 8
TERMINATOR = 0
DEFAULT_BIT_DELAY_US = 100  # microseconds between two dispatched events
DEFAULT_BUFFER_CAPACITY = 4096  # receiver message buffer, terminator slot included
MAX_PID = 2**31 - 1  # largest value a pid_t can hold
ENCODING = "utf-8"
LINE_BREAK = b"\n"

ZERO_SIGNAL = signal.SIGUSR1
ONE_SIGNAL = signal.SIGUSR2

__all__ = [
    "BITS_PER_BYTE",
    "TERMINATOR",
    "DEFAULT_BIT_DELAY_US",
    "DEFAULT_BUFFER_CAPACITY",
    "MAX_PID",
    "ENCODING",
    "LINE_BREAK",
    "ZERO_SIGNAL",
    "ONE_SIGNAL",
]
