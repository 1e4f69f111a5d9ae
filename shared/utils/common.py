from __future__ import annotations

import os


def parse_integer(text: str) -> int:
    """
    Parse a non-negative decimal integer.
    Surrounding whitespace and a single leading '+' are accepted; anything else raises ValueError.
    """
    digits = text.strip()
    if digits.startswith("+"):
        digits = digits[1:]
    if not digits or not digits.isascii() or not digits.isdigit():
        raise ValueError(f"Not a decimal integer: {text!r}")
    value = 0
    for char in digits:
        value = value * 10 + (ord(char) - ord("0"))
    return value


def current_pid() -> int:
    return os.getpid()


def pacing_seconds(delay_us: int) -> float:
    """Convert a microsecond pacing delay into what time.sleep expects."""
    return max(delay_us, 0) / 1_000_000


__all__ = ["parse_integer", "current_pid", "pacing_seconds"]
