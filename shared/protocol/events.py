from __future__ import annotations

from enum import IntEnum

from .constants import ONE_SIGNAL, ZERO_SIGNAL


class BinaryEvent(IntEnum):
    """
    The two event kinds the channel can carry.
    The enum value is the bit the event stands for, so `int(event)` is usable in shifts.
    """

    ZERO = 0
    ONE = 1

    @property
    def signum(self) -> int:
        """POSIX signal used to carry this event."""
        return SIGNAL_FOR_EVENT[self]

    @classmethod
    def from_bit(cls, bit: int) -> "BinaryEvent":
        return cls.ONE if bit & 1 else cls.ZERO

    @classmethod
    def from_signal(cls, signum: int) -> "BinaryEvent":
        """Map an incoming signal number back to its event kind."""
        try:
            return EVENT_FOR_SIGNAL[int(signum)]
        except KeyError:
            raise ValueError(f"Signal {signum} does not carry a binary event") from None


SIGNAL_FOR_EVENT = {
    BinaryEvent.ZERO: int(ZERO_SIGNAL),
    BinaryEvent.ONE: int(ONE_SIGNAL),
}

EVENT_FOR_SIGNAL = {signum: event for event, signum in SIGNAL_FOR_EVENT.items()}


__all__ = ["BinaryEvent", "SIGNAL_FOR_EVENT", "EVENT_FOR_SIGNAL"]
