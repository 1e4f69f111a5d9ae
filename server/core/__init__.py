from .listener import SignalListener
from .receiver import Receiver, StreamSink
from .server import SignalServer
from .state import ByteAccumulator, MessageBuffer, ReceiverState

__all__ = [
    "ByteAccumulator",
    "MessageBuffer",
    "ReceiverState",
    "Receiver",
    "StreamSink",
    "SignalListener",
    "SignalServer",
]
