from .transmitter import Transmitter, dispatch_event

__all__ = ["Transmitter", "dispatch_event"]
