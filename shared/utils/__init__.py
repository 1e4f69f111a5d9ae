from .common import current_pid, pacing_seconds, parse_integer

__all__ = ["parse_integer", "current_pid", "pacing_seconds"]
