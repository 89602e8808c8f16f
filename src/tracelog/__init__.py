from tracelog.core.flags import LogFlag, parse_flags
from tracelog.core.errors import TracelogError, SinkWriteError
from tracelog.core.logging import DISCARD, Logger, default, new
from tracelog.levels import error, info, println, set_flags, set_output, set_prefix, warning

__version__ = "0.1.0"

__all__ = [
    "DISCARD", "LogFlag", "Logger", "SinkWriteError", "TracelogError",
    "default", "error", "info", "new", "parse_flags", "println",
    "set_flags", "set_output", "set_prefix", "warning",
]
