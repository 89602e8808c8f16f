from __future__ import annotations
import io
import sys
import threading
from contextlib import suppress
from datetime import datetime
from typing import Any, Optional
from tracelog.core.caller import (
    CallSite, UNKNOWN_FILE, UNKNOWN_LINE, capture_caller, resolve_function_name,
)
from tracelog.core.errors import SinkWriteError
from tracelog.core.flags import LogFlag
from tracelog.core.header import format_header
from tracelog.ui.colors import BLUE, GREEN, RED, RESET, WHITE, YELLOW

_FILE_FLAGS = LogFlag.SHORT_FILE | LogFlag.LONG_FILE

class _Discard:
    """Sink that accepts and drops every write."""

    def write(self, data):
        return len(data)

    def __repr__(self):
        return "DISCARD"

DISCARD = _Discard()

def _sprint(values) -> str:
    return " ".join(str(v) for v in values)

class Logger:
    """Colorized console logger.

    Every call produces exactly one write to the sink; the accumulation
    buffer and the sink are only touched while the lock is held.
    """

    def __init__(self, out: Any, prefix: str = "", flags: LogFlag = LogFlag.STD):
        self._lock = threading.Lock()
        self._out = out
        self._prefix = prefix
        self._flags = LogFlag(flags)
        self._buf = bytearray()
        self._is_discard = out is DISCARD

    def __repr__(self):
        return f"Logger(out={self._out!r}, prefix={self._prefix!r}, flags={self._flags!r})"

    @property
    def is_discard(self) -> bool:
        return self._is_discard

    def set_output(self, out: Any) -> None:
        with self._lock:
            self._out = out
            self._is_discard = out is DISCARD

    def writer(self) -> Any:
        with self._lock:
            return self._out

    def set_flags(self, flags: LogFlag) -> None:
        with self._lock:
            self._flags = LogFlag(flags)

    def flags(self) -> LogFlag:
        with self._lock:
            return self._flags

    def set_prefix(self, prefix: str) -> None:
        with self._lock:
            self._prefix = prefix

    def prefix(self) -> str:
        with self._lock:
            return self._prefix

    def output(self, color: str, message: str, *, site: Optional[CallSite] = None,
               call_depth: int = 2) -> None:
        """Write one colored line: color, "TIME: ", header, message, newline, reset.

        call_depth counts frames above output (1 is the caller of output) and
        is only used when no site is given and a file flag is set.
        Raises SinkWriteError if the sink rejects the write.
        """
        now = datetime.now().astimezone()  # get this early
        if site is None and self._flags & _FILE_FLAGS:
            # stack walk happens outside the lock, it only reads this thread's frames
            site = capture_caller(call_depth)
        file, line = (site.file, site.line) if site is not None else (UNKNOWN_FILE, UNKNOWN_LINE)
        with self._lock:
            buf = self._buf
            buf.clear()
            buf += color.encode(errors="backslashreplace")
            buf += b"TIME: "
            format_header(buf, now, file, line, self._flags, self._prefix)
            buf += message.encode(errors="backslashreplace")
            if not message.endswith("\n"):
                buf += b"\n"
            buf += RESET.encode()
            out = self._out
            try:
                if isinstance(out, io.TextIOBase):
                    out.write(buf.decode(errors="replace"))
                else:
                    out.write(bytes(buf))
            except (OSError, ValueError) as e:
                raise SinkWriteError(out, str(e)) from e

    def println(self, *values: Any, stacklevel: int = 1) -> None:
        self._log("PRINTLN", WHITE, _sprint(values), stacklevel)

    def info(self, *values: Any, stacklevel: int = 1) -> None:
        self._log("INFO", BLUE, _sprint(values), stacklevel)

    def warning(self, *values: Any, stacklevel: int = 1) -> None:
        self._log("WARNING", YELLOW, _sprint(values), stacklevel)

    def error(self, message: str, cause: Optional[BaseException] = None, *, stacklevel: int = 1) -> None:
        color = RED if cause is not None else GREEN
        text = "NO ERROR" if cause is None else str(cause)
        self._log("MESSAGE", color, f"{message}\nERROR: {text}", stacklevel)

    def _log(self, label: str, color: str, text: str, stacklevel: int) -> None:
        if self._is_discard:
            return
        # skip _log and the level method
        site = capture_caller(stacklevel + 1)
        body = (
            f"\nPATH: {site.file}"
            f"\nFUNCTION: {resolve_function_name(site.frame_id)}"
            f"\nLOG LINE: {site.line}"
            f"\n{label}: {text}"
        )
        # level functions never raise into the caller
        with suppress(SinkWriteError):
            self.output(color, body, site=site)

def new(out: Any, prefix: str = "", flags: LogFlag = LogFlag.STD) -> Logger:
    return Logger(out, prefix, flags)

_std = Logger(sys.stderr, "", LogFlag.STD)

def default() -> Logger:
    """The process-wide logger used by the package-level functions."""
    return _std
