from __future__ import annotations
from datetime import datetime, timezone
from tracelog.core.flags import LogFlag

def itoa(buf: bytearray, i: int, width: int):
    """Append i as decimal ASCII, zero-padded to width. A negative width disables padding."""
    digits = str(i)
    if width > len(digits):
        digits = digits.rjust(width, "0")
    buf += digits.encode("ascii")

def format_header(buf: bytearray, when: datetime, file: str, line: int,
                  flags: LogFlag, prefix: str = ""):
    """Append the log header to buf.

    Order: prefix (unless MSG_PREFIX), date and/or time, file:line,
    prefix (if MSG_PREFIX).
    """
    if not flags & LogFlag.MSG_PREFIX:
        buf += prefix.encode(errors="backslashreplace")
    if flags & (LogFlag.DATE | LogFlag.TIME | LogFlag.MICROSECONDS):
        if flags & LogFlag.UTC:
            when = when.astimezone(timezone.utc)
        elif when.tzinfo is not None:
            when = when.astimezone()
        if flags & LogFlag.DATE:
            itoa(buf, when.year, 4)
            buf += b"/"
            itoa(buf, when.month, 2)
            buf += b"/"
            itoa(buf, when.day, 2)
            buf += b" "
        if flags & (LogFlag.TIME | LogFlag.MICROSECONDS):
            itoa(buf, when.hour, 2)
            buf += b":"
            itoa(buf, when.minute, 2)
            buf += b":"
            itoa(buf, when.second, 2)
            if flags & LogFlag.MICROSECONDS:
                buf += b"."
                itoa(buf, when.microsecond, 6)
            buf += b" "
    if flags & (LogFlag.SHORT_FILE | LogFlag.LONG_FILE):
        if flags & LogFlag.SHORT_FILE:
            file = _short_file(file)
        buf += file.encode(errors="backslashreplace")
        buf += b":"
        itoa(buf, line, -1)
        buf += b": "
    if flags & LogFlag.MSG_PREFIX:
        buf += prefix.encode(errors="backslashreplace")

def _short_file(file: str) -> str:
    # index 0 is never treated as a separator, so "/x" stays "/x"
    for i in range(len(file) - 1, 0, -1):
        if file[i] in "/\\":
            return file[i + 1:]
    return file
