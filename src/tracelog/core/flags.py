from __future__ import annotations
import re
from enum import IntFlag
from typing import Iterable, List, Union
from tracelog.core.errors import FlagError

class LogFlag(IntFlag):
    DATE = 1          # 2009/01/23
    TIME = 2          # 01:23:23
    MICROSECONDS = 4  # 01:23:23.123123, assumes TIME
    LONG_FILE = 8     # /a/b/c/d.py:23
    SHORT_FILE = 16   # d.py:23, overrides LONG_FILE
    UTC = 32
    MSG_PREFIX = 64   # prefix goes right before the message
    STD = DATE | TIME

_SINGLE = (
    LogFlag.DATE, LogFlag.TIME, LogFlag.MICROSECONDS, LogFlag.LONG_FILE,
    LogFlag.SHORT_FILE, LogFlag.UTC, LogFlag.MSG_PREFIX,
)

def parse_flags(names: Union[str, Iterable[str], None]) -> LogFlag:
    """Combine flag names ("date", "short_file", "std"...) into a LogFlag.

    A string is split on commas, pipes and whitespace.
    """
    if names is None:
        return LogFlag(0)
    if isinstance(names, str):
        names = re.split(r"[,|\s]+", names)
    result = LogFlag(0)
    for raw in names:
        name = raw.strip().upper().replace("-", "_")
        if not name:
            continue
        try:
            result |= LogFlag[name]
        except KeyError:
            raise FlagError(f"Unknown log flag '{raw}'") from None
    return result

def flag_names(flags: LogFlag) -> List[str]:
    return [f.name.lower() for f in _SINGLE if flags & f]
