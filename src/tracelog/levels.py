"""Package-level convenience functions bound to the default logger.

Code that can take a Logger explicitly should; these exist for quick
diagnostics and report the location of whoever calls them.
"""
from __future__ import annotations
from typing import Any, Optional
from tracelog.core.flags import LogFlag
from tracelog.core.logging import default

def set_output(out: Any) -> None:
    default().set_output(out)

def set_flags(flags: LogFlag) -> None:
    default().set_flags(flags)

def set_prefix(prefix: str) -> None:
    default().set_prefix(prefix)

def println(*values: Any) -> None:
    default().println(*values, stacklevel=2)

def info(*values: Any) -> None:
    default().info(*values, stacklevel=2)

def warning(*values: Any) -> None:
    default().warning(*values, stacklevel=2)

def error(message: str, cause: Optional[BaseException] = None) -> None:
    default().error(message, cause, stacklevel=2)
