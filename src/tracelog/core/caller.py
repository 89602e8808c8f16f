from __future__ import annotations
import os
import sys
from types import CodeType
from typing import NamedTuple, Optional, Tuple

UNKNOWN_FILE = "???"
UNKNOWN_LINE = 0

FrameId = Tuple[str, CodeType]

class CallSite(NamedTuple):
    frame_id: Optional[FrameId]
    file: str
    line: int
    ok: bool

UNKNOWN_SITE = CallSite(None, UNKNOWN_FILE, UNKNOWN_LINE, False)

def capture_caller(skip: int = 0) -> CallSite:
    """Locate a frame on the calling thread's stack.

    skip=0 is the function calling capture_caller, skip=1 its caller, and so on.
    A frame that does not exist yields UNKNOWN_SITE instead of raising.
    """
    if skip < 0:
        return UNKNOWN_SITE
    try:
        frame = sys._getframe(skip + 1)
    except ValueError:
        return UNKNOWN_SITE
    code = frame.f_code
    module = frame.f_globals.get("__name__", "")
    return CallSite((module, code), os.path.abspath(code.co_filename), frame.f_lineno, True)

def resolve_function_name(frame_id: Optional[FrameId]) -> str:
    """Fully-qualified name of the function owning a captured frame."""
    if frame_id is None:
        return UNKNOWN_FILE
    module, code = frame_id
    if not module:
        return code.co_qualname
    return f"{module}.{code.co_qualname}"
