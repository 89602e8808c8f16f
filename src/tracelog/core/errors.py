from __future__ import annotations

class TracelogError(Exception):
    """Base for internal errors."""

class SinkWriteError(TracelogError):
    def __init__(self, sink: object, detail: str):
        super().__init__(f"Write to {sink!r} failed: {detail}")
        self.sink = sink
        self.detail = detail

class FlagError(TracelogError):
    pass

class SettingsError(TracelogError):
    def __init__(self, path: str, detail: str):
        super().__init__(f"Failed loading '{path}': {detail}")
        self.path = path
        self.detail = detail
