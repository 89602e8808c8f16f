from __future__ import annotations
import json, sys
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Any, List
from tracelog.core.errors import FlagError, SettingsError
from tracelog.core.flags import LogFlag, flag_names, parse_flags
from tracelog.core.logging import DISCARD, Logger

SINKS = {"stderr", "stdout", "discard"}

@dataclass
class LoggerSettings:
    prefix: str = ""
    flags: List[str] = field(default_factory=lambda: ["std"])
    sink: str = "stderr"          # stderr, stdout, discard

    def normalize(self):
        if not isinstance(self.prefix, str):
            self.prefix = ""
        if not isinstance(self.sink, str) or self.sink not in SINKS:
            self.sink = "stderr"
        try:
            self.flags = flag_names(parse_flags(self.flags))
        except (FlagError, AttributeError, TypeError):
            self.flags = ["std"]

    @property
    def log_flags(self) -> LogFlag:
        return parse_flags(self.flags)

    def open_sink(self) -> Any:
        if self.sink == "discard":
            return DISCARD
        if self.sink == "stdout":
            return sys.stdout
        return sys.stderr

    def build_logger(self) -> Logger:
        return Logger(self.open_sink(), self.prefix, self.log_flags)

    @classmethod
    def from_logger(cls, logger: Logger) -> "LoggerSettings":
        out = logger.writer()
        sink = "discard" if out is DISCARD else "stdout" if out is sys.stdout else "stderr"
        return cls(prefix=logger.prefix(), flags=flag_names(logger.flags()), sink=sink)

    @classmethod
    def load(cls, path: Path) -> "LoggerSettings":
        path = Path(path)
        if not path.exists():
            return cls()
        try:
            raw = json.loads(path.read_text())
            data = cls(**raw)
        except (OSError, ValueError, TypeError) as e:
            raise SettingsError(str(path), str(e)) from e
        data.normalize()
        return data

    def save(self, path: Path):
        Path(path).write_text(json.dumps(asdict(self), indent=2))
