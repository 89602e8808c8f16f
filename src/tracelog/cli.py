from __future__ import annotations
import argparse
import io
from pathlib import Path
from typing import Any, List, Optional
from colorama import just_fix_windows_console
from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from tracelog.core.errors import TracelogError
from tracelog.core.flags import flag_names, parse_flags
from tracelog.core.logging import Logger
from tracelog.system.settings import SINKS, LoggerSettings
from tracelog.ui.colors import strip_ansi

console = Console(stderr=True)

class PlainSink(io.TextIOBase):
    """Forwards each line to another text stream with the color codes removed."""

    def __init__(self, out: Any):
        super().__init__()
        self.out = out

    def writable(self) -> bool:
        return True

    def write(self, text: str) -> int:
        self.out.write(strip_ansi(text))
        return len(text)

def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tracelog-demo",
                                     description="Emit one line per log level.")
    parser.add_argument("--config", type=Path, help="JSON settings file")
    parser.add_argument("--prefix", help="prefix written on every line")
    parser.add_argument("--flags", help="header flags, e.g. 'date,time,short_file'")
    parser.add_argument("--sink", choices=sorted(SINKS))
    parser.add_argument("--plain", action="store_true", help="strip color codes from the log lines")
    parser.add_argument("--quiet", action="store_true", help="skip the banner")
    return parser.parse_args(argv)

def build_settings(args: argparse.Namespace) -> LoggerSettings:
    settings = LoggerSettings.load(args.config) if args.config else LoggerSettings()
    if args.prefix is not None:
        settings.prefix = args.prefix
    if args.flags is not None:
        settings.flags = flag_names(parse_flags(args.flags))
    if args.sink is not None:
        settings.sink = args.sink
    settings.normalize()
    return settings

def demo(log: Logger) -> None:
    log.println("Hello everyone")
    log.error("failed right here", ValueError("something broke"))
    log.error("color check")
    log.info("I have something great to show you")
    log.warning("don't forget to look at this spot")

def run(argv: Optional[List[str]] = None) -> int:
    just_fix_windows_console()
    args = _parse_args(argv)
    try:
        settings = build_settings(args)
    except TracelogError as e:
        console.print(f"[bold red]Configuration error:[/] {e}")
        return 2
    if not args.quiet:
        title = Text("tracelog demo", justify="center", style="bold bright_yellow")
        console.print(Panel(title, subtitle=f"flags: {', '.join(settings.flags) or '(none)'}",
                            border_style="bright_white"))
    log = settings.build_logger()
    if args.plain and not log.is_discard:
        log.set_output(PlainSink(log.writer()))
    demo(log)
    return 0

if __name__ == "__main__":
    raise SystemExit(run())
