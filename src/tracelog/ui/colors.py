from __future__ import annotations
import re
from types import MappingProxyType
from colorama import Fore, Style

GREEN = Fore.GREEN
RED = Fore.RED
YELLOW = Fore.YELLOW
BLUE = Fore.BLUE
WHITE = Fore.WHITE
RESET = Style.RESET_ALL

PALETTE = MappingProxyType({
    'green': GREEN,
    'red': RED,
    'yellow': YELLOW,
    'blue': BLUE,
    'white': WHITE,
    'reset': RESET,
})

_ANSI_RE = re.compile(r'\x1b\[[0-9;]*m')

def strip_ansi(text: str) -> str:
    return _ANSI_RE.sub('', text)
