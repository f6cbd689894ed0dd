"""ANSI color codes used by the I/O server."""

import re

# ANSI color codes
RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
BLACK = "\033[30m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"
WHITE = "\033[37m"
BRIGHT_RED = "\033[91m"
BRIGHT_GREEN = "\033[92m"
BRIGHT_YELLOW = "\033[93m"
BRIGHT_BLUE = "\033[94m"
BRIGHT_MAGENTA = "\033[95m"
BRIGHT_CYAN = "\033[96m"
BRIGHT_WHITE = "\033[97m"

# Default palette, one color per output type
DEFAULT_COLOR = WHITE
PROMPT_COLOR = MAGENTA
ERROR_COLOR = RED
ALL_OK_COLOR = GREEN
LIST_TITLE_COLOR = YELLOW
CUSTOM_INFORMATION_COLOR = CYAN
INFORMATION_COLOR = BLUE

_ANSI_PATTERN = re.compile(r'\x1b\[[0-9;]*m')


def style(text: str, *codes: str) -> str:
    """Apply style codes to text."""
    return f"{''.join(codes)}{text}{RESET}"


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return _ANSI_PATTERN.sub('', text)
