"""ANSI color codes and terminal detection."""

from typing import TextIO

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
GRAY = "\033[90m"


def is_terminal(stream: TextIO) -> bool:
    """True if stream is attached to an interactive terminal."""
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False


def colorize(color: str, text: str, enabled: bool) -> str:
    """Wrap text in color + RESET, or return it untouched when disabled."""
    if not enabled:
        return text
    return f"{color}{text}{RESET}"
