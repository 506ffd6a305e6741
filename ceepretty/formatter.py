"""Output formatting — human-readable time, level tags, final line."""

from datetime import datetime

from ceepretty import colors
from ceepretty.errors import PrettifyError
from ceepretty.parser import LogRecord

# English names regardless of process locale
MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# lowercased level -> (tag, color)
LEVELS = {
    "debug": ("DEBU", colors.BLUE),
    "info": ("INFO", colors.GREEN),
    "warn": ("WARN", colors.YELLOW),
    "warning": ("WARN", colors.YELLOW),
    "error": ("ERRO", colors.RED),
}


class UnknownLevelError(PrettifyError):
    """Level value is not one of debug/info/warn/warning/error."""


def format_time(ts: datetime) -> str:
    """Format as e.g. 'January 2, 2024 3:04 PM' in the timestamp's own offset."""
    hour = ts.hour % 12 or 12
    meridiem = "AM" if ts.hour < 12 else "PM"
    return f"{MONTHS[ts.month - 1]} {ts.day}, {ts.year} {hour}:{ts.minute:02d} {meridiem}"


def format_level(level: str, color: bool = False) -> str:
    """Map a level (case-insensitive) to its 4-letter tag, colorized if asked."""
    try:
        tag, tag_color = LEVELS[level.lower()]
    except KeyError:
        raise UnknownLevelError(f"unknown log level: {level}") from None
    return colors.colorize(tag_color, tag, color)


def format_record(
    record: LogRecord,
    color: bool = False,
    extra: str | None = None,
    level: str | None = None,
) -> str:
    """Assemble '<time> <level> <message>[ <extra>]'.

    extra=None means extra-field display is off; an empty string still
    produces the trailing separator. level is an already rendered tag from
    format_level; it is computed here when not given.
    """
    if level is None:
        level = format_level(record.level, color)
    ts = colors.colorize(colors.GRAY, format_time(record.timestamp), color)
    line = f"{ts} {level} {record.message}"
    if extra is not None:
        line = f"{line} {colors.colorize(colors.GRAY, extra, color)}"
    return line
