"""Tests for ceepretty/formatter.py"""

from datetime import datetime, timedelta, timezone

import pytest

from ceepretty import colors
from ceepretty.formatter import (
    LEVELS,
    UnknownLevelError,
    format_level,
    format_record,
    format_time,
)
from ceepretty.parser import LogRecord

UTC = timezone.utc


def _record(level="info", message="hello", ts=None) -> LogRecord:
    return LogRecord(
        level=level,
        message=message,
        timestamp=ts or datetime(2024, 1, 2, 15, 4, 5, tzinfo=UTC),
    )


class TestFormatTime:
    def test_afternoon(self):
        assert format_time(datetime(2024, 1, 2, 15, 4, 5, tzinfo=UTC)) == "January 2, 2024 3:04 PM"

    def test_midnight_is_12_am(self):
        assert format_time(datetime(2024, 3, 9, 0, 15, tzinfo=UTC)) == "March 9, 2024 12:15 AM"

    def test_noon_is_12_pm(self):
        assert format_time(datetime(2024, 12, 31, 12, 0, tzinfo=UTC)) == "December 31, 2024 12:00 PM"

    def test_morning(self):
        assert format_time(datetime(2024, 7, 14, 9, 5, tzinfo=UTC)) == "July 14, 2024 9:05 AM"

    def test_no_timezone_conversion(self):
        ts = datetime(2024, 1, 2, 9, 30, tzinfo=timezone(timedelta(hours=-5)))
        assert format_time(ts) == "January 2, 2024 9:30 AM"


class TestFormatLevel:
    @pytest.mark.parametrize("level,tag", [
        ("debug", "DEBU"),
        ("info", "INFO"),
        ("warn", "WARN"),
        ("warning", "WARN"),
        ("error", "ERRO"),
        ("DEBUG", "DEBU"),
        ("Info", "INFO"),
        ("WaRnInG", "WARN"),
        ("ERROR", "ERRO"),
    ])
    def test_tags(self, level, tag):
        assert format_level(level) == tag

    def test_all_tags_are_four_chars(self):
        assert all(len(tag) == 4 for tag, _ in LEVELS.values())

    @pytest.mark.parametrize("level,color", [
        ("debug", colors.BLUE),
        ("info", colors.GREEN),
        ("warn", colors.YELLOW),
        ("error", colors.RED),
    ])
    def test_colors(self, level, color):
        result = format_level(level, color=True)
        assert result.startswith(color)
        assert result.endswith(colors.RESET)

    @pytest.mark.parametrize("level", ["fatal", "trace", "", "inf", " info"])
    def test_unknown(self, level):
        with pytest.raises(UnknownLevelError, match="unknown log level"):
            format_level(level)


class TestFormatRecord:
    def test_plain(self):
        assert format_record(_record()) == "January 2, 2024 3:04 PM INFO hello"

    def test_with_extra(self):
        line = format_record(_record(level="warn", message="x"), extra='{"count": 3}')
        assert line == 'January 2, 2024 3:04 PM WARN x {"count": 3}'

    def test_empty_extra_keeps_separator(self):
        assert format_record(_record(), extra="") == "January 2, 2024 3:04 PM INFO hello "

    def test_colored_segments(self):
        line = format_record(_record(), color=True, extra="{}")
        assert line == (
            f"{colors.GRAY}January 2, 2024 3:04 PM{colors.RESET} "
            f"{colors.GREEN}INFO{colors.RESET} hello "
            f"{colors.GRAY}{{}}{colors.RESET}"
        )

    def test_message_not_colored(self):
        line = format_record(_record(message="msg"), color=True)
        assert line.endswith(" msg")

    def test_prerendered_level_used_as_is(self):
        line = format_record(_record(level="nope"), level="INFO")
        assert line == "January 2, 2024 3:04 PM INFO hello"

    def test_unknown_level_raises(self):
        with pytest.raises(UnknownLevelError):
            format_record(_record(level="nope"))
