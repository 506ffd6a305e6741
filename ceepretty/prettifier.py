"""Per-line transform and the stdin -> stdout loop."""

import logging
from typing import Iterable, TextIO

from ceepretty.config import Config
from ceepretty.formatter import UnknownLevelError, format_level, format_record
from ceepretty.parser import DecodeError, ExtraDecodeError, decode_record, get_extra, strip_marker

logger = logging.getLogger(__name__)


def process_line(line: str, config: Config) -> str | None:
    """Transform one line. Returns None when the line should be skipped.

    Unmarked lines come back unchanged. Decode and level errors are logged
    and the line is dropped; extra-field errors are logged but the line is
    still emitted with an empty extra segment.
    """
    payload = strip_marker(line)
    if payload is None:
        return line

    try:
        record = decode_record(payload)
    except DecodeError as e:
        logger.error("Error while reading log message: %s", e)
        return None

    try:
        level = format_level(record.level, config.color)
    except UnknownLevelError as e:
        logger.error("Error while colorizing log level: %s", e)
        return None

    extra = None
    if config.extra:
        try:
            extra = get_extra(payload)
        except ExtraDecodeError as e:
            logger.error("Error while extracting extra info: %s", e)
            extra = ""

    return format_record(record, color=config.color, extra=extra, level=level)


def _chomp(raw: str) -> str:
    return raw.removesuffix("\n").removesuffix("\r")


def prettify_stream(source: Iterable[str], sink: TextIO, config: Config) -> None:
    """Run every line of source through process_line, writing results to sink."""
    for raw in source:
        out = process_line(_chomp(raw), config)
        if out is None:
            continue
        sink.write(out + "\n")
        sink.flush()
