"""@cee: line parser — marker detection, typed decode, extra fields."""

import json
import re
from dataclasses import dataclass
from datetime import datetime

from ceepretty.errors import PrettifyError

PREFIX = "@cee:"

EXCLUDED_KEYS = ("msg", "time", "level")

# RFC 3339: offset is mandatory, fraction optional
RFC3339_PATTERN = re.compile(
    r"[0-9]{4}-[0-9]{2}-[0-9]{2}[Tt][0-9]{2}:[0-9]{2}:[0-9]{2}(\.[0-9]+)?([Zz]|[+-][0-9]{2}:[0-9]{2})"
)


class DecodeError(PrettifyError):
    """Payload after the marker is not valid JSON or has the wrong shape."""


class ExtraDecodeError(PrettifyError):
    """Payload could not be re-decoded into a generic field map."""


@dataclass(frozen=True)
class LogRecord:
    level: str
    message: str
    timestamp: datetime


def _reject_constant(name: str):
    raise ValueError(f"invalid JSON constant {name}")


def _loads(payload: str):
    """json.loads restricted to strict JSON (no NaN/Infinity)."""
    return json.loads(payload, parse_constant=_reject_constant)


def strip_marker(line: str) -> str | None:
    """Return the payload after the marker, or None if the line has no marker."""
    if not line.startswith(PREFIX):
        return None
    return line[len(PREFIX):]


def parse_timestamp(value: str) -> datetime:
    """Parse an RFC 3339 date-time, keeping the offset it carries.

    Raises ValueError on anything else.
    """
    match = RFC3339_PATTERN.fullmatch(value)
    if not match:
        raise ValueError(f"timestamp {value!r} is not RFC 3339")
    base = value[:19].upper()
    fraction, offset = match.groups()
    if fraction:
        # datetime holds microseconds only; nanosecond stamps are truncated
        fraction = "." + fraction[1:7].ljust(6, "0")
    else:
        fraction = ""
    offset = "+00:00" if offset in ("Z", "z") else offset
    return datetime.fromisoformat(base + fraction + offset)


def _require_str(data: dict, key: str) -> str:
    if key not in data:
        raise DecodeError(f"missing field {key!r}")
    value = data[key]
    if not isinstance(value, str):
        raise DecodeError(
            f"field {key!r} must be a string, got {type(value).__name__}"
        )
    return value


def decode_record(payload: str) -> LogRecord:
    """Decode a JSON payload into a LogRecord. Raises DecodeError."""
    try:
        data = _loads(payload)
    except (ValueError, RecursionError) as e:
        raise DecodeError(f"invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise DecodeError(f"expected a JSON object, got {type(data).__name__}")

    level = _require_str(data, "level")
    message = _require_str(data, "msg")
    raw_time = _require_str(data, "time")
    try:
        timestamp = parse_timestamp(raw_time)
    except ValueError as e:
        raise DecodeError(f"field 'time': {e}") from e

    return LogRecord(level=level, message=message, timestamp=timestamp)


def extra_fields(payload: str) -> dict:
    """Decode payload into a plain dict minus level/msg/time.

    Raises ExtraDecodeError.
    """
    try:
        data = _loads(payload)
    except (ValueError, RecursionError) as e:
        raise ExtraDecodeError(f"invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ExtraDecodeError(f"expected a JSON object, got {type(data).__name__}")

    for key in EXCLUDED_KEYS:
        data.pop(key, None)
    return data


def dump_extra(fields: dict) -> str:
    """Compact JSON with sorted keys and a space after each separator.

    Raises ExtraDecodeError for values JSON cannot express, e.g. a number
    that overflowed to inf on decode.
    """
    try:
        return json.dumps(
            fields,
            sort_keys=True,
            ensure_ascii=False,
            allow_nan=False,
            separators=(", ", ": "),
        )
    except ValueError as e:
        raise ExtraDecodeError(f"cannot encode extra fields: {e}") from e


def get_extra(payload: str) -> str:
    """Serialized extra fields for payload. Raises ExtraDecodeError."""
    return dump_extra(extra_fields(payload))
