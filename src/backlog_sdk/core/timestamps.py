from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, PlainSerializer

_NUMERIC_RE = re.compile(r"^-?\d+(\.\d+)?$")
# 3.10 fromisoformat takes exactly 3 or 6 fraction digits
_FRACTION_RE = re.compile(r"\.(\d+)")
RFC3339_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class TimestampParseError(ValueError):
    """Raised when a value cannot be read as an RFC 3339 timestamp."""


def _six_digit_fraction(match: re.Match) -> str:
    return "." + (match.group(1) + "000000")[:6]


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Read a Backlog timestamp.

    Rules:
    - None or "" -> None (absent)
    - int/float or numeric string -> seconds since the epoch, UTC
    - RFC 3339 string ("2006-01-02T15:04:05Z", offsets allowed)
    - any number of fraction digits; beyond microseconds they are dropped
    - datetime passes through
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool):
        raise TimestampParseError(f"Invalid timestamp: {value!r}")
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    if not isinstance(value, str):
        raise TimestampParseError(f"Invalid timestamp type: {type(value).__name__}")

    text = value.strip()
    if not text:
        return None
    if _NUMERIC_RE.match(text):
        return datetime.fromtimestamp(float(text), tz=timezone.utc)

    # fromisoformat only accepts "Z" from 3.11 on
    normalized = text[:-1] + "+00:00" if text[-1] in "zZ" else text
    if "T" not in normalized and "t" not in normalized:
        raise TimestampParseError(f"Invalid timestamp: {value!r}")
    normalized = _FRACTION_RE.sub(_six_digit_fraction, normalized, count=1)
    try:
        parsed = datetime.fromisoformat(normalized.replace("t", "T"))
    except ValueError as exc:
        raise TimestampParseError(f"Invalid timestamp: {value!r}") from exc
    if parsed.tzinfo is None:
        raise TimestampParseError(f"Timestamp lacks a UTC offset: {value!r}")
    return parsed


def format_timestamp(value: datetime) -> str:
    """Emit RFC 3339 UTC with a trailing Z. Naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime(RFC3339_FORMAT)


def _serialize(value: Optional[datetime]) -> Optional[str]:
    return format_timestamp(value) if value is not None else None


Timestamp = Annotated[
    Optional[datetime],
    BeforeValidator(parse_timestamp),
    PlainSerializer(_serialize, when_used="json"),
]


__all__ = [
    "Timestamp",
    "TimestampParseError",
    "parse_timestamp",
    "format_timestamp",
    "RFC3339_FORMAT",
]
