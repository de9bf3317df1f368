"""
Helpers for turning loosely-typed upstream values into column-friendly ones.

The upstream plugin directory is not strict about types: numbers sometimes
arrive as strings, unknown version constraints arrive as ``false``, and empty
objects arrive as ``[]``. None of these helpers raise for a bad value; they
fall back to the caller's default instead.
"""
from __future__ import annotations

import math
from datetime import date, datetime, timezone
from typing import Any

from django.utils.dateparse import parse_date, parse_datetime

# Formats seen in WordPress.org plugin API responses, beyond ISO 8601.
# e.g. "2024-09-12 4:31pm GMT"
LEGACY_DATETIME_FORMATS = (
    "%Y-%m-%d %I:%M%p %Z",
    "%Y-%m-%d %I:%M%p",
    "%Y-%m-%d %H:%M:%S %Z",
)


def truncate(value: str | None, length: int) -> str | None:
    """
    Cut ``value`` down to at most ``length`` characters.

    Python strings index by code point, so a multi-byte character is either
    kept whole or dropped, never split. ``None`` passes through untouched.
    """
    if value is None:
        return None
    return value[:length]


def coerce_str(value: Any, default: str | None = "") -> str | None:
    """
    Return ``value`` as a string, or ``default`` if it isn't string-like.

    Numbers are stringified (``"6.2"`` and ``6.2`` both become ``"6.2"``).
    Booleans, containers and ``None`` give ``default``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return str(value)
    return default


def coerce_int(value: Any, default: int = 0, min_value: int | None = None, max_value: int | None = None) -> int:
    """
    Return ``value`` as an int, or ``default`` if that can't be done sensibly.

    A number outside ``min_value``..``max_value`` (when given) also gives
    ``default``, so a value can never overflow the column it's stored in.
    """
    number = _to_int(value)
    if number is None:
        return default
    if min_value is not None and number < min_value:
        return default
    if max_value is not None and number > max_value:
        return default
    return number


def _to_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip().replace(",", "")
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if math.isfinite(number) else None
    return None


def coerce_structure(value: Any) -> dict | list | None:
    """
    Keep dicts and lists as they are; anything else is treated as absent.
    """
    if isinstance(value, (dict, list)):
        return value
    return None


def parse_timestamp(value: Any) -> datetime | None:
    """
    Parse a date-like value into a UTC-aware datetime.

    Accepts datetimes, dates, unix timestamps, ISO 8601 strings, bare
    ``YYYY-MM-DD`` dates and the WordPress.org ``"2024-09-12 4:31pm GMT"``
    style. Naive values are assumed to already be in UTC.

    Returns ``None`` if nothing usable could be parsed.
    """
    parsed: datetime | None = None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            parsed = datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str) and value.strip():
        parsed = _parse_timestamp_string(value.strip())

    if parsed is None:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _parse_timestamp_string(text: str) -> datetime | None:
    """
    Try ISO formats first, then the legacy upstream formats.
    """
    try:
        parsed = parse_datetime(text)
        if parsed is not None:
            return parsed
        parsed_date = parse_date(text)
        if parsed_date is not None:
            return datetime(parsed_date.year, parsed_date.month, parsed_date.day)
    except ValueError:
        # Well formatted but not a real date, e.g. "2024-02-31".
        return None

    for fmt in LEGACY_DATETIME_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None
