"""
Timestamp parser for iso8601ts.

Parsing algorithm:
1. Try each compiled layout of the registry in priority order; the first
   full match wins. The layouts are mutually exclusive, so at most one
   can match and no backtracking is needed.
2. Convert the captured digit groups to integers.
3. Date-only layouts default to midnight UTC.
4. Right-pad the fractional seconds to 9 digits (nanoseconds).
5. Resolve the offset: ``Z`` is UTC, anything else becomes a fixed
   ``datetime.timezone`` named ``+HH:MM``/``-HH:MM``.
6. Build the calendar date with ``datetime`` (rejecting impossible dates
   such as Feb 30), then add seconds and nanoseconds as a
   ``pd.Timedelta`` so leap-second notation (``:60``, ``:61``) rolls
   forward into the next minute.

The result is a timezone-aware ``pd.Timestamp`` with nanosecond unit.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import pandas as pd

from iso8601ts.exceptions import CalendarRangeError, GrammarError, ParseError
from iso8601ts.layout_registry import Layout, LayoutRegistry, get_default_registry

logger = logging.getLogger(__name__)

_NANOS_DIGITS = 9


@dataclass(frozen=True)
class ParsedFields:
    """Integer fields captured from a single matched timestamp.

    ``second`` may be 60 or 61 (leap-second notation); it is not
    normalised until the timestamp is built.
    """
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0
    tz: timezone = timezone.utc


def _atoi(groups: dict[str, str | None], name: str) -> int:
    """Convert a digit-only capture group to int.

    A failure here means the grammar let through something that is not
    a decimal number, which is a bug rather than bad input.
    """
    value = groups.get(name)
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise GrammarError(f"Failed to convert {name}={value!r} to int") from e


def _fraction_to_nanos(fraction: str | None) -> int:
    """Right-pad a 1-9 digit fraction with zeros and read it as nanoseconds."""
    if not fraction:
        return 0
    return _atoi({"fraction": fraction.ljust(_NANOS_DIGITS, "0")}, "fraction")


def _resolve_offset(groups: dict[str, str | None]) -> timezone:
    """Build the fixed offset for a matched ``Z`` / ``+HH[:MM]`` suffix."""
    if groups["offset"] == "Z":
        return timezone.utc

    sign_str = groups["tz_sign"]
    sign = -1 if sign_str == "-" else 1
    tz_hour = _atoi(groups, "tz_hour")
    tz_minute = _atoi(groups, "tz_minute") if groups.get("tz_minute") else 0

    return timezone(
        sign * timedelta(hours=tz_hour, minutes=tz_minute),
        f"{sign_str}{tz_hour:02d}:{tz_minute:02d}",
    )


def extract_fields(layout: Layout, match: re.Match[str]) -> ParsedFields:
    """Turn the named groups of a layout match into integer fields."""
    groups = match.groupdict()
    year = _atoi(groups, "year")
    month = _atoi(groups, "month")
    day = _atoi(groups, "day")

    if not layout.has_time:
        return ParsedFields(year=year, month=month, day=day)

    return ParsedFields(
        year=year,
        month=month,
        day=day,
        hour=_atoi(groups, "hour"),
        minute=_atoi(groups, "minute"),
        second=_atoi(groups, "second"),
        nanosecond=_fraction_to_nanos(groups.get("fraction")),
        tz=_resolve_offset(groups),
    )


def to_timestamp(fields: ParsedFields, text: str) -> pd.Timestamp:
    """Combine parsed fields into a nanosecond ``pd.Timestamp``.

    Raises:
        CalendarRangeError: If the date does not exist in the calendar or
            falls outside the range ``pd.Timestamp`` can hold at
            nanosecond resolution.
    """
    try:
        base = datetime(
            fields.year, fields.month, fields.day,
            fields.hour, fields.minute, tzinfo=fields.tz,
        )
        ts = pd.Timestamp(base).as_unit("ns")
        return ts + pd.Timedelta(seconds=fields.second, nanoseconds=fields.nanosecond)
    except (ValueError, OverflowError) as e:
        raise CalendarRangeError(
            text, f"ISO 8601 timestamp out of calendar range: {text!r} ({e})"
        ) from e


def parse_iso8601_timestamp(
    text: str,
    registry: LayoutRegistry | None = None,
) -> pd.Timestamp:
    """Parse an ISO 8601 / RFC 3339 timestamp into a ``pd.Timestamp``.

    Compared to ``pd.Timestamp(text)`` or ``datetime.fromisoformat``, this
    accepts exactly the hyphenated/compact date and colon/compact time
    combinations, ``T``/``t``/space separators, 1-9 fractional digits
    after ``.`` or ``,`` and ``Z``/``+HH:MM``/``+HHMM``/``+HH`` offsets,
    and nothing else.

    Args:
        text: The timestamp string.
        registry: Layout table to match against. Defaults to the shared
            registry built from the bundled layouts.

    Returns:
        A timezone-aware ``pd.Timestamp`` (unit ``ns``) in the parsed
        fixed offset; UTC for ``Z`` and date-only input.

    Raises:
        ParseError: If *text* matches no layout.
        CalendarRangeError: If *text* matches but names no real instant.
        TypeError: If *text* is not a ``str``.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    if registry is None:
        registry = get_default_registry()

    found = registry.match(text)
    if found is None:
        raise ParseError(text)

    layout, match = found
    logger.debug("Matched layout '%s' for %r", layout.name, text)
    return to_timestamp(extract_fields(layout, match), text)
