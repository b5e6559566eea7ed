"""
iso8601ts: strict ISO 8601 / RFC 3339 timestamp parsing for Python.

Public API surface:

- ``parse_iso8601_timestamp(text)`` (alias ``parse``) -- **the entry
  point**. Accepts the hyphenated and compact date layouts, with or
  without a colon-separated or compact time, and returns a
  timezone-aware ``pd.Timestamp`` with nanosecond resolution.

- ``Time`` -- value type wrapping the parsed timestamp. Forwards
  arithmetic, zone conversion and rounding to pandas and plugs into
  JSON/XML deserialisation and pydantic models.

- ``format_rfc3339(ts)`` / ``format_compact(ts)`` -- render a timestamp
  in the canonical extended form or as ``YYYYMMDDThhmmssZ``.

- ``parse_timestamp_column(df, columns)`` -- strict column-wise parsing
  for DataFrames.

Examples::

    >>> import iso8601ts
    >>> ts = iso8601ts.parse("2020-02-17T11:39:27.658731-02:30")
    >>> iso8601ts.format_rfc3339(ts.tz_convert("UTC"))
    '2020-02-17T14:09:27.658731Z'
"""

from __future__ import annotations

from iso8601ts.exceptions import (
    CalendarRangeError,
    GrammarError,
    Iso8601Error,
    LayoutConfigError,
    NotAStringLiteralError,
    ParseError,
)
from iso8601ts.formatting import COMPACT_FORMAT, format_compact, format_rfc3339
from iso8601ts.parser import parse_iso8601_timestamp
from iso8601ts.time_value import Time
from iso8601ts.transforms import parse_timestamp_column

parse = parse_iso8601_timestamp

__all__ = [
    "parse_iso8601_timestamp",
    "parse",
    "Time",
    "COMPACT_FORMAT",
    "format_compact",
    "format_rfc3339",
    "parse_timestamp_column",
    "Iso8601Error",
    "ParseError",
    "CalendarRangeError",
    "NotAStringLiteralError",
    "LayoutConfigError",
    "GrammarError",
]
