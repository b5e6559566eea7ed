"""
Rendering of timestamps back to ISO 8601 text.

Two output forms:
- ``format_rfc3339``: the canonical extended form
  ``YYYY-MM-DDThh:mm:ss[.fffffffff](Z|+hh:mm)``, fraction trimmed of
  trailing zeros and omitted when zero.
- ``format_compact``: the most compact form, ``YYYYMMDDThhmmssZ``,
  always rendered in UTC.

Only output is produced here; compact input is handled by the general
layouts in the parser.
"""

from __future__ import annotations

import pandas as pd

# strftime template for the most compact ISO 8601 rendering (UTC only)
COMPACT_FORMAT = "%Y%m%dT%H%M%SZ"


def _require_timestamp(ts: pd.Timestamp) -> None:
    if ts is pd.NaT:
        raise ValueError("Cannot format a zero (NaT) timestamp")


def _format_offset(ts: pd.Timestamp) -> str:
    offset = ts.utcoffset()
    if offset is None or offset == pd.Timedelta(0):
        return "Z"
    total_minutes = int(offset.total_seconds()) // 60
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def format_rfc3339(ts: pd.Timestamp) -> str:
    """Render *ts* in the canonical extended form.

    Naive timestamps are rendered as if they were UTC.
    """
    _require_timestamp(ts)
    text = (
        f"{ts.year:04d}-{ts.month:02d}-{ts.day:02d}"
        f"T{ts.hour:02d}:{ts.minute:02d}:{ts.second:02d}"
    )
    nanos = ts.microsecond * 1000 + ts.nanosecond
    if nanos:
        text += "." + f"{nanos:09d}".rstrip("0")
    return text + _format_offset(ts)


def format_compact(ts: pd.Timestamp) -> str:
    """Render *ts* as ``YYYYMMDDThhmmssZ`` after converting it to UTC."""
    _require_timestamp(ts)
    if ts.tzinfo is not None:
        ts = ts.tz_convert("UTC")
    return ts.strftime(COMPACT_FORMAT)
