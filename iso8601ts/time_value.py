"""
``Time`` value type for iso8601ts.

The ``Time`` class wraps a timezone-aware ``pd.Timestamp`` and adds the
ISO 8601 deserialisation behaviour on top of it. Everything else
(arithmetic, zone conversion, rounding) is forwarded to pandas.

Design rationale:
- **Composition, not inheritance**: ``pd.Timestamp`` is held on
  ``.timestamp`` and every method returns a new ``Time``, so the wrapper
  stays an immutable value.
- **Zero value**: ``Time()`` holds ``pd.NaT``. Deserialising a ``null``
  literal yields the zero value (or a caller-supplied default).
- **pydantic integration**: a field annotated ``Time`` accepts ISO 8601
  strings, ``datetime``/``pd.Timestamp`` instances and ``None``, rejects
  any other JSON literal, and serialises back to the canonical string.
"""

from __future__ import annotations

import functools
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any

import pandas as pd
from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from iso8601ts.formatting import format_compact, format_rfc3339
from iso8601ts.marshal import decode_json_token, decode_json_value, decode_text
from iso8601ts.parser import parse_iso8601_timestamp

DurationLike = pd.Timedelta | timedelta | str

# round/truncate count from the proleptic zero time, as Go's time package does
_ZERO_TIME_TO_EPOCH_NS = (datetime(1970, 1, 1) - datetime(1, 1, 1)) // timedelta(microseconds=1) * 1000


@functools.total_ordering
class Time:
    """An instant with nanosecond resolution and a fixed UTC offset.

    Naive timestamps passed to the constructor are taken to be UTC.
    Strings go through ``parse_iso8601_timestamp``, as with ``from_text``.
    Zero values compare equal to each other and sort before every
    non-zero instant.
    """

    def __init__(self, ts: pd.Timestamp | datetime | str | None = None) -> None:
        if ts is None:
            self._ts = pd.NaT
            return
        if isinstance(ts, str):
            # never pd.Timestamp(str): its parser is lenient
            ts = parse_iso8601_timestamp(ts)
        ts = pd.Timestamp(ts)
        if ts is pd.NaT:
            self._ts = pd.NaT
            return
        if ts.tzinfo is None:
            ts = ts.tz_localize(timezone.utc)
        self._ts = ts.as_unit("ns")

    # -- Constructors -------------------------------------------------------

    @classmethod
    def from_text(cls, text: str) -> Time:
        """Parse an ISO 8601 string (see ``parse_iso8601_timestamp``)."""
        return cls(parse_iso8601_timestamp(text))

    @classmethod
    def date(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
        tz: tzinfo = timezone.utc,
    ) -> Time:
        """Build a ``Time`` from calendar fields.

        ``second`` and ``nanosecond`` are added as a duration, so values
        past their usual range roll forward.
        """
        base = pd.Timestamp(datetime(year, month, day, hour, minute, tzinfo=tz))
        return cls(base.as_unit("ns") + pd.Timedelta(seconds=second, nanoseconds=nanosecond))

    @classmethod
    def now(cls) -> Time:
        return cls(pd.Timestamp.now(tz=timezone.utc))

    @classmethod
    def unix(cls, sec: int, nsec: int = 0) -> Time:
        """The UTC instant *sec* seconds and *nsec* nanoseconds after the epoch."""
        return cls(pd.Timestamp(sec * 1_000_000_000 + nsec, unit="ns", tz=timezone.utc))

    # -- Deserialisation ----------------------------------------------------

    @classmethod
    def unmarshal_json(cls, token: str | bytes, default: Time | None = None) -> Time:
        """Decode a raw JSON token.

        A ``null`` token returns *default* unchanged (the zero value when
        no default is given). Non-string literals raise
        ``NotAStringLiteralError``.
        """
        ts = decode_json_token(token)
        if ts is None:
            return default if default is not None else cls()
        return cls(ts)

    @classmethod
    def unmarshal_text(cls, text: str | bytes) -> Time:
        """Decode text content such as an XML attribute or element body."""
        return cls(decode_text(text))

    @classmethod
    def _validate(cls, value: Any) -> Time:
        if isinstance(value, Time):
            return value
        if isinstance(value, datetime):
            return cls(value)
        ts = decode_json_value(value)
        return cls(ts) if ts is not None else cls()

    @staticmethod
    def _serialize(value: Time) -> str | None:
        return None if value.is_zero() else value.isoformat()

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._serialize, when_used="json"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": ["string", "null"], "format": "date-time"}

    # -- Accessors ----------------------------------------------------------

    @property
    def timestamp(self) -> pd.Timestamp:
        """The wrapped ``pd.Timestamp`` (``pd.NaT`` for the zero value)."""
        return self._ts

    def is_zero(self) -> bool:
        return self._ts is pd.NaT

    @property
    def year(self) -> int:
        return self._ts.year

    @property
    def month(self) -> int:
        return self._ts.month

    @property
    def day(self) -> int:
        return self._ts.day

    @property
    def hour(self) -> int:
        return self._ts.hour

    @property
    def minute(self) -> int:
        return self._ts.minute

    @property
    def second(self) -> int:
        return self._ts.second

    @property
    def nanosecond(self) -> int:
        """Nanoseconds within the second, 0 to 999,999,999."""
        return self._ts.microsecond * 1000 + self._ts.nanosecond

    @property
    def tzinfo(self) -> tzinfo | None:
        return self._ts.tzinfo

    def utcoffset(self) -> timedelta | None:
        return self._ts.utcoffset()

    # -- Arithmetic ---------------------------------------------------------

    def add(self, duration: DurationLike) -> Time:
        return Time(self._ts + pd.Timedelta(duration))

    def add_date(self, years: int = 0, months: int = 0, days: int = 0) -> Time:
        """Add a calendar interval.

        Month arithmetic follows ``pd.DateOffset``: a day past the end of
        the target month is clipped to its last day.
        """
        return Time(self._ts + pd.DateOffset(years=years, months=months, days=days))

    def sub(self, other: Time) -> pd.Timedelta:
        """The duration ``self - other``."""
        return self._ts - other._ts

    def __add__(self, duration: DurationLike) -> Time:
        return self.add(duration)

    def __sub__(self, other: Time | DurationLike) -> Any:
        if isinstance(other, Time):
            return self.sub(other)
        return Time(self._ts - pd.Timedelta(other))

    def _remainder(self, step: int) -> int:
        return (self._ts.value + _ZERO_TIME_TO_EPOCH_NS) % step

    def truncate(self, duration: DurationLike) -> Time:
        """Round down to a multiple of *duration* since 0001-01-01T00:00:00Z.

        Durations that divide a day give the same result as counting from
        the Unix epoch; a ``7D`` step lands on Mondays.
        A non-positive duration returns the value unchanged.
        """
        step = pd.Timedelta(duration).value
        if step <= 0 or self.is_zero():
            return self
        return Time(self._ts - pd.Timedelta(self._remainder(step), unit="ns"))

    def round(self, duration: DurationLike) -> Time:
        """Round to the nearest multiple of *duration* since 0001-01-01T00:00:00Z.

        Halfway values round up. A non-positive duration returns the value
        unchanged.
        """
        step = pd.Timedelta(duration).value
        if step <= 0 or self.is_zero():
            return self
        remainder = self._remainder(step)
        if remainder * 2 >= step:
            return Time(self._ts + pd.Timedelta(step - remainder, unit="ns"))
        return Time(self._ts - pd.Timedelta(remainder, unit="ns"))

    # -- Zone conversion ----------------------------------------------------

    def in_zone(self, tz: tzinfo | str) -> Time:
        """The same instant expressed in *tz*."""
        if self.is_zero():
            return self
        return Time(self._ts.tz_convert(tz))

    def utc(self) -> Time:
        return self.in_zone(timezone.utc)

    def local(self) -> Time:
        """The same instant in the system's current local offset."""
        return self.in_zone(datetime.now().astimezone().tzinfo)

    # -- Comparison ---------------------------------------------------------

    def after(self, other: Time) -> bool:
        return self > other

    def before(self, other: Time) -> bool:
        return self < other

    def equal(self, other: Time) -> bool:
        """True when both values denote the same instant, whatever their zones."""
        return self == other

    def _key(self) -> tuple[int, int]:
        return (0, 0) if self.is_zero() else (1, self._ts.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: Time) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    # -- Rendering ----------------------------------------------------------

    def isoformat(self) -> str:
        """Canonical extended form, e.g. ``2020-02-17T11:39:27.658731-02:30``."""
        return format_rfc3339(self._ts)

    def format_compact(self) -> str:
        """Compact UTC form, e.g. ``20200217T140927Z``."""
        return format_compact(self._ts)

    def strftime(self, fmt: str) -> str:
        return self._ts.strftime(fmt)

    def __str__(self) -> str:
        return "NaT" if self.is_zero() else self.isoformat()

    def __repr__(self) -> str:
        return f"Time({str(self)!r})"
