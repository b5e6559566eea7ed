"""
DataFrame transform for ISO 8601 timestamp columns.

``pd.to_datetime`` is lenient: it accepts many layouts this package
rejects (``1900-1231``, ``2020/02/17``, month names) and guesses at the
rest. This transform instead runs every cell through
``parse_iso8601_timestamp`` so a column only converts when all its values
are in the accepted ISO 8601 family.

Because the cells of one column may carry different offsets, results are
normalised to UTC and the column dtype becomes ``datetime64[ns, UTC]``.
"""

from __future__ import annotations

import logging
from typing import Literal

import pandas as pd

from iso8601ts.exceptions import NotAStringLiteralError, ParseError
from iso8601ts.parser import parse_iso8601_timestamp

logger = logging.getLogger(__name__)


def _parse_cell(value: object, errors: Literal["raise", "coerce"]) -> pd.Timestamp:
    if value is None or (
        not isinstance(value, str) and pd.api.types.is_scalar(value) and pd.isna(value)
    ):
        return pd.NaT
    try:
        if not isinstance(value, str):
            raise NotAStringLiteralError(value)
        return parse_iso8601_timestamp(value.strip()).tz_convert("UTC")
    except (ParseError, NotAStringLiteralError):
        if errors == "coerce":
            return pd.NaT
        raise


def parse_timestamp_column(
    df: pd.DataFrame,
    columns: str | list[str],
    *,
    errors: Literal["raise", "coerce"] = "raise",
) -> pd.DataFrame:
    """Parse ISO 8601 strings in one or more DataFrame columns.

    Missing values (``None``/``NaN``) become ``NaT``. Cells that are not
    strings (e.g. an ``int`` in an ``object`` column) are never coerced to
    text; they fail like unparseable strings. Leading and trailing
    whitespace is stripped before parsing.

    Args:
        df: Input DataFrame.
        columns: Column name or list of column names to convert.
        errors: ``"raise"`` propagates the first ``ParseError`` or
            ``NotAStringLiteralError``; ``"coerce"`` turns unparseable
            and non-string cells into ``NaT``.

    Returns:
        A copy of *df* with the named columns as ``datetime64[ns, UTC]``.

    Raises:
        KeyError: If a named column does not exist.
        ParseError: If a cell is not an accepted timestamp and
            *errors* is ``"raise"``.
        NotAStringLiteralError: If a non-missing cell is not a ``str`` and
            *errors* is ``"raise"``.
    """
    if errors not in ("raise", "coerce"):
        raise ValueError(f"errors must be 'raise' or 'coerce', got {errors!r}")

    df = df.copy()
    names = [columns] if isinstance(columns, str) else list(columns)
    missing = [c for c in names if c not in df.columns]
    if missing:
        raise KeyError(f"Columns not found: {missing}")

    for col in names:
        parsed = [_parse_cell(v, errors) for v in df[col]]
        df[col] = pd.Series(
            pd.DatetimeIndex(parsed, tz="UTC").as_unit("ns"), index=df.index
        )
        n_missing = int(df[col].isna().sum())
        logger.debug("Parsed column '%s': %d rows, %d NaT", col, len(df), n_missing)

    return df
