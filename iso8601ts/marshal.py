"""
Deserialisation hooks for structured documents (JSON, XML, etc.).

Three entry points, one per shape a timestamp arrives in:

- ``decode_json_token(token)``: a raw JSON token as it appears in the
  document text. ``null`` is a no-op (returns ``None``); a double-quoted
  literal is decoded with ``json.loads`` (so JSON escape sequences are
  honoured) and parsed; a single-quoted literal has its quotes
  stripped and is parsed as-is; anything else raises
  ``NotAStringLiteralError``.
- ``decode_json_value(value)``: a value already decoded by ``json.loads``
  (or any other loader). ``None`` is a no-op; ``str`` is parsed; other
  types raise ``NotAStringLiteralError``.
- ``decode_text(text)``: plain text content such as an XML attribute or
  element body, parsed as-is.

Parse failures propagate as ``ParseError`` from the parser.
"""

from __future__ import annotations

import json

import pandas as pd

from iso8601ts.exceptions import NotAStringLiteralError
from iso8601ts.parser import parse_iso8601_timestamp

_NULL_LITERAL = "null"
_QUOTE_CHARS = ('"', "'")


def _as_str(data: str | bytes) -> str:
    if isinstance(data, bytes):
        return data.decode("utf-8")
    return data


def decode_json_token(token: str | bytes) -> pd.Timestamp | None:
    """Decode a raw JSON token into a timestamp.

    Returns:
        The parsed timestamp, or ``None`` when the token is ``null`` so
        the caller can leave its target unchanged.

    Raises:
        NotAStringLiteralError: If the token is not a quoted string, or a
            double-quoted token is not valid JSON.
        ParseError: If the string is not an accepted ISO 8601 layout.
    """
    text = _as_str(token).strip()
    if text == _NULL_LITERAL:
        return None
    if len(text) >= 2 and text[0] in _QUOTE_CHARS and text[-1] == text[0]:
        if text[0] == "'":
            return parse_iso8601_timestamp(text[1:-1])
        try:
            value = json.loads(text)
        except json.JSONDecodeError as e:
            raise NotAStringLiteralError(text) from e
        return parse_iso8601_timestamp(value)
    raise NotAStringLiteralError(text)


def decode_json_value(value: object) -> pd.Timestamp | None:
    """Decode an already-loaded document value into a timestamp."""
    if value is None:
        return None
    if isinstance(value, str):
        return parse_iso8601_timestamp(value)
    raise NotAStringLiteralError(value)


def decode_text(text: str | bytes) -> pd.Timestamp:
    """Decode text content (e.g. an XML attribute) into a timestamp."""
    return parse_iso8601_timestamp(_as_str(text))
