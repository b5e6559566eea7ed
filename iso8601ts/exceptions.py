"""
Custom exception hierarchy for iso8601ts.

Why a custom hierarchy:
- Callers can catch specific exceptions (e.g., ParseError vs
  NotAStringLiteralError) without inspecting messages.
- ParseError and NotAStringLiteralError also derive from ValueError, so
  pydantic validators surface them as ordinary ValidationErrors.
"""


class Iso8601Error(Exception):
    """Base exception for all iso8601ts errors."""


class ParseError(Iso8601Error, ValueError):
    """Raised when a string matches none of the accepted ISO 8601 layouts.

    The offending input is kept verbatim on ``.text`` for diagnostics.
    """

    def __init__(self, text: str, message: str | None = None) -> None:
        self.text = text
        super().__init__(message or f"Invalid ISO 8601 timestamp: {text!r}")


class CalendarRangeError(ParseError):
    """Raised when a lexically valid timestamp is not a representable instant.

    For example ``2021-02-30`` (no such day) or a year outside the
    nanosecond range of ``pd.Timestamp``.
    """


class NotAStringLiteralError(Iso8601Error, ValueError):
    """Raised when a structured-document value is neither a quoted string nor null."""

    def __init__(self, token: object) -> None:
        self.token = token
        super().__init__(
            f"Expected a quoted string literal for an ISO 8601 timestamp, got {token!r}"
        )


class LayoutConfigError(Iso8601Error):
    """Raised when the layout YAML files are missing or fail validation."""


class GrammarError(Iso8601Error, AssertionError):
    """Raised when a matched capture group cannot be converted to an integer.

    This indicates a bug in the layout grammar, not bad input data.
    """
