"""
Demo script: parse ISO 8601 timestamps via the public API.

Usage:
    python scripts/parse_timestamps.py                          # built-in samples
    python scripts/parse_timestamps.py 2020-02-17T11:39:27Z ...  # your own
    python scripts/parse_timestamps.py --verbose ...             # DEBUG logging

For each input, prints the parsed value in its own offset, in UTC, and in
the compact UTC form. Inputs that fail to parse are logged and skipped.
"""

from __future__ import annotations

import logging
import sys

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

SAMPLE_TIMESTAMPS = [
    "1900-12-31T00:10:20Z",
    "19001231t001020Z",
    "1900-12-31 00:10:60Z",
    "2020-02-17T11:39:27.6+00:00",
    "2020-02-17T11:39:27.658731-02:30",
    "20200217T113927,658731-0230",
    "19001231",
    "1900-1231T00:10:20Z",
]


def main() -> None:
    import iso8601ts

    args = sys.argv[1:]
    verbose = "--verbose" in args
    inputs = [a for a in args if a != "--verbose"] or SAMPLE_TIMESTAMPS

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )
    log = logging.getLogger("parse_timestamps")

    failures = 0
    for text in inputs:
        try:
            t = iso8601ts.Time.from_text(text)
        except iso8601ts.ParseError as e:
            log.warning("SKIP  %r  (%s)", text, e)
            failures += 1
            continue

        log.info("%-36r -> %s", text, t)
        log.info("  utc     : %s", t.utc())
        log.info("  compact : %s", t.format_compact())

    log.info("Parsed %d of %d timestamps.", len(inputs) - failures, len(inputs))


if __name__ == "__main__":
    main()
