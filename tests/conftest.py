"""
Shared test fixtures and sample timestamps for iso8601ts tests.

Sample inputs are defined here as module-level constants so unit and
integration tests exercise the same strings. If the accepted layouts
change, update this file.
"""

import pytest

# ---------------------------------------------------------------------------
# Sample timestamps -- every one denotes 1900-12-31T00:10:20Z
# ---------------------------------------------------------------------------
ZULU_VARIANTS = [
    "1900-12-31T00:10:20Z", "1900-12-31T001020Z", "19001231T00:10:20Z", "19001231T001020Z",
    "1900-12-31t00:10:20Z", "1900-12-31t001020Z", "19001231t00:10:20Z", "19001231t001020Z",
    "1900-12-31 00:10:20Z", "1900-12-31 001020Z", "19001231 00:10:20Z", "19001231 001020Z",
]

# Fractional seconds and non-UTC offsets
OFFSET_VARIANTS = [
    "2020-02-17T11:39:27.658731+00:00",
    "2020-02-17T11:39:27.658731Z",
    "2020-02-17T11:39:27.658731-02:30",
]

# One canonical string per layout, keyed by layout name
CANONICAL_BY_LAYOUT = {
    "extended_date_extended_time": "2020-02-17T11:39:27.658731-02:30",
    "basic_date_basic_time": "20200217T113927.658731-0230",
    "extended_date_basic_time": "2020-02-17T113927.658731-02:30",
    "basic_date_extended_time": "20200217T11:39:27.658731-0230",
    "extended_date": "2020-02-17",
    "basic_date": "20200217",
}

# Partial separators within a segment
MIXED_SEPARATORS = ["1900-1231T00:10:20Z", "1900-12-31T00:1020Z", "190012-31T00:10:20Z", "1900-12-31T0010:20Z"]


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (exercises deserialisation frameworks)",
    )
