"""
Layout loader for iso8601ts.

Loads layout YAML files from iso8601ts/layouts/ and provides structured
access via Pydantic models. Each layout defines:
- name: unique identifier (e.g., "extended_date_extended_time")
- priority: position in the matching order (lower = tried first)
- date_style: "extended" (YYYY-MM-DD) or "basic" (YYYYMMDD)
- time_style: "extended" (hh:mm:ss), "basic" (hhmmss) or null for date-only

Why YAML instead of hardcoded:
- The order and field styles of the accepted layouts are visible in one place.
- Separation of structure knowledge (YAML) from matching logic (Python).

Separator consistency is a property of the compiled patterns: each layout
uses either all of its segment's delimiters or none of them, so a string
such as ``1900-1231`` cannot match any layout.
"""

from __future__ import annotations

import logging
import re
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Literal

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from iso8601ts.exceptions import LayoutConfigError

logger = logging.getLogger(__name__)

# Directory containing layout YAML files (sibling package)
_LAYOUTS_DIR = Path(__file__).parent / "layouts"

# ---------------------------------------------------------------------------
# Field fragments
# ---------------------------------------------------------------------------

_YEAR = r"(?P<year>[0-9]{4})"
_MONTH = r"(?P<month>0[1-9]|1[0-2])"
_DAY = r"(?P<day>0[1-9]|[12][0-9]|3[01])"
_HOUR = r"(?P<hour>[01][0-9]|2[0-3])"
_MINUTE = r"(?P<minute>[0-5][0-9])"
# 60 and 61 admit leap-second notation
_SECOND = r"(?P<second>[0-5][0-9]|6[01])"
_FRACTION = r"(?:[.,](?P<fraction>[0-9]{1,9}))?"
_DATE_TIME_SEP = r"[Tt ]"
_OFFSET = (
    r"(?P<offset>Z|(?P<tz_sign>[-+])(?P<tz_hour>[01][0-9])"
    r"(?::?(?P<tz_minute>[0-5][0-9]))?)"
)

_DATE_SEPARATORS = {"extended": "-", "basic": ""}
_TIME_SEPARATORS = {"extended": ":", "basic": ""}


class Layout(BaseModel):
    """A single accepted lexical layout loaded from YAML."""

    model_config = ConfigDict(frozen=True)

    name: str
    priority: int
    date_style: Literal["extended", "basic"]
    time_style: Literal["extended", "basic"] | None = None
    description: str = ""

    @property
    def has_time(self) -> bool:
        return self.time_style is not None


def build_pattern(layout: Layout) -> re.Pattern[str]:
    """Compile the regular expression for a layout.

    The returned pattern is meant for ``fullmatch``; it carries no anchors.
    """
    ds = _DATE_SEPARATORS[layout.date_style]
    source = f"{_YEAR}{ds}{_MONTH}{ds}{_DAY}"
    if layout.time_style is not None:
        ts = _TIME_SEPARATORS[layout.time_style]
        source += (
            f"{_DATE_TIME_SEP}{_HOUR}{ts}{_MINUTE}{ts}{_SECOND}{_FRACTION}{_OFFSET}"
        )
    return re.compile(source)


@dataclass(frozen=True)
class CompiledLayout:
    """A layout paired with its compiled pattern."""
    layout: Layout
    pattern: re.Pattern[str]


class LayoutRegistry:
    """Ordered, immutable table of compiled layouts.

    Layouts are sorted by ``priority`` at construction. Names and
    priorities must be unique so the matching order is unambiguous.
    """

    def __init__(self, layouts: Iterable[Layout]) -> None:
        ordered = sorted(layouts, key=lambda l: l.priority)
        if not ordered:
            raise LayoutConfigError("No layouts defined. Cannot parse timestamps.")

        seen_names: set[str] = set()
        seen_priorities: set[int] = set()
        for layout in ordered:
            if layout.name in seen_names:
                raise LayoutConfigError(f"Duplicate layout name: '{layout.name}'")
            if layout.priority in seen_priorities:
                raise LayoutConfigError(
                    f"Duplicate layout priority {layout.priority} ('{layout.name}')"
                )
            seen_names.add(layout.name)
            seen_priorities.add(layout.priority)

        self._compiled = tuple(CompiledLayout(l, build_pattern(l)) for l in ordered)

    def __iter__(self) -> Iterator[CompiledLayout]:
        return iter(self._compiled)

    def __len__(self) -> int:
        return len(self._compiled)

    @property
    def names(self) -> list[str]:
        return [c.layout.name for c in self._compiled]

    def match(self, text: str) -> tuple[Layout, re.Match[str]] | None:
        """Return the first layout that fully matches *text*, or ``None``."""
        for compiled in self._compiled:
            m = compiled.pattern.fullmatch(text)
            if m is not None:
                return compiled.layout, m
        return None


# ---------------------------------------------------------------------------
# YAML loading
# ---------------------------------------------------------------------------

def load_layout(path: Path) -> Layout:
    """Load a single layout YAML file.

    Raises:
        LayoutConfigError: If the file is not valid YAML or fails validation.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise LayoutConfigError(f"Invalid YAML in layout file {path}: {e}") from e

    if not isinstance(raw, dict):
        raise LayoutConfigError(f"Layout file is empty or not a mapping: {path}")

    try:
        return Layout.model_validate(raw)
    except ValidationError as e:
        raise LayoutConfigError(f"Invalid layout definition in {path}:\n{e}") from e


def load_all_layouts(layouts_dir: Path | None = None) -> list[Layout]:
    """Load all layout YAML files, sorted by priority.

    Args:
        layouts_dir: Directory to scan for .yaml files. Defaults to
            the built-in layouts/ directory.

    Returns:
        List of Layout objects, lowest priority number first.
    """
    layouts_dir = Path(layouts_dir) if layouts_dir is not None else _LAYOUTS_DIR
    layouts: list[Layout] = []
    for yaml_path in sorted(layouts_dir.glob("*.yaml")):
        layout = load_layout(yaml_path)
        layouts.append(layout)
        logger.debug("Loaded layout: %s from %s", layout.name, yaml_path)
    layouts.sort(key=lambda l: l.priority)
    logger.info("Loaded %d layouts", len(layouts))
    return layouts


# ---------------------------------------------------------------------------
# Process-wide default registry
# ---------------------------------------------------------------------------

_DEFAULT_REGISTRY: LayoutRegistry | None = None
_DEFAULT_REGISTRY_LOCK = threading.Lock()


def get_default_registry() -> LayoutRegistry:
    """Return the shared registry built from the bundled layouts.

    Built on first call; concurrent first callers wait on a lock so the
    YAML is loaded and compiled exactly once.
    """
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        with _DEFAULT_REGISTRY_LOCK:
            if _DEFAULT_REGISTRY is None:
                _DEFAULT_REGISTRY = LayoutRegistry(load_all_layouts())
    return _DEFAULT_REGISTRY
