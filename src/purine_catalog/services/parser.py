"""Row-stream parser for USDA purine CSV exports."""

import logging
import math
import re

from purine_catalog.domain.catalog import FoodItem, SourceType
from purine_catalog.domain.errors import HeaderNotFoundError
from purine_catalog.services.classification import (
    classify_category,
    classify_purine_level,
)
from purine_catalog.services.csv_rows import tokenize_line
from purine_catalog.services.names import (
    clean_food_name,
    is_section_label,
    strip_wrapping_quotes,
)

HEADER_PREFIXES = ("Food Description,", "Alcoholic Beverage Description,")
MIN_FIELDS = 19
TOTAL_PURINES_COLUMN = 18

_FOOTNOTE_PREFIXES = ("1 ", "2 ", "*", "ND =")
_SOURCES_MARKER = "Sources of data"
_PLACEHOLDERS = frozenset({"", "ND", "-"})
_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_logger = logging.getLogger(__name__)


def parse_source(text: str, source_type: SourceType) -> list[FoodItem]:
    """Parse one source file into catalog candidates."""
    lines = [line.strip() for line in text.removeprefix("\ufeff").split("\n")]
    start = _find_data_start(lines, source_type)
    items: list[FoodItem] = []
    for line in lines[start:]:
        item = parse_row(line, source_type)
        if item is not None:
            items.append(item)
    _logger.debug("Parsed %s %s rows", len(items), source_type.value)
    return items


def parse_row(line: str, source_type: SourceType) -> FoodItem | None:
    """Parse one data line, returning None for rows that should be skipped."""
    if _is_noise(line):
        return None
    fields = tokenize_line(line)
    if len(fields) < MIN_FIELDS:
        return None

    name = strip_wrapping_quotes(fields[0]).strip()
    if not name or is_section_label(name):
        return None

    purines = parse_purines(fields[TOTAL_PURINES_COLUMN])
    if purines is None:
        return None

    return FoodItem(
        name=clean_food_name(name),
        purines=purines,
        category=classify_category(name, source_type),
        purine_level=classify_purine_level(purines),
    )


def parse_purines(raw: str) -> int | None:
    """Parse a total-purines cell to a rounded integer."""
    if raw in _PLACEHOLDERS:
        return None
    match = _LEADING_NUMBER.match(raw)
    if match is None:
        return None
    value = float(match.group(0))
    if not math.isfinite(value) or value < 0:
        return None
    return math.floor(value + 0.5)


def _find_data_start(lines: list[str], source_type: SourceType) -> int:
    for index, line in enumerate(lines):
        if line.startswith(HEADER_PREFIXES):
            # Header row is followed by a units row.
            return index + 2
    raise HeaderNotFoundError(f"Could not find data start in {source_type.value} CSV")


def _is_noise(line: str) -> bool:
    return not line or line.startswith(_FOOTNOTE_PREFIXES) or _SOURCES_MARKER in line
