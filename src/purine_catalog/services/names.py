"""Food name cleanup and section-label detection."""

import re

_CURLY_SINGLE_QUOTES = re.compile("[\u2018\u2019\u201a\u201b]")
_CURLY_DOUBLE_QUOTES = re.compile("[\u201c\u201d\u201e\u201f]")
_MEATLESS = re.compile(r"^'([^']+)',\s*meatless$", re.IGNORECASE)
_EDGE_SINGLE_QUOTES = re.compile(r"^'+|'+$")
_TRAILING_RAW = re.compile(r",\s*raw\s*$", re.IGNORECASE)
_TRAILING_FRESH = re.compile(r",\s*fresh\s*$", re.IGNORECASE)
_TRAILING_DRIED = re.compile(r",\s*dried\s*$", re.IGNORECASE)
_UNSPECIFIED = re.compile(
    r"\s+\((?:unspecified|no further specified|not further specified)\)$",
    re.IGNORECASE,
)
# USDA appends footnote numbers straight onto "raw", e.g. "Chicken, raw6".
_RAW_FOOTNOTE = re.compile(r",?\s*\braw\d*$", re.IGNORECASE)

SECTION_LABELS = frozenset(
    {
        "Beverages",
        "Dairy and Eggs",
        "Finfish and shellfish",
        "Fruits",
        "Legumes and legume products",
        "Nuts and seeds",
        "Sausages and luncheon meats",
        "Sweets",
        "Vegetables",
    }
)
_SECTION_FRAGMENTS = ("Organ Products", "other than organs", "(other than")
_SECTION_SUFFIXES = ("products",)
_SECTION_PREFIXES = (
    "Cereal grains",
    "Lamb, veal",
    "Pork organ",
    "Pork (other",
    "Poultry organ",
    "Poultry (other",
    "Soups, sauces",
    "Beef Organ",
    "Beef (other",
    "Vegetarian meat",
)


def is_section_label(name: str) -> bool:
    """Return True for group headings embedded in the data region."""
    if name in SECTION_LABELS:
        return True
    if any(fragment in name for fragment in _SECTION_FRAGMENTS):
        return True
    return name.endswith(_SECTION_SUFFIXES) or name.startswith(_SECTION_PREFIXES)


def strip_wrapping_quotes(value: str) -> str:
    """Drop one leading and one trailing double quote."""
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    return value


def clean_food_name(name: str) -> str:
    """Turn a raw USDA description into a display name."""
    cleaned = _CURLY_SINGLE_QUOTES.sub("'", name)
    cleaned = _CURLY_DOUBLE_QUOTES.sub('"', cleaned)
    cleaned = strip_wrapping_quotes(cleaned)

    meatless = _MEATLESS.match(cleaned)
    if meatless:
        cleaned = f"{meatless.group(1)} (Meatless)"

    cleaned = _EDGE_SINGLE_QUOTES.sub("", cleaned)
    cleaned = _TRAILING_RAW.sub("", cleaned)
    cleaned = _TRAILING_FRESH.sub("", cleaned)
    cleaned = _TRAILING_DRIED.sub(" (dried)", cleaned)
    cleaned = _UNSPECIFIED.sub("", cleaned)
    cleaned = _RAW_FOOTNOTE.sub("", cleaned)
    return title_words(cleaned.strip())


def title_words(value: str) -> str:
    """Capitalize the first letter of each space-separated word."""
    return " ".join(_capitalize_word(word) for word in value.split(" "))


def _capitalize_word(word: str) -> str:
    if word[:1] in {"(", "'"}:
        return word[0] + word[1:2].upper() + word[2:]
    return word[:1].upper() + word[1:]
