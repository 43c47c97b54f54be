"""Tests for locale-aware name ordering."""

from purine_catalog.services.collation import collation_key


def _sorted(names: list[str]) -> list[str]:
    return sorted(names, key=collation_key)


def test_ordering_ignores_case_first() -> None:
    assert _sorted(["banana", "Apple", "cherry"]) == ["Apple", "banana", "cherry"]


def test_lowercase_sorts_before_uppercase_on_tie() -> None:
    assert _sorted(["Tofu", "tofu"]) == ["tofu", "Tofu"]


def test_punctuation_sorts_before_letters() -> None:
    assert _sorted(["Beans", "Bean, green"]) == ["Bean, green", "Beans"]


def test_space_sorts_before_punctuation() -> None:
    assert _sorted(["Rice, brown", "Rice cake"]) == ["Rice cake", "Rice, brown"]


def test_accents_are_secondary() -> None:
    assert _sorted(["Pâté", "Pate", "Pater"]) == ["Pate", "Pâté", "Pater"]


def test_digits_sort_before_letters() -> None:
    assert _sorted(["Beer", "7 grain bread"]) == ["7 grain bread", "Beer"]
