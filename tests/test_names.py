"""Tests for food name cleanup."""

import pytest

from purine_catalog.services.names import clean_food_name, is_section_label


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("'Bacon', meatless", "Bacon (Meatless)"),
        ("‘Bacon’, meatless", "Bacon (Meatless)"),
        ("chicken, raw6", "Chicken"),
        ("beef, dried", "Beef (Dried)"),
        ("Salmon, raw", "Salmon"),
        ("spinach, FRESH", "Spinach"),
        ("rice (unspecified)", "Rice"),
        ("soybeans (not further specified)", "Soybeans"),
        ("mung beans (no further specified)", "Mung Beans"),
        ("“Sake”", "Sake"),
        ("kidney beans (red)", "Kidney Beans (Red)"),
        ("  straw mushrooms  ", "Straw Mushrooms"),
    ],
)
def test_clean_food_name(raw: str, expected: str) -> None:
    assert clean_food_name(raw) == expected


def test_clean_food_name_capitalizes_after_opening_quote() -> None:
    assert clean_food_name("sausage 'vienna' style") == "Sausage 'Vienna' Style"


def test_unspecified_is_only_removed_at_the_end() -> None:
    assert clean_food_name("tea (unspecified) leaves") == "Tea (Unspecified) Leaves"


@pytest.mark.parametrize(
    "name",
    [
        "Beverages",
        "Finfish and shellfish",
        "Beef Organ Products",
        "Pork (other than organs)",
        "Milk products",
        "Cereal grains and pasta",
        "Vegetarian meat substitutes",
    ],
)
def test_section_labels_are_detected(name: str) -> None:
    assert is_section_label(name)


@pytest.mark.parametrize("name", ["Salmon, raw", "Beverage, cola", "Pork loin"])
def test_food_names_are_not_section_labels(name: str) -> None:
    assert not is_section_label(name)
