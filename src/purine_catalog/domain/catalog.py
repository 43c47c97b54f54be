"""Catalog domain models."""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class SourceType(str, Enum):
    """Kind of source export a row was read from."""

    FOOD = "food"
    ALCOHOL = "alcohol"


class Category(str, Enum):
    """Fixed food categories shown in the catalog."""

    SEAFOOD = "Seafood"
    MEAT = "Meat"
    DAIRY = "Dairy"
    LEGUMES = "Legumes"
    GRAINS = "Grains"
    NUTS = "Nuts"
    FRUITS = "Fruits"
    VEGETABLES = "Vegetables"
    BEVERAGES = "Beverages"
    OTHER = "Other"


class PurineLevel(str, Enum):
    """Coarse purine tier per 100g."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    VERY_HIGH = "Very High"


@dataclass(frozen=True)
class FoodItem:
    """A single catalog entry."""

    name: str
    purines: int | None
    category: Category
    purine_level: PurineLevel

    def to_record(self) -> dict[str, object]:
        """Return the serialized form used by the generated catalog."""
        return {
            "name": self.name,
            "purines": self.purines,
            "category": self.category.value,
            "purineLevel": self.purine_level.value,
        }


@dataclass(frozen=True)
class Catalog:
    """Sorted, deduplicated, read-only collection of food items."""

    items: tuple[FoodItem, ...] = ()

    def __iter__(self) -> Iterator[FoodItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def find(self, name: str) -> FoodItem | None:
        """Return the item with exactly this name, if present."""
        for item in self.items:
            if item.name == name:
                return item
        return None

    def filter_by_level(self, level: str | None) -> list[FoodItem]:
        """Filter by purine level; ``high`` also matches ``Very High``."""
        if not level or level.lower() == "all":
            return list(self.items)
        return [item for item in self.items if matches_level(item, level)]

    def category_counts(self) -> dict[str, int]:
        """Count items per category, in enum order."""
        counts = {category.value: 0 for category in Category}
        for item in self.items:
            counts[item.category.value] += 1
        return counts


def matches_level(item: FoodItem, level: str) -> bool:
    """Return whether an item belongs to the requested level filter."""
    wanted = level.lower()
    actual = item.purine_level.value.lower()
    if wanted == "high":
        return actual in {"high", "very high"}
    return actual == wanted
