"""Shared test fixtures."""

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from purine_catalog.config import Settings
from purine_catalog.containers import AppContainer
from purine_catalog.domain.catalog import Catalog, Category, FoodItem, PurineLevel
from purine_catalog.services.ingestion import CatalogWriter
from purine_catalog.services.search import CatalogSearchService, RankingClient
from purine_catalog.services.sources import SourceFileSystem

FOOD_TITLE = "Purine content of foods (mg/100g)"
FOOD_HEADER = "Food Description," + ",".join(f"Column {i}" for i in range(1, 20))
ALCOHOL_HEADER = "Alcoholic Beverage Description," + ",".join(
    f"Column {i}" for i in range(1, 20)
)
UNITS_ROW = "," + ",".join("mg/100g" for _ in range(19))


def csv_row(name: str, purines: str, width: int = 20) -> str:
    """Build a data line with the total purines in the 19th column."""
    fields = [f'"{name}"' if "," in name else name]
    fields.extend(str(index) for index in range(1, 18))
    fields.append(purines)
    fields.extend("x" for _ in range(width - 19))
    return ",".join(fields)


def food_csv(*rows: str) -> str:
    return "\r\n".join([FOOD_TITLE, "", FOOD_HEADER, UNITS_ROW, *rows]) + "\r\n"


def alcohol_csv(*rows: str) -> str:
    return "\n".join([ALCOHOL_HEADER, UNITS_ROW, *rows]) + "\n"


def food(
    name: str,
    purines: int | None,
    category: Category = Category.OTHER,
    purine_level: PurineLevel = PurineLevel.LOW,
) -> FoodItem:
    return FoodItem(
        name=name, purines=purines, category=category, purine_level=purine_level
    )


@dataclass
class InMemoryFileSystem(SourceFileSystem):
    """In-memory snapshot filesystem for tests."""

    directories: set[Path] = field(default_factory=set)
    files: dict[Path, str] = field(default_factory=dict)

    def add_file(self, path: Path, content: str) -> None:
        self.files[path] = content
        self.directories.add(path.parent)

    def list_subdirectories(self, path: Path) -> list[str]:
        return sorted(
            directory.name for directory in self.directories if directory.parent == path
        )

    def list_files(self, path: Path) -> list[str]:
        return sorted(file.name for file in self.files if file.parent == path)

    def read_text(self, path: Path) -> str:
        return self.files[path]


@dataclass
class RecordingCatalogWriter(CatalogWriter):
    """Catalog writer that keeps written catalogs in memory."""

    written: list[Catalog] = field(default_factory=list)
    clears: int = 0

    def write(self, catalog: Catalog) -> None:
        self.written.append(catalog)

    def clear(self) -> None:
        self.clears += 1


@dataclass
class FakeRankingClient(RankingClient):
    """Fake ranking client returning a fixed payload."""

    payload: dict[str, object] = field(default_factory=lambda: {"matches": []})
    error: Exception | None = None
    prompts: list[str] = field(default_factory=list)

    async def rank(
        self, *, prompt: str, schema: dict[str, object]
    ) -> dict[str, object]:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        catalog_data_dir=tmp_path / "data",
        catalog_output_file=tmp_path / "catalog.json",
        openai_api_key=None,
    )


@pytest.fixture
def catalog() -> Catalog:
    return Catalog(
        items=(
            food("Anchovy", 411, Category.SEAFOOD, PurineLevel.VERY_HIGH),
            food("Beer", 14, Category.BEVERAGES, PurineLevel.LOW),
            food("Chicken Breast", 141, Category.MEAT, PurineLevel.MEDIUM),
            food("Chicken Liver", 312, Category.MEAT, PurineLevel.VERY_HIGH),
            food("Salmon", 180, Category.SEAFOOD, PurineLevel.MEDIUM),
            food("Sardine", 210, Category.SEAFOOD, PurineLevel.HIGH),
            food("Tofu", 68, Category.LEGUMES, PurineLevel.LOW),
        )
    )


@pytest.fixture
def container(settings: Settings, catalog: Catalog) -> AppContainer:
    return AppContainer(
        settings=settings,
        catalog=catalog,
        search_service=CatalogSearchService(catalog=catalog),
    )
