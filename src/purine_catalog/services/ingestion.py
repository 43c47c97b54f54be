"""Catalog ingestion service."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from purine_catalog.domain.catalog import Catalog, FoodItem, SourceType
from purine_catalog.services.collation import collation_key
from purine_catalog.services.parser import parse_source
from purine_catalog.services.sources import (
    SnapshotLocator,
    SourceFileSystem,
    SourceSnapshot,
)

_logger = logging.getLogger(__name__)


class CatalogWriter(Protocol):
    """Destination for the generated catalog artifact."""

    def write(self, catalog: Catalog) -> None:
        """Persist the catalog, replacing any previous one."""

    def clear(self) -> None:
        """Reset the artifact to an empty catalog."""


@dataclass(frozen=True)
class IngestionResult:
    """Outcome of one pipeline run."""

    snapshot: SourceSnapshot
    food_count: int
    alcohol_count: int
    catalog: Catalog


def merge_catalog(*sources: Iterable[FoodItem]) -> Catalog:
    """Concatenate candidates, sort by name, keep the first of each name."""
    candidates = [item for source in sources for item in source]
    candidates.sort(key=lambda item: collation_key(item.name))
    unique: list[FoodItem] = []
    seen: set[str] = set()
    for item in candidates:
        key = item.name.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(item)
    return Catalog(items=tuple(unique))


@dataclass
class IngestionService:
    """Builds the catalog from the newest snapshot and writes it out."""

    file_system: SourceFileSystem
    writer: CatalogWriter
    data_dir: Path

    def build(self) -> IngestionResult:
        """Parse the latest snapshot into a catalog without writing it."""
        _logger.info("Finding latest data folder in %s", self.data_dir)
        snapshot = SnapshotLocator(self.file_system).locate(self.data_dir)
        _logger.info("Using folder: %s", snapshot.folder)

        food_items = self._parse(snapshot.food_file, SourceType.FOOD)
        alcohol_items = self._parse(snapshot.alcohol_file, SourceType.ALCOHOL)
        _logger.info("Total items: %s", len(food_items) + len(alcohol_items))

        catalog = merge_catalog(food_items, alcohol_items)
        return IngestionResult(
            snapshot=snapshot,
            food_count=len(food_items),
            alcohol_count=len(alcohol_items),
            catalog=catalog,
        )

    def update(self) -> IngestionResult:
        """Run the pipeline and replace the catalog artifact."""
        result = self.build()
        self.writer.write(result.catalog)
        _logger.info("Catalog updated: %s unique items", len(result.catalog))
        return result

    def clear(self) -> None:
        """Reset the catalog artifact to an empty list."""
        self.writer.clear()
        _logger.info("Catalog cleared")

    def _parse(self, path: Path, source_type: SourceType) -> list[FoodItem]:
        _logger.info("Parsing %s data from: %s", source_type.value, path.name)
        items = parse_source(self.file_system.read_text(path), source_type)
        _logger.info("Found %s %s items", len(items), source_type.value)
        return items
