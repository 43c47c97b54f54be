"""JSON file storage for the generated catalog."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from purine_catalog.domain.catalog import Catalog, Category, FoodItem, PurineLevel
from purine_catalog.services.ingestion import CatalogWriter

_logger = logging.getLogger(__name__)


class CatalogRecord(BaseModel):
    """Serialized catalog entry."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    purines: NonNegativeInt | None
    category: Category
    purine_level: PurineLevel = Field(alias="purineLevel")

    def to_item(self) -> FoodItem:
        return FoodItem(
            name=self.name,
            purines=self.purines,
            category=self.category,
            purine_level=self.purine_level,
        )


def render_catalog(catalog: Catalog) -> str:
    """Render a catalog as deterministic JSON text."""
    records = [item.to_record() for item in catalog]
    return json.dumps(records, ensure_ascii=False, indent=2) + "\n"


@dataclass
class JsonCatalogStore(CatalogWriter):
    """Reads and writes the catalog as a JSON array."""

    path: Path

    def write(self, catalog: Catalog) -> None:
        """Replace the catalog file."""
        self._write_text(render_catalog(catalog))
        _logger.info("Wrote %s items to %s", len(catalog), self.path)

    def clear(self) -> None:
        """Reset the catalog file to an empty array."""
        self._write_text(render_catalog(Catalog()))

    def load(self) -> Catalog:
        """Load the catalog, returning an empty one when the file is missing."""
        if not self.path.exists():
            _logger.warning("Catalog file %s not found, using empty catalog", self.path)
            return Catalog()
        raw = json.loads(self.path.read_text(encoding="utf-8"))
        items = tuple(CatalogRecord.model_validate(record).to_item() for record in raw)
        return Catalog(items=items)

    def _write_text(self, content: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(content, encoding="utf-8", newline="\n")
