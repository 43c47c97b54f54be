"""Free-text search over the food catalog."""

import json
import logging
from dataclasses import dataclass
from typing import Protocol

from purine_catalog.domain.catalog import Catalog, FoodItem, matches_level
from purine_catalog.domain.search import RankedMatches

RANKING_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "matches": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "purine_level": {
                        "type": "string",
                        "enum": ["Low", "Medium", "High", "Very High"],
                    },
                },
                "required": ["name", "purine_level"],
                "additionalProperties": False,
            },
        }
    },
    "required": ["matches"],
    "additionalProperties": False,
}

RANKING_PROMPT = (
    "You identify food items from a given list that best match a user's search "
    "query. Matching should handle natural language queries and minor typos.\n\n"
    "The food list is provided as a JSON string:\n{food_list}\n\n"
    'The user\'s search query is:\n"{query}"\n\n'
    "Return every relevant food item from the list with its name and "
    "purine_level, exactly as written in the list. "
    "If nothing is relevant, return an empty list."
)

_logger = logging.getLogger(__name__)


class RankingClient(Protocol):
    """Interface for an LLM that picks relevant catalog entries."""

    async def rank(
        self, *, prompt: str, schema: dict[str, object]
    ) -> dict[str, object]:
        """Return structured ranking output."""


@dataclass
class CatalogSearchService:
    """Search with optional LLM ranking and a substring fallback."""

    catalog: Catalog
    ranking_client: RankingClient | None = None
    limit: int = 50

    async def search(
        self, query: str | None, level: str | None = None
    ) -> list[FoodItem]:
        """Search the catalog, then apply the purine-level filter.

        An empty query browses the whole catalog; only query results are capped.
        """
        if not query:
            return self.catalog.filter_by_level(level)

        foods = await self._ranked(query) if self.ranking_client else None
        if foods is None:
            foods = self.substring_search(query)
        if level and level.lower() != "all":
            foods = [food for food in foods if matches_level(food, level)]
        return foods[: self.limit]

    def substring_search(self, query: str) -> list[FoodItem]:
        """Case-insensitive name containment, in catalog order."""
        needle = query.lower()
        return [item for item in self.catalog if needle in item.name.lower()]

    async def _ranked(self, query: str) -> list[FoodItem] | None:
        """Ask the ranking client; None means fall back to substring search."""
        food_list = json.dumps(
            [
                {"name": item.name, "purine_level": item.purine_level.value}
                for item in self.catalog
            ],
            ensure_ascii=False,
        )
        prompt = RANKING_PROMPT.format(food_list=food_list, query=query)
        try:
            raw = await self.ranking_client.rank(prompt=prompt, schema=RANKING_SCHEMA)
            ranked = RankedMatches.model_validate(raw)
        except Exception as exc:
            _logger.warning("Ranked search failed, using substring search: %s", exc)
            return None

        foods: list[FoodItem] = []
        seen: set[str] = set()
        for match in ranked.matches:
            food = self.catalog.find(match.name)
            if food is None or food.name in seen:
                continue
            seen.add(food.name)
            foods.append(food)
        return foods
