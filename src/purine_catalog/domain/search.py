"""Models for ranked search results."""

from pydantic import BaseModel

from purine_catalog.domain.catalog import PurineLevel


class RankedMatch(BaseModel):
    """Single catalog entry picked by the ranking client."""

    name: str
    purine_level: PurineLevel


class RankedMatches(BaseModel):
    """Structured output for relevance ranking."""

    matches: list[RankedMatch]
