"""OpenAI Responses API client for search ranking."""

import json
from dataclasses import dataclass

from openai import AsyncOpenAI

from purine_catalog.services.search import RankingClient


@dataclass
class OpenAIRankingClient(RankingClient):
    """Ranking client backed by OpenAI Responses API."""

    client: AsyncOpenAI
    model: str
    reasoning_effort: str | None = None
    store: bool = False

    @classmethod
    def create(
        cls,
        api_key: str,
        model: str,
        reasoning_effort: str | None = None,
        store: bool = False,
    ) -> "OpenAIRankingClient":
        """Create an OpenAI ranking client."""
        return cls(
            client=AsyncOpenAI(api_key=api_key),
            model=model,
            reasoning_effort=reasoning_effort,
            store=store,
        )

    async def rank(
        self, *, prompt: str, schema: dict[str, object]
    ) -> dict[str, object]:
        """Call OpenAI Responses API with structured outputs."""
        request_payload: dict[str, object] = {
            "model": self.model,
            "input": [
                {
                    "role": "user",
                    "content": [{"type": "input_text", "text": prompt}],
                }
            ],
            "text": {
                "format": {
                    "type": "json_schema",
                    "name": "food_search",
                    "strict": True,
                    "schema": schema,
                }
            },
            "store": self.store,
        }
        if self.reasoning_effort:
            request_payload["reasoning"] = {"effort": self.reasoning_effort}

        response = await self.client.responses.create(**request_payload)
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return json.loads(output_text)
