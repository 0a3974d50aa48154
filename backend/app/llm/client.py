"""LLM completion clients for itinerary generation.

Security: API keys arrive through Settings at process start and are handed to
the client once; they are never read ad hoc or echoed to callers.
Each client makes exactly one call per request with SDK retries disabled.
"""

import json
import logging
from collections.abc import Iterable
from typing import Any, Protocol

import anthropic
import openai
from anthropic import AsyncAnthropic
from openai import AsyncOpenAI

from backend.app.config import Settings
from backend.app.errors import UpstreamError

logger = logging.getLogger(__name__)


class CompletionClient(Protocol):
    """Protocol for model collaborator implementations."""

    provider: str

    async def complete(self, *, system: str, prompt: str, web_search: bool = False) -> str:
        """Send one prompt and return the model's text.

        Args:
            system: System instruction
            prompt: Single user-role message
            web_search: Declare the web-search tool on the call

        Returns:
            Raw text of the completion

        Raises:
            UpstreamError: If the collaborator fails or answers with an error status
        """
        ...


def collect_text(blocks: Iterable[Any]) -> str:
    """Concatenate every ``text``-typed content block in order."""
    return "".join(block.text for block in blocks if getattr(block, "type", None) == "text")


def web_search_tool(max_uses: int) -> dict[str, Any]:
    """Anthropic server-side web-search tool declaration."""
    return {"type": "web_search_20250305", "name": "web_search", "max_uses": max_uses}


class AnthropicClient:
    """Anthropic Messages API client."""

    provider = "anthropic"

    def __init__(
        self,
        api_key: str,
        model: str = "claude-sonnet-4-20250514",
        max_tokens: int = 4000,
        web_search_max_uses: int = 5,
    ):
        """Initialize Anthropic client.

        Args:
            api_key: Anthropic API key (from Settings)
            model: Model identifier
            max_tokens: Token budget per completion
            web_search_max_uses: Cap on web searches when the tool is declared
        """
        self.api_key = api_key
        # SDK clients refuse empty credentials; complete() reports 401 instead
        self.client = AsyncAnthropic(api_key=api_key, max_retries=0) if api_key else None
        self.model = model
        self.max_tokens = max_tokens
        self.web_search_max_uses = web_search_max_uses

    async def complete(self, *, system: str, prompt: str, web_search: bool = False) -> str:
        if not self.api_key or self.client is None:
            raise UpstreamError(401, "ANTHROPIC_API_KEY is not configured")

        kwargs: dict[str, Any] = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "system": system,
            "messages": [{"role": "user", "content": prompt}],
        }
        if web_search:
            kwargs["tools"] = [web_search_tool(self.web_search_max_uses)]

        try:
            response = await self.client.messages.create(**kwargs)
        except anthropic.APIStatusError as e:
            raise UpstreamError(e.status_code, f"Anthropic API error: {e.message}") from e
        except anthropic.APIError as e:
            raise UpstreamError(None, f"Anthropic request failed: {e}") from e

        return collect_text(response.content)


class OpenAIClient:
    """OpenAI chat-completions client."""

    provider = "openai"

    def __init__(self, api_key: str, model: str = "gpt-4o-mini", max_tokens: int = 4000):
        """Initialize OpenAI client.

        Args:
            api_key: OpenAI API key (from Settings)
            model: Model name to use (default: gpt-4o-mini for cost efficiency)
            max_tokens: Token budget per completion
        """
        self.api_key = api_key
        self.client = AsyncOpenAI(api_key=api_key, max_retries=0) if api_key else None
        self.model = model
        self.max_tokens = max_tokens

    async def complete(self, *, system: str, prompt: str, web_search: bool = False) -> str:
        if not self.api_key or self.client is None:
            raise UpstreamError(401, "OPENAI_API_KEY is not configured")
        if web_search:
            logger.debug("Web search is not declared on OpenAI chat completions; ignoring")

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                max_tokens=self.max_tokens,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": prompt},
                ],
            )
        except openai.APIStatusError as e:
            raise UpstreamError(e.status_code, f"OpenAI API error: {e.message}") from e
        except openai.APIError as e:
            raise UpstreamError(None, f"OpenAI request failed: {e}") from e

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""


SAMPLE_ITINERARY: dict[str, Any] = {
    "tripSummary": {
        "destinations": "Sample City",
        "totalDays": 2,
        "travelers": 2,
        "rooms": 1,
        "totalEstimatedCost": 0,
        "budgetRemaining": 0,
        "budgetLimit": 0,
    },
    "hotels": [
        {
            "name": "Sample Central Hotel",
            "location": "Old Town",
            "pricePerNight": 180,
            "totalNights": 1,
            "totalCost": 180,
            "rating": "4.3/5",
            "highlights": ["Central Location", "Free Breakfast"],
            "checkIn": "Day 1",
            "checkOut": "Day 2",
        }
    ],
    "dailyItinerary": [
        {
            "day": 1,
            "title": "Arrival & Old Town",
            "activities": [
                {"time": "2:00 PM", "name": "Check into Hotel", "cost": 0, "duration": "1 hour"},
                {"time": "4:00 PM", "name": "Old Town Walking Tour", "cost": 40, "duration": "2 hours"},
            ],
            "meals": [
                {"type": "Dinner", "restaurant": "Harbor Bistro", "priceRange": "$$", "estimatedCost": 90}
            ],
            "dayTotal": 0,
        },
        {
            "day": 2,
            "title": "Museums & Departure",
            "activities": [
                {"time": "10:00 AM", "name": "City Museum", "cost": 30, "duration": "2 hours"}
            ],
            "meals": [
                {"type": "Lunch", "restaurant": "Market Hall", "priceRange": "$", "estimatedCost": 45}
            ],
            "dayTotal": 0,
        },
    ],
    "costBreakdown": {
        "accommodation": 180,
        "activities": 70,
        "meals": 135,
        "transportation": 60,
        "total": 0,
    },
    "tips": ["Buy a day transit pass", "Museums are free on the first Sunday"],
}


class DeterministicStubClient:
    """Deterministic stub client for local development and tests (no API key required)."""

    provider = "stub"

    async def complete(self, *, system: str, prompt: str, web_search: bool = False) -> str:
        """Return a fenced sample itinerary whose totals are left for reconciliation."""
        return "```json\n" + json.dumps(SAMPLE_ITINERARY, indent=2) + "\n```"


def build_llm_client(settings: Settings) -> CompletionClient:
    """Factory function to get the configured completion client.

    Returns:
        Client for ``settings.llm_provider``
    """
    if settings.llm_provider == "stub":
        logger.warning("LLM_PROVIDER=stub, serving the deterministic sample itinerary")
        return DeterministicStubClient()

    if settings.llm_provider == "openai":
        logger.info(f"Using OpenAI client ({settings.openai_model})")
        return OpenAIClient(
            api_key=settings.openai_api_key.get_secret_value(),
            model=settings.openai_model,
            max_tokens=settings.max_tokens,
        )

    if not settings.anthropic_api_key.get_secret_value():
        logger.warning("No Anthropic API key configured; planning requests will fail with 401")
    logger.info(f"Using Anthropic client ({settings.anthropic_model})")
    return AnthropicClient(
        api_key=settings.anthropic_api_key.get_secret_value(),
        model=settings.anthropic_model,
        max_tokens=settings.max_tokens,
        web_search_max_uses=settings.web_search_max_uses,
    )
