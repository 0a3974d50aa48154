"""Shared pytest fixtures for all test suites."""

from typing import Any

import pytest

from backend.app.config import Settings


class FakeCompletionClient:
    """Completion client returning canned text and recording every call."""

    provider = "fake"

    def __init__(self, text: str = "", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def complete(self, *, system: str, prompt: str, web_search: bool = False) -> str:
        self.calls.append({"system": system, "prompt": prompt, "web_search": web_search})
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def make_fake_client() -> type[FakeCompletionClient]:
    """Factory for canned completion clients."""
    return FakeCompletionClient


@pytest.fixture
def trip_body() -> dict[str, Any]:
    """Valid request body."""
    return {
        "destinations": "Lisbon, Porto",
        "budget": 1000,
        "people": 3,
        "tripLength": 2,
        "extraDetails": "vegetarian",
    }


@pytest.fixture
def model_output() -> dict[str, Any]:
    """Model output with deliberately wrong totals."""
    return {
        "tripSummary": {
            "destinations": "Lisbon, Porto",
            "totalDays": 2,
            "travelers": 3,
            "rooms": 2,
            "totalEstimatedCost": 10,
            "budgetRemaining": 790,
            "budgetLimit": 800,
        },
        "hotels": [{"name": "Hotel Avenida", "pricePerNight": 120, "totalNights": 1}],
        "dailyItinerary": [
            {
                "day": 1,
                "title": "Alfama",
                "activities": [{"name": "Castle", "cost": 45}, {"name": "Tram", "cost": 9}],
                "meals": [{"type": "Dinner", "restaurant": "Tasca", "estimatedCost": 75}],
                "dayTotal": 1,
            },
            {
                "day": 2,
                "title": "Porto",
                "activities": [{"name": "Port cellar", "cost": 60}],
                "meals": [],
                "dayTotal": 2,
            },
        ],
        "costBreakdown": {
            "accommodation": 240,
            "activities": 114,
            "meals": 75,
            "transportation": 50,
            "total": 3,
        },
        "tips": ["Book cellars ahead"],
    }


@pytest.fixture
def stub_settings() -> Settings:
    """Settings that never touch a real provider."""
    return Settings(llm_provider="stub", budget_policy="exact_fit")
