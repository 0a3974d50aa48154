"""Unit tests for UI helper functions."""

from typing import Any
from unittest.mock import MagicMock, patch

import httpx
import pytest

from ui.helpers import (
    budget_status,
    build_cost_rows,
    build_day_rows,
    call_plan,
    extract_error_message,
    format_money,
)


@pytest.mark.parametrize(
    "amount, expected",
    [(0, "$0"), (None, "$0"), (1250, "$1,250"), (99.5, "$99.50"), (1234567.0, "$1,234,567")],
)
def test_format_money(amount: Any, expected: str) -> None:
    """Test whole and fractional dollar amounts."""
    assert format_money(amount) == expected


def test_build_cost_rows_orders_total_last() -> None:
    """Test the breakdown table rows."""
    rows = build_cost_rows(
        {"costBreakdown": {"accommodation": 300, "activities": 66, "meals": 80, "total": 446}}
    )

    assert [row["category"] for row in rows] == [
        "Accommodation",
        "Activities",
        "Meals",
        "Transportation",
        "Total",
    ]
    assert rows[3]["amount"] == "$0"
    assert rows[-1]["amount"] == "$446"


def test_build_cost_rows_without_breakdown() -> None:
    """Test a missing breakdown renders zeros."""
    assert all(row["amount"] == "$0" for row in build_cost_rows({}))


def test_build_day_rows() -> None:
    """Test activities are listed before meals."""
    day = {
        "activities": [
            {"time": "9:00 AM", "name": "Castle", "location": "Alfama", "cost": 30},
            {"name": "Sunset"},
        ],
        "meals": [{"type": "Dinner", "restaurant": "Tasca", "estimatedCost": 60}],
    }

    lines = build_day_rows(day)

    assert lines[0] == "**9:00 AM** Castle @ _Alfama_ ($30)"
    assert lines[1] == "**Sunset** ($0)"
    assert "Dinner: Tasca ($60)" in lines[2]


def test_build_day_rows_empty_day() -> None:
    """Test null lists are tolerated."""
    assert build_day_rows({"activities": None, "meals": None}) == []


@pytest.mark.parametrize(
    "summary, level",
    [
        ({"budgetRemaining": 321, "budgetLimit": 800}, "success"),
        ({"budgetRemaining": 40, "budgetLimit": 800}, "warning"),
        ({"budgetRemaining": -25, "budgetLimit": 800}, "error"),
        ({}, "warning"),
    ],
)
def test_budget_status(summary: dict[str, Any], level: str) -> None:
    """Test the budget banner level."""
    assert budget_status({"tripSummary": summary})[0] == level


def test_extract_error_message() -> None:
    """Test the error envelope is read, with a status fallback."""
    assert extract_error_message(httpx.Response(400, json={"error": "Please fill in"})) == (
        "Please fill in"
    )
    assert extract_error_message(httpx.Response(502, text="Bad gateway")) == (
        "Request failed with status 502"
    )


@patch("ui.helpers.httpx.post")
def test_call_plan_posts_camel_case_payload(mock_post: MagicMock) -> None:
    """Test the request body sent to the backend."""
    mock_post.return_value = httpx.Response(200, json={"tips": []})

    result = call_plan("http://backend", "Rome", 1500, 2, 4, extra_details="museums")

    assert result == {"tips": []}
    assert mock_post.call_args.args[0] == "http://backend/api/plan"
    assert mock_post.call_args.kwargs["json"] == {
        "destinations": "Rome",
        "budget": 1500,
        "people": 2,
        "tripLength": 4,
        "extraDetails": "museums",
    }


@patch("ui.helpers.httpx.post")
def test_call_plan_raises_backend_message(mock_post: MagicMock) -> None:
    """Test non-200 responses surface the backend's message."""
    mock_post.return_value = httpx.Response(
        500, json={"error": "Failed to parse trip data. Please try again."}
    )

    with pytest.raises(RuntimeError, match="Failed to parse trip data"):
        call_plan("http://backend", "Rome", 1500, 2, 4)

    assert "extraDetails" not in mock_post.call_args.kwargs["json"]
