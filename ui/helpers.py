"""Helper functions for UI - /api/plan client and itinerary formatting."""

from typing import Any

import httpx


def call_plan(
    backend_url: str,
    destinations: str,
    budget: float,
    people: int,
    trip_length: int,
    extra_details: str | None = None,
) -> dict[str, Any]:
    """Call /api/plan with trip parameters.

    Args:
        backend_url: Backend base URL (e.g. http://localhost:8000)
        destinations: Destination text
        budget: Total budget in USD
        people: Number of travelers
        trip_length: Trip length in days
        extra_details: Optional special requests

    Returns:
        Itinerary dict

    Raises:
        RuntimeError: With the backend's error message on a non-200 response
    """
    payload: dict[str, Any] = {
        "destinations": destinations,
        "budget": budget,
        "people": people,
        "tripLength": trip_length,
    }
    if extra_details:
        payload["extraDetails"] = extra_details

    response = httpx.post(
        f"{backend_url}/api/plan",
        json=payload,
        timeout=120.0,  # Model calls with web search can take a while
    )
    if response.status_code != 200:
        raise RuntimeError(extract_error_message(response))
    result: dict[str, Any] = response.json()
    return result


def extract_error_message(response: httpx.Response) -> str:
    """Pull the ``error`` field from a failed response, falling back to the status."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"Request failed with status {response.status_code}"


def format_money(amount: float | int | None) -> str:
    """Format a dollar amount, whole dollars when exact."""
    value = amount or 0
    if float(value).is_integer():
        return f"${value:,.0f}"
    return f"${value:,.2f}"


def build_cost_rows(itinerary: dict[str, Any]) -> list[dict[str, str]]:
    """Rows for the cost breakdown table, total last."""
    breakdown = itinerary.get("costBreakdown") or {}
    rows = []
    for key, label in (
        ("accommodation", "Accommodation"),
        ("activities", "Activities"),
        ("meals", "Meals"),
        ("transportation", "Transportation"),
        ("total", "Total"),
    ):
        rows.append({"category": label, "amount": format_money(breakdown.get(key))})
    return rows


def build_day_rows(day: dict[str, Any]) -> list[str]:
    """Markdown bullet lines for one day's activities then meals."""
    lines = []
    for activity in day.get("activities") or []:
        time_label = activity.get("time", "")
        name = activity.get("name", "Activity")
        line = f"**{time_label}** {name}" if time_label else f"**{name}**"
        if activity.get("location"):
            line += f" @ _{activity['location']}_"
        line += f" ({format_money(activity.get('cost'))})"
        lines.append(line)

    for meal in day.get("meals") or []:
        meal_type = meal.get("type", "Meal")
        restaurant = meal.get("restaurant", "Restaurant")
        lines.append(f"🍽️ {meal_type}: {restaurant} ({format_money(meal.get('estimatedCost'))})")
    return lines


def budget_status(itinerary: dict[str, Any]) -> tuple[str, str]:
    """Classify the trip against its budget limit.

    Returns:
        (level, message) where level is "success", "warning", or "error"
    """
    summary = itinerary.get("tripSummary") or {}
    remaining = summary.get("budgetRemaining")
    limit = summary.get("budgetLimit")

    if remaining is None or not limit:
        return ("warning", "Budget figures unavailable")
    if remaining < 0:
        return ("error", f"Over the budget limit by {format_money(-remaining)}")
    if remaining <= limit * 0.05:
        return ("warning", f"Within {format_money(remaining)} of the budget limit")
    return ("success", f"{format_money(remaining)} left under the budget limit")
