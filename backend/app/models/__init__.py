"""Models package - re-exports for convenience."""

from backend.app.models.itinerary import (
    Activity,
    CostBreakdown,
    DayPlan,
    Hotel,
    Itinerary,
    Meal,
    TripSummary,
)
from backend.app.models.trip import TripRequest, rooms_needed

__all__ = [
    # Request
    "TripRequest",
    "rooms_needed",
    # Itinerary
    "Itinerary",
    "TripSummary",
    "Hotel",
    "DayPlan",
    "Activity",
    "Meal",
    "CostBreakdown",
]
