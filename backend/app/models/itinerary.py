"""Itinerary models - the model-generated trip plan returned to the caller.

Field names follow the camelCase JSON contract through an alias generator.
Unknown keys produced by the model are kept (``extra="allow"``) so the response
carries them through untouched.

Only cost figures are validated strictly; they feed reconciliation. Descriptive
fields accept any JSON value and are passed through as the model wrote them.
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, JsonValue
from pydantic.alias_generators import to_camel


def _zero_if_missing(value: Any) -> Any:
    return 0 if value is None else value


def _empty_if_missing(value: Any) -> Any:
    return [] if value is None else value


def _blank_if_missing(value: Any) -> Any:
    return {} if value is None else value


# Leaf or derived cost figure; null counts as zero
Cost = Annotated[int | float, BeforeValidator(_zero_if_missing)]

# Descriptive list; null counts as empty
Details = Annotated[list[JsonValue], BeforeValidator(_empty_if_missing)]


class ItineraryModel(BaseModel):
    """Base for all itinerary payload models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        allow_inf_nan=False,
    )


class Activity(ItineraryModel):
    """Single scheduled activity."""

    time: JsonValue = None
    name: JsonValue = None
    description: JsonValue = None
    location: JsonValue = None
    cost: Cost = 0
    duration: JsonValue = None


class Meal(ItineraryModel):
    """Single meal reservation."""

    meal_type: JsonValue = Field(None, alias="type")
    restaurant: JsonValue = None
    cuisine: JsonValue = None
    price_range: JsonValue = None
    estimated_cost: Cost = 0
    location: JsonValue = None


class DayPlan(ItineraryModel):
    """Plan for one day of the trip."""

    day: JsonValue = None
    title: JsonValue = None
    activities: Annotated[list[Activity], BeforeValidator(_empty_if_missing)] = Field(
        default_factory=list
    )
    meals: Annotated[list[Meal], BeforeValidator(_empty_if_missing)] = Field(
        default_factory=list
    )
    day_total: Cost = 0


class Hotel(ItineraryModel):
    """Hotel stay."""

    name: JsonValue = None
    location: JsonValue = None
    price_per_night: JsonValue = None
    total_nights: JsonValue = None
    total_cost: JsonValue = None
    rating: JsonValue = None
    highlights: Details = Field(default_factory=list)
    check_in: JsonValue = None
    check_out: JsonValue = None


class CostBreakdown(ItineraryModel):
    """Trip cost by category."""

    accommodation: Cost = 0
    activities: Cost = 0
    meals: Cost = 0
    transportation: Cost = 0
    total: Cost = 0


class TripSummary(ItineraryModel):
    """Headline figures for the trip."""

    destinations: JsonValue = None
    total_days: JsonValue = None
    travelers: JsonValue = None
    rooms: JsonValue = None
    total_estimated_cost: Cost = 0
    budget_remaining: Cost = 0
    budget_limit: Cost = 0


class Itinerary(ItineraryModel):
    """Complete trip plan."""

    trip_summary: Annotated[TripSummary, BeforeValidator(_blank_if_missing)] = Field(
        default_factory=TripSummary
    )
    hotels: Annotated[list[Hotel], BeforeValidator(_empty_if_missing)] = Field(
        default_factory=list
    )
    daily_itinerary: Annotated[list[DayPlan], BeforeValidator(_empty_if_missing)] = Field(
        default_factory=list
    )
    cost_breakdown: Annotated[CostBreakdown, BeforeValidator(_blank_if_missing)] = Field(
        default_factory=CostBreakdown
    )
    tips: Details = Field(default_factory=list)

    def to_response(self) -> dict[str, Any]:
        """Serialize with the camelCase keys the model was asked for.

        Only keys the model produced (plus recomputed totals) are emitted.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
