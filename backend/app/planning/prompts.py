"""Prompt construction for the itinerary model call."""

from backend.app.models.trip import TripRequest
from backend.app.planning.policy import BudgetPolicy

SYSTEM_INSTRUCTIONS: dict[str, str] = {
    "conservative": (
        "You are an expert travel planner. Build detailed, realistic trip itineraries with "
        "real hotels, restaurants, and attractions at accurate prices. Keep every cost within "
        "the budget limit and make sure all costs add up. Respond with ONLY valid JSON, "
        "no markdown or extra text."
    ),
    "exact_fit": (
        "You are a travel planner. Use real hotels, real restaurants, and real attractions "
        "with realistic prices. Your arithmetic must be exact: costBreakdown.total must equal "
        "accommodation + activities + meals + transportation. Respond with ONLY valid JSON."
    ),
    "luxury": (
        "You are a luxury travel planner. Spend between 90% and 95% of the total budget on "
        "high-end hotels, upscale restaurants, and premium experiences; never come in under "
        "the minimum. Transportation is local only (taxis, metro). Respond with ONLY valid JSON."
    ),
}


def _money(amount: float) -> str:
    if float(amount).is_integer():
        return f"${amount:,.0f}"
    return f"${amount:,.2f}"


def _number(value: float) -> int | float:
    return int(value) if float(value).is_integer() else round(value, 2)


def system_instruction(policy: BudgetPolicy) -> str:
    """System instruction string for the policy."""
    return SYSTEM_INSTRUCTIONS[policy.name]


def _trip_details(request: TripRequest, policy: BudgetPolicy) -> list[str]:
    budget = request.budget
    ceiling = policy.spending_ceiling(budget)
    floor = policy.spending_floor(budget)

    lines = ["TRIP DETAILS:", f"- Destination(s): {request.destinations}"]
    if floor is None:
        lines.append(
            f"- Budget Limit: {_money(ceiling)} (stay under this; it is "
            f"{policy.ceiling_ratio:.0%} of the {_money(budget)} total budget)"
        )
    else:
        lines.append(f"- Total Budget: {_money(budget)}")
        lines.append(
            f"- MUST SPEND: between {_money(floor)} and {_money(ceiling)} "
            f"({policy.floor_ratio:.0%}-{policy.ceiling_ratio:.0%} of budget)"
        )
    lines.append(f"- Travelers: {request.people} people")
    lines.append(f"- Trip Length: {request.trip_length} days")
    lines.append(f"- Rooms Needed: {request.rooms_needed} (2 people per room)")
    if request.extra_details:
        lines.append(f"- Special Requests: {request.extra_details}")
    return lines


def _rules(request: TripRequest, policy: BudgetPolicy) -> list[str]:
    budget = request.budget
    rooms = request.rooms_needed

    if policy.name == "luxury":
        cap = policy.transport_cap(budget)
        return [
            "BUDGET RULES:",
            "1. Choose 4-5 star hotels, fine dining, and premium private experiences.",
            f"2. Hotels ~40-50% of budget ({_money(budget * 0.45)}).",
            f"3. Meals ~25-30% of budget ({_money(budget * 0.27)}).",
            f"4. Activities ~20-25% of budget ({_money(budget * 0.22)}).",
            f"5. Transportation ~5% of budget ({_money(cap or 0)}), local taxis/metro only.",
            f"6. Hotel totalCost = pricePerNight x nights x {rooms} rooms.",
        ]

    rules = [
        "MATH RULES:",
        f"1. Hotel totalCost = pricePerNight x totalNights x {rooms} rooms = accommodation.",
        "2. activities = sum of ALL activity costs from ALL days.",
        "3. meals = sum of ALL meal costs from ALL days.",
        "4. transportation = estimate for local transport.",
        "5. total = accommodation + activities + meals + transportation.",
        "6. Each dayTotal = that day's activity costs + meal costs.",
        f"7. Costs are for all {request.people} travelers.",
    ]
    if policy.name == "conservative":
        rules.append(
            "8. Look up current prices for hotels, restaurants, and attractions; "
            "group nearby attractions on the same day."
        )
    return rules


def _response_shape(request: TripRequest, policy: BudgetPolicy) -> str:
    budget_limit = policy.budget_limit(request.budget)
    nights = max(request.trip_length - 1, 0)
    return f"""{{
  "tripSummary": {{
    "destinations": "{request.destinations}",
    "totalDays": {request.trip_length},
    "travelers": {request.people},
    "rooms": {request.rooms_needed},
    "totalEstimatedCost": 0,
    "budgetRemaining": 0,
    "budgetLimit": {_number(budget_limit)}
  }},
  "hotels": [
    {{
      "name": "Hotel Name",
      "location": "Area",
      "pricePerNight": 0,
      "totalNights": {nights},
      "totalCost": 0,
      "rating": "4.5/5",
      "highlights": ["Feature"],
      "checkIn": "Day 1",
      "checkOut": "Day {request.trip_length}"
    }}
  ],
  "dailyItinerary": [
    {{
      "day": 1,
      "title": "Day Title",
      "activities": [
        {{
          "time": "2:00 PM",
          "name": "Activity",
          "description": "Description",
          "location": "Location",
          "cost": 0,
          "duration": "2 hours"
        }}
      ],
      "meals": [
        {{
          "type": "Dinner",
          "restaurant": "Restaurant Name",
          "cuisine": "Cuisine",
          "priceRange": "$$",
          "estimatedCost": 0,
          "location": "Area"
        }}
      ],
      "dayTotal": 0
    }}
  ],
  "costBreakdown": {{
    "accommodation": 0,
    "activities": 0,
    "meals": 0,
    "transportation": 0,
    "total": 0
  }},
  "tips": ["Tip"]
}}"""


def build_prompt(request: TripRequest, policy: BudgetPolicy) -> str:
    """Render the user prompt for a trip request under a policy.

    Args:
        request: Validated trip parameters
        policy: Deployment budget policy

    Returns:
        Prompt text asking for a single JSON itinerary object
    """
    lines = ["Plan a detailed vacation.", ""]
    lines.extend(_trip_details(request, policy))
    lines.append("")
    lines.extend(_rules(request, policy))
    lines.append("")
    lines.append("Respond with ONLY this JSON structure, filled in with real values:")
    lines.append("")
    lines.append(_response_shape(request, policy))
    lines.append("")
    lines.append("Verify the math before responding. No markdown, no explanation.")
    return "\n".join(lines)
