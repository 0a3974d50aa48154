"""Budget reconciliation - recompute derived totals from leaf costs.

The model's own totals are never trusted: day totals, the cost-breakdown total,
and the trip-summary figures are replaced unconditionally. The spending
ceiling and floor are not enforced here.
"""

from backend.app.models.itinerary import CostBreakdown, DayPlan, Itinerary, TripSummary
from backend.app.planning.policy import BudgetPolicy


def day_total(day: DayPlan) -> int | float:
    """Sum of activity costs plus meal estimated costs for one day."""
    return sum(activity.cost for activity in day.activities) + sum(
        meal.estimated_cost for meal in day.meals
    )


def breakdown_total(breakdown: CostBreakdown) -> int | float:
    """Sum of the four cost categories."""
    return (
        breakdown.accommodation
        + breakdown.activities
        + breakdown.meals
        + breakdown.transportation
    )


def reconcile_days(days: list[DayPlan]) -> list[DayPlan]:
    """Return days with ``dayTotal`` recomputed."""
    return [day.model_copy(update={"day_total": day_total(day)}) for day in days]


def reconcile_breakdown(breakdown: CostBreakdown, transport_cap: int | None = None) -> CostBreakdown:
    """Return the breakdown with transportation clamped (if capped) and total recomputed."""
    update: dict[str, int | float] = {}
    if transport_cap is not None and breakdown.transportation > transport_cap:
        update["transportation"] = transport_cap

    clamped = breakdown.model_copy(update=update)
    return clamped.model_copy(update={"total": breakdown_total(clamped)})


def reconcile_summary(summary: TripSummary, total: int | float, budget_limit: float) -> TripSummary:
    """Return the summary carrying the recomputed total and remaining budget."""
    return summary.model_copy(
        update={
            "total_estimated_cost": total,
            "budget_limit": budget_limit,
            "budget_remaining": budget_limit - total,
        }
    )


def reconcile(itinerary: Itinerary, policy: BudgetPolicy, budget: float) -> Itinerary:
    """Make every derived total in the itinerary consistent with its leaf costs.

    Args:
        itinerary: Parsed model output
        policy: Deployment budget policy (transport cap and budget limit)
        budget: Raw requested budget

    Returns:
        New Itinerary; the input is not modified
    """
    days = reconcile_days(itinerary.daily_itinerary)
    breakdown = reconcile_breakdown(itinerary.cost_breakdown, policy.transport_cap(budget))
    summary = reconcile_summary(
        itinerary.trip_summary, breakdown.total, policy.budget_limit(budget)
    )

    return itinerary.model_copy(
        update={
            "daily_itinerary": days,
            "cost_breakdown": breakdown,
            "trip_summary": summary,
        }
    )


def changed_totals(before: Itinerary, after: Itinerary) -> list[str]:
    """List the derived fields whose values the reconciliation changed.

    Args:
        before: Itinerary as produced by the model
        after: Reconciled itinerary

    Returns:
        Field names (JSON spelling), one entry per changed value
    """
    changed: list[str] = []

    for old_day, new_day in zip(before.daily_itinerary, after.daily_itinerary, strict=True):
        if old_day.day_total != new_day.day_total:
            changed.append("dayTotal")

    old_breakdown, new_breakdown = before.cost_breakdown, after.cost_breakdown
    if old_breakdown.transportation != new_breakdown.transportation:
        changed.append("transportation")
    if old_breakdown.total != new_breakdown.total:
        changed.append("total")

    old_summary, new_summary = before.trip_summary, after.trip_summary
    if old_summary.total_estimated_cost != new_summary.total_estimated_cost:
        changed.append("totalEstimatedCost")
    if old_summary.budget_remaining != new_summary.budget_remaining:
        changed.append("budgetRemaining")

    return changed
