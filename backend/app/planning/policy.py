"""Budget policies - spending targets fixed per deployment."""

import math
from dataclasses import dataclass


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class BudgetPolicy:
    """Spending target applied to the prompt and to reconciliation.

    Attributes:
        name: Configuration key (``BUDGET_POLICY``)
        ceiling_ratio: Maximum spend as a fraction of the raw budget
        floor_ratio: Minimum spend as a fraction of the raw budget, if any
        transport_cap_ratio: Transportation cap as a fraction of the raw budget, if any
        reconcile_totals: Recompute derived totals from leaf costs
        web_search: Declare the web-search tool on the model call
        limit_is_raw_budget: Report the raw budget as ``budgetLimit``
    """

    name: str
    ceiling_ratio: float
    floor_ratio: float | None = None
    transport_cap_ratio: float | None = None
    reconcile_totals: bool = True
    web_search: bool = False
    limit_is_raw_budget: bool = False

    def spending_ceiling(self, budget: float) -> float:
        return budget * self.ceiling_ratio

    def spending_floor(self, budget: float) -> float | None:
        if self.floor_ratio is None:
            return None
        return budget * self.floor_ratio

    def budget_limit(self, budget: float) -> float:
        """Base that ``budgetRemaining`` is computed against."""
        if self.limit_is_raw_budget:
            return budget
        return self.spending_ceiling(budget)

    def transport_cap(self, budget: float) -> int | None:
        if self.transport_cap_ratio is None:
            return None
        return round_half_up(budget * self.transport_cap_ratio)


CONSERVATIVE = BudgetPolicy(
    name="conservative",
    ceiling_ratio=0.8,
    reconcile_totals=False,
    web_search=True,
)

EXACT_FIT = BudgetPolicy(
    name="exact_fit",
    ceiling_ratio=0.8,
)

LUXURY = BudgetPolicy(
    name="luxury",
    ceiling_ratio=0.95,
    floor_ratio=0.90,
    transport_cap_ratio=0.05,
    limit_is_raw_budget=True,
)

POLICIES: dict[str, BudgetPolicy] = {
    policy.name: policy for policy in (CONSERVATIVE, EXACT_FIT, LUXURY)
}


def get_policy(name: str) -> BudgetPolicy:
    """Look up a policy by its configuration key.

    Raises:
        KeyError: If the name is not a known policy
    """
    try:
        return POLICIES[name]
    except KeyError:
        raise KeyError(f"Unknown budget policy: {name!r}") from None
