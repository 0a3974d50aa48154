"""Trip planning pipeline.

validate -> prompt -> model call -> extract -> reconcile -> response dict.
Every failure terminates the request as a PlannerError; nothing is retried.
"""

import logging
import time
from typing import Any

from backend.app.errors import PlannerError, UnhandledError
from backend.app.llm.client import CompletionClient
from backend.app.llm.extract import extract_json, parse_itinerary
from backend.app.planning.policy import BudgetPolicy
from backend.app.planning.prompts import build_prompt, system_instruction
from backend.app.planning.validator import validate_trip_request
from backend.app.utils.logging import StructuredPlanLogger
from backend.app.utils.metrics import PrometheusPlanMetrics
from backend.app.verification.reconciler import changed_totals, reconcile

logger = logging.getLogger(__name__)


class TripPlanner:
    """Runs one planning request end to end."""

    def __init__(
        self,
        client: CompletionClient,
        policy: BudgetPolicy,
        plan_logger: StructuredPlanLogger | None = None,
        metrics: PrometheusPlanMetrics | None = None,
    ) -> None:
        """Initialize planner.

        Args:
            client: Model collaborator
            policy: Deployment budget policy
            plan_logger: Structured outcome logger
            metrics: Prometheus metrics sink
        """
        self.client = client
        self.policy = policy
        self._plan_logger = plan_logger or StructuredPlanLogger()
        self._metrics = metrics or PrometheusPlanMetrics()

    async def plan(self, body: Any) -> dict[str, Any]:
        """Produce a reconciled itinerary for a raw request body.

        Args:
            body: Decoded JSON request body

        Returns:
            Itinerary as a JSON-ready dict

        Raises:
            PlannerError: On any failure, already classified for the HTTP layer
        """
        started = time.perf_counter()
        try:
            response, adjusted = await self._run(body)
        except PlannerError as e:
            self._finish(started, type(e).__name__, e.status_code, e.detail)
            raise
        except Exception as e:
            logger.exception("Unhandled error while planning trip")
            self._finish(started, "UnhandledError", 500, f"{type(e).__name__}: {e}")
            raise UnhandledError(str(e)) from e

        self._finish(started, "success", 200, adjusted=adjusted)
        return response

    async def _run(self, body: Any) -> tuple[dict[str, Any], list[str]]:
        request = validate_trip_request(body)
        logger.info(
            f"Planning trip: destinations={request.destinations!r}, "
            f"people={request.people}, days={request.trip_length}, policy={self.policy.name}"
        )

        raw_text = await self._complete(build_prompt(request, self.policy))
        itinerary = parse_itinerary(extract_json(raw_text))

        if not self.policy.reconcile_totals:
            return itinerary.to_response(), []

        reconciled = reconcile(itinerary, self.policy, request.budget)
        adjusted = changed_totals(itinerary, reconciled)
        if adjusted:
            logger.info(f"Corrected model arithmetic: {', '.join(sorted(set(adjusted)))}")
            self._metrics.inc_adjustments(adjusted)
        return reconciled.to_response(), adjusted

    async def _complete(self, prompt: str) -> str:
        started = time.perf_counter()
        outcome = "error"
        try:
            text = await self.client.complete(
                system=system_instruction(self.policy),
                prompt=prompt,
                web_search=self.policy.web_search,
            )
            outcome = "success"
            return text
        finally:
            latency_ms = (time.perf_counter() - started) * 1000
            self._metrics.record_upstream_latency(self.client.provider, outcome, latency_ms)

    def _finish(
        self,
        started: float,
        outcome: str,
        status_code: int,
        error_reason: str | None = None,
        adjusted: list[str] | None = None,
    ) -> None:
        latency_ms = (time.perf_counter() - started) * 1000
        self._metrics.inc_request(self.policy.name, outcome)
        self._plan_logger.log_outcome(
            policy=self.policy.name,
            outcome=outcome,
            latency_ms=latency_ms,
            status_code=status_code,
            error_reason=error_reason,
            adjusted=adjusted,
        )
