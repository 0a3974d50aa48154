"""Prometheus metrics for planning requests."""

from prometheus_client import Counter, Histogram

plan_requests_total = Counter(
    "plan_requests_total",
    "Total planning requests by outcome",
    ["policy", "outcome"],
)

upstream_latency_ms = Histogram(
    "upstream_latency_ms",
    "Model collaborator latency in milliseconds",
    ["provider", "outcome"],
    buckets=[500, 1000, 2000, 5000, 10000, 20000, 40000, 80000],
)

reconciliation_adjustments_total = Counter(
    "reconciliation_adjustments_total",
    "Model-supplied totals replaced during reconciliation",
    ["field"],
)


class PrometheusPlanMetrics:
    """Prometheus-based planning metrics implementation."""

    def inc_request(self, policy: str, outcome: str) -> None:
        """Increment request counter."""
        plan_requests_total.labels(policy=policy, outcome=outcome).inc()

    def record_upstream_latency(self, provider: str, outcome: str, latency_ms: float) -> None:
        """Record collaborator call latency."""
        upstream_latency_ms.labels(provider=provider, outcome=outcome).observe(latency_ms)

    def inc_adjustments(self, fields: list[str]) -> None:
        """Increment the adjustment counter once per replaced value."""
        for field in fields:
            reconciliation_adjustments_total.labels(field=field).inc()
