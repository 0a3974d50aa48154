"""Logging setup and structured planning-request logs."""

import logging
from typing import Any

from backend.app.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging once per process."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    # Quiet noisy libraries
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


class StructuredPlanLogger:
    """Structured logger for planning requests."""

    def log_outcome(
        self,
        policy: str,
        outcome: str,
        latency_ms: float,
        status_code: int = 200,
        error_reason: str | None = None,
        adjusted: list[str] | None = None,
    ) -> None:
        """Log one finished planning request with structured data."""
        log_data: dict[str, Any] = {
            "policy": policy,
            "outcome": outcome,
            "status_code": status_code,
            "latency_ms": round(latency_ms, 2),
        }

        if adjusted:
            log_data["adjusted"] = adjusted
        if error_reason:
            log_data["error_reason"] = error_reason

        log_msg = f"Trip plan: {policy} - {outcome}"

        if outcome == "success":
            logger.info(log_msg, extra={"structured": log_data})
        elif status_code < 500:
            logger.warning(log_msg, extra={"structured": log_data})
        else:
            logger.error(log_msg, extra={"structured": log_data})
