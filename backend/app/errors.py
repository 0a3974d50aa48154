"""Planner error taxonomy.

Every error carries the HTTP status it maps to and a short public message.
Diagnostic detail stays in ``detail`` and is only ever logged.
"""


class PlannerError(Exception):
    """Base class for request-terminating planner failures."""

    status_code = 500
    message = "Server error. Please try again."

    def __init__(self, detail: str | None = None, *, message: str | None = None) -> None:
        super().__init__(detail or message or self.message)
        self.detail = detail
        if message is not None:
            self.message = message


class ValidationError(PlannerError):
    """Required trip parameters missing or unusable."""

    status_code = 400
    message = "Please fill in all required fields"


class UpstreamError(PlannerError):
    """The model collaborator answered with a non-success status or was unreachable."""

    message = "Failed to plan trip. Please try again."

    def __init__(self, status_code: int | None = None, detail: str | None = None) -> None:
        super().__init__(detail)
        self.status_code = status_code or 500


class ExtractionError(PlannerError):
    """No JSON object could be located in the model's text."""

    message = "Could not generate trip plan. Please try again."


class NoJsonFound(ExtractionError):
    """Opening or closing brace missing from the model output."""


class ParseError(PlannerError):
    """JSON located but unusable."""

    message = "Failed to parse trip data. Please try again."


class JsonParseError(ParseError):
    """The sliced text is not a valid JSON object."""


class UnhandledError(PlannerError):
    """Anything not covered above."""
