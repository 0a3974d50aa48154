"""Request validation for trip planning."""

from typing import Any

from pydantic import ValidationError as SchemaError

from backend.app.errors import ValidationError
from backend.app.models.trip import TripRequest

REQUIRED_FIELDS = ("destinations", "budget", "people", "tripLength")


def validate_trip_request(body: Any) -> TripRequest:
    """Validate a raw request body into a TripRequest.

    Args:
        body: Decoded JSON request body

    Returns:
        TripRequest with typed fields

    Raises:
        ValidationError: If a required field is missing, falsy, or not coercible
    """
    if not isinstance(body, dict):
        raise ValidationError("request body is not a JSON object")

    missing = [field for field in REQUIRED_FIELDS if not body.get(field)]
    if missing:
        raise ValidationError(f"missing required fields: {', '.join(missing)}")

    try:
        return TripRequest.model_validate(body)
    except SchemaError as e:
        raise ValidationError(f"invalid trip parameters: {e.error_count()} error(s)") from e
