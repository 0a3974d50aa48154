"""Response extraction - isolate and parse the JSON object in model text."""

import json
import re
from typing import Any

from pydantic import ValidationError as SchemaError

from backend.app.errors import JsonParseError, NoJsonFound
from backend.app.models.itinerary import Itinerary

_CODE_FENCE = re.compile(r"```(?:json)?\s*", re.IGNORECASE)


def _reject_non_finite(constant: str) -> Any:
    raise JsonParseError(f"non-finite number {constant} in model output")


def strip_code_fences(text: str) -> str:
    """Remove fenced-code-block delimiters (with or without a json tag)."""
    return _CODE_FENCE.sub("", text)


def extract_json_block(raw_text: str) -> str:
    """Slice from the first ``{`` to the last ``}`` inclusive.

    Raises:
        NoJsonFound: If either brace is missing
    """
    text = strip_code_fences(raw_text.strip())
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        raise NoJsonFound(f"no JSON object in model output ({len(raw_text)} chars)")
    return text[start : end + 1]


def extract_json(raw_text: str) -> dict[str, Any]:
    """Extract and parse the JSON object embedded in model output.

    Args:
        raw_text: Concatenated text segments from the model

    Returns:
        Parsed JSON object

    Raises:
        NoJsonFound: If no brace-delimited block exists
        JsonParseError: If the block is not valid JSON or contains NaN or Infinity
    """
    block = extract_json_block(raw_text)
    try:
        payload = json.loads(block, parse_constant=_reject_non_finite)
    except json.JSONDecodeError as e:
        raise JsonParseError(f"JSON parse error: {e}") from e

    if not isinstance(payload, dict):
        raise JsonParseError(f"expected a JSON object, got {type(payload).__name__}")
    return payload


def parse_itinerary(payload: dict[str, Any]) -> Itinerary:
    """Validate a parsed payload into an Itinerary.

    Raises:
        JsonParseError: If nested structures have the wrong shape
    """
    try:
        return Itinerary.model_validate(payload)
    except SchemaError as e:
        raise JsonParseError(f"itinerary shape invalid: {e}") from e
