"""JSON parsing and validation utilities for LLM responses.

Contains functions for parsing and validating LLM responses:
- parse_json_response: Parse raw LLM response as a JSON object
- validate_tour_plan_json: Validate parsed JSON against the TourPlanRef schema
"""

import json
import re
from typing import Optional

from pydantic import ValidationError

from difftour.llm.exceptions import JSONParseError
from difftour.tour.exceptions import SchemaViolationError
from difftour.tour.models import TourPlanRef

# Greedy so nested fences inside the JSON strings stay intact
_FENCE_RE = re.compile(r"```(?:json)?\s*\n([\s\S]*)\n```")


def _loads_object(text: str) -> Optional[dict]:
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        return None
    return parsed if isinstance(parsed, dict) else None


def parse_json_response(raw_response: str) -> dict:
    """Parse the LLM response as a JSON object.

    Tries the whole response first, then the contents of a markdown code
    fence, then the span from the first "{" to the last "}".

    Args:
        raw_response: The raw text response from the LLM.

    Returns:
        The parsed JSON as a dictionary.

    Raises:
        JSONParseError: If the response is empty or no strategy succeeds.
    """
    cleaned = raw_response.strip()
    if not cleaned:
        raise JSONParseError("No text response received from the model.")

    parsed = _loads_object(cleaned)
    if parsed is not None:
        return parsed

    fence_match = _FENCE_RE.search(cleaned)
    if fence_match:
        parsed = _loads_object(fence_match.group(1).strip())
        if parsed is not None:
            return parsed

    first_brace = cleaned.find("{")
    last_brace = cleaned.rfind("}")
    if first_brace != -1 and last_brace > first_brace:
        parsed = _loads_object(cleaned[first_brace:last_brace + 1])
        if parsed is not None:
            return parsed

    raise JSONParseError(
        f"Failed to parse LLM response as JSON.\n"
        f"Raw response:\n{raw_response}"
    )


def validate_tour_plan_json(parsed: dict) -> TourPlanRef:
    """Validate parsed JSON against the TourPlanRef schema.

    Args:
        parsed: The parsed JSON dictionary.

    Returns:
        A validated TourPlanRef.

    Raises:
        SchemaViolationError: If the JSON does not match the schema.
    """
    try:
        return TourPlanRef.model_validate(parsed)
    except ValidationError as e:
        raise SchemaViolationError(
            f"LLM response does not match expected schema.\n"
            f"Error: {e}"
        ) from e
