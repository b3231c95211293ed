"""Handling of raw model responses for difftour.

difftour never calls a model itself; this package turns the text a model
returned into a validated TourPlanRef.
"""

from difftour.llm.exceptions import JSONParseError, LLMError
from difftour.llm.parsing import parse_json_response, validate_tour_plan_json

__all__ = [
    "LLMError",
    "JSONParseError",
    "parse_json_response",
    "validate_tour_plan_json",
]
