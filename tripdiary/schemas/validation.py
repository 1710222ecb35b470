"""Total validation helpers that report field-level diagnostics instead of raising."""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from .requests import TripPlanRequest

Diagnostic = Dict[str, str]

_BELOW_MINIMUM = {"greater_than", "greater_than_equal", "string_too_short", "too_short"}
_OUT_OF_ENUM = {"literal_error", "enum"}


def classify_error_type(error_type: str) -> str:
    """Map a pydantic error type onto a diagnostic reason."""
    if error_type == "missing":
        return "required"
    if error_type in _OUT_OF_ENUM:
        return "out_of_enum"
    if error_type in _BELOW_MINIMUM:
        return "below_minimum"
    if error_type.endswith("_type") or error_type.endswith("_parsing") or error_type == "int_from_float":
        return "wrong_type"
    return "invalid"


def format_location(loc: Tuple[Any, ...]) -> str:
    """Join an error location into a dotted path, e.g. dailyPlan.0.title"""
    return ".".join(str(part) for part in loc)


def diagnostics_from_error(error: ValidationError, key: str = "field") -> List[Diagnostic]:
    """
    Convert a pydantic ValidationError into a flat diagnostic list.

    Args:
        error: The pydantic error
        key: Name of the location key in each diagnostic ("field" or "path")

    Returns:
        One {key, reason, message} dict per violated constraint
    """
    diagnostics = []
    for item in error.errors():
        diagnostics.append(
            {
                key: format_location(item.get("loc", ())) or "body",
                "reason": classify_error_type(item.get("type", "")),
                "message": item.get("msg", ""),
            }
        )
    return diagnostics


def validate_plan_request(data: Any) -> Tuple[Optional[TripPlanRequest], List[Diagnostic]]:
    """
    Validate an arbitrary value as a TripPlanRequest.

    Never raises for malformed input: returns (request, []) on success and
    (None, diagnostics) otherwise. Defaults are populated only on success.
    """
    if not isinstance(data, dict):
        return None, [
            {
                "field": "body",
                "reason": "wrong_type",
                "message": "Request body must be a JSON object",
            }
        ]

    try:
        return TripPlanRequest.model_validate(data), []
    except ValidationError as e:
        return None, diagnostics_from_error(e)
