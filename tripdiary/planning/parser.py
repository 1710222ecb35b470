"""Response parsing and output schema validation for generated plans."""

import json
import re
from typing import Any, Dict, Type

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..schemas.validation import diagnostics_from_error
from ..utils.exceptions import MalformedResponseError, SchemaViolationError
from ..utils.logger import get_logger

logger = get_logger(__name__)

_OPENING_FENCE = re.compile(r"^```(?:json)?[ \t]*\n?", re.IGNORECASE)
_CLOSING_FENCE = re.compile(r"\n?```[ \t]*$")


def strip_code_fences(text: str) -> str:
    """
    Remove a surrounding markdown code fence.

    Accepts both ```json and bare ``` openings. Text without a leading fence
    is returned trimmed but otherwise untouched.
    """
    cleaned = (text or "").strip()
    if cleaned.startswith("```"):
        cleaned = _OPENING_FENCE.sub("", cleaned, count=1)
        cleaned = _CLOSING_FENCE.sub("", cleaned, count=1)
    return cleaned.strip()


def parse_response(text: str) -> Any:
    """
    Parse raw generation output as JSON.

    Args:
        text: Raw response text, possibly wrapped in a code fence

    Returns:
        Parsed JSON value

    Raises:
        MalformedResponseError: If the text is not valid JSON
    """
    cleaned = strip_code_fences(text)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.warning(
            "response_parse_failed",
            error=str(e),
            snippet=cleaned[:200],
        )
        raise MalformedResponseError(
            f"Failed to parse AI response as JSON: {e}",
            raw_text=cleaned,
        ) from e


def validate_output(data: Any, model: Type[BaseModel]) -> Dict[str, Any]:
    """
    Validate parsed output against a schema model.

    Args:
        data: Parsed JSON value
        model: Pydantic model describing the expected shape

    Returns:
        The validated data as a dict with extraneous fields stripped and
        unset optional fields omitted

    Raises:
        SchemaViolationError: With one diagnostic per violated constraint
    """
    try:
        validated = model.model_validate(data)
    except PydanticValidationError as e:
        diagnostics = diagnostics_from_error(e, key="path")
        logger.warning(
            "schema_violation",
            model=model.__name__,
            violations=len(diagnostics),
            paths=[d["path"] for d in diagnostics],
        )
        raise SchemaViolationError(
            f"Response does not match {model.__name__}: "
            + "; ".join(f"{d['path']}: {d['message']}" for d in diagnostics),
            validation_errors=diagnostics,
        ) from e

    return validated.model_dump(by_alias=True, exclude_none=True)
