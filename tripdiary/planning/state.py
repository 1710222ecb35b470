"""
State schema for the LangGraph planning workflow.

The state is created fresh for every request and enriched node by node:
- prepare: prompt
- generate: raw_text
- parse: parsed
- validate / fallback: plan
- finalize: response
"""

from typing import Any, Dict, List, Optional, TypedDict

from ..utils.exceptions import TripDiaryError


class PlanState(TypedDict):
    # Input
    request: Any

    # Pipeline outputs
    prompt: Optional[str]
    raw_text: Optional[str]
    parsed: Optional[Any]
    plan: Optional[Dict[str, Any]]
    response: Optional[Dict[str, Any]]

    # Failure details
    error: Optional[TripDiaryError]
    diagnostics: List[Dict[str, str]]

    # Fallback metadata
    fallback: bool
    fallback_reason: Optional[str]
    is_quota_error: bool
    days_truncated: bool

    # Metadata
    status: str


def initial_state(request: Any) -> PlanState:
    return {
        "request": request,
        "prompt": None,
        "raw_text": None,
        "parsed": None,
        "plan": None,
        "response": None,
        "error": None,
        "diagnostics": [],
        "fallback": False,
        "fallback_reason": None,
        "is_quota_error": False,
        "days_truncated": False,
        "status": "processing",
    }
