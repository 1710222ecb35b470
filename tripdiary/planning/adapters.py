"""
Output adapters for the planning pipeline.

Both planning entry points share prompt rendering, generation, parsing and
fallback triggering; an adapter supplies what differs between them: the
prompt, the output schema, the fallback shape, how the response is assembled
and whether failures divert to the fallback (lenient) or surface (strict).
"""

from typing import Any, Dict, Type

from pydantic import BaseModel

from ..schemas.requests import GenerateTripRequest, TripPlanRequest
from ..schemas.trip import GeneratedTripPlan, TripPlan
from .fallback import (
    MAX_FALLBACK_DAYS,
    build_fallback_plan,
    build_fallback_trip_plan,
    days_truncated,
    duration_from_dates,
    parse_duration,
)
from .prompts import PLANNER_SYSTEM_PROMPT, build_plan_prompt, build_trip_prompt


class PlanAdapter:
    """Base adapter; subclasses fill in the flow-specific pieces."""

    name = "base"
    lenient = False
    output_model: Type[BaseModel] = BaseModel
    system_prompt = PLANNER_SYSTEM_PROMPT

    def __init__(self, max_days: int = MAX_FALLBACK_DAYS):
        self.max_days = max_days

    def build_prompt(self, request: Any) -> str:
        raise NotImplementedError

    def fallback(self, request: Any) -> Dict[str, Any]:
        raise NotImplementedError

    def duration(self, request: Any) -> int:
        raise NotImplementedError

    def is_truncated(self, request: Any) -> bool:
        return days_truncated(self.duration(request), self.max_days)

    def build_response(self, request: Any, plan: Dict[str, Any], state: Dict[str, Any]) -> Dict[str, Any]:
        return plan


class StrictPlanAdapter(PlanAdapter):
    """TripPlanRequest in, schema-validated TripPlan out; failures surface."""

    name = "strict"
    lenient = False
    output_model = TripPlan

    def build_prompt(self, request: TripPlanRequest) -> str:
        return build_plan_prompt(request)

    def duration(self, request: TripPlanRequest) -> int:
        return duration_from_dates(request.start_date, request.end_date)

    def fallback(self, request: TripPlanRequest) -> Dict[str, Any]:
        interests = ", ".join(request.interests)
        if request.notes:
            interests = f"{interests} {request.notes}".strip()
        return build_fallback_plan(
            request.starting_city,
            request.destination,
            self.duration(request),
            interests,
            max_days=self.max_days,
        )


class FreeformPlanAdapter(PlanAdapter):
    """Lenient flow: always answers with a FallbackTripPlan-shaped dict."""

    name = "freeform"
    lenient = True
    output_model = GeneratedTripPlan

    def build_prompt(self, request: GenerateTripRequest) -> str:
        return build_trip_prompt(request)

    def duration(self, request: GenerateTripRequest) -> int:
        return parse_duration(request.duration)

    def fallback(self, request: GenerateTripRequest) -> Dict[str, Any]:
        return build_fallback_trip_plan(
            request.from_destination,
            request.to_destination,
            request.duration,
            request.interests_text,
            budget=request.budget,
            max_days=self.max_days,
        )

    def build_response(self, request: GenerateTripRequest, plan: Dict[str, Any], state: Dict[str, Any]) -> Dict[str, Any]:
        response = {
            "fromDestination": request.from_destination or "",
            "toDestination": request.to_destination,
            "duration": request.duration,
            "budget": request.budget or "Moderate",
        }
        response.update(plan)

        if state.get("fallback"):
            response["fallback"] = True
            response["fallbackReason"] = state.get("fallback_reason")
            if state.get("is_quota_error"):
                response["isQuotaError"] = True
            if state.get("days_truncated"):
                response["daysTruncated"] = True
        return response
