"""
API routes for AI trip planning.

Two entry points expose the same capability with different contracts:
- POST /api/ai/plan: strict, schema-validated end to end, surfaces failures
- POST /api/generate-trip: lenient, always answers with a usable plan
"""
import logging
import traceback
from typing import Any, Optional, Tuple

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from tripdiary.planning import (
    FreeformPlanAdapter,
    GenerationClient,
    PlanPipeline,
    StrictPlanAdapter,
    get_generation_client,
)
from tripdiary.planning.llm_config import API_KEY_ENV_VAR
from tripdiary.schemas import GenerateTripRequest, validate_plan_request
from tripdiary.utils.config import Settings, get_settings
from tripdiary.utils.exceptions import SchemaViolationError, TripDiaryError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["planning"])

_NO_BODY = object()


async def _read_json(request: Request) -> Tuple[Any, Optional[str]]:
    """Read the request body as JSON, returning (body, error message)."""
    try:
        return await request.json(), None
    except ValueError as e:
        return _NO_BODY, f"Request body is not valid JSON: {e}"


def missing_key_response() -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={
            "error": "API key not configured",
            "message": f"Please set {API_KEY_ENV_VAR} in your .env file",
        },
    )


@router.post("/ai/plan")
async def plan_trip(
    request: Request,
    client: GenerationClient = Depends(get_generation_client),
    config: Settings = Depends(get_settings),
):
    """
    Generate a schema-validated day-by-day plan.

    Returns the TripPlan on success. Invalid input yields 400 with field
    diagnostics; a missing credential, backend failure or invalid model
    output yields 500. This flow never substitutes a fallback plan.
    """
    if not client.configured:
        logger.error(f"Missing {API_KEY_ENV_VAR} environment variable")
        return missing_key_response()

    body, read_error = await _read_json(request)
    if read_error:
        return JSONResponse(
            status_code=400,
            content={
                "error": "Invalid request",
                "details": [{"field": "body", "reason": "wrong_type", "message": read_error}],
            },
        )

    plan_request, diagnostics = validate_plan_request(body)
    if plan_request is None:
        logger.warning(f"Plan request validation failed: {diagnostics}")
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request", "details": diagnostics},
        )

    logger.info(
        f"Received plan request for {plan_request.destination}, "
        f"{plan_request.start_date} to {plan_request.end_date}"
    )

    pipeline = PlanPipeline(client, StrictPlanAdapter(max_days=config.fallback_max_days))
    try:
        state = await pipeline.run(plan_request)
    except SchemaViolationError as e:
        return JSONResponse(
            status_code=500,
            content={
                "error": "Failed to generate plan",
                "message": f"Trip planning failed: {e.message}",
                "details": e.validation_errors,
            },
        )
    except TripDiaryError as e:
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to generate plan", "message": e.message},
        )
    except Exception as e:
        logger.error(f"AI plan error: {e}", exc_info=True)
        content = {"error": "Failed to generate plan", "message": str(e) or "Unknown error"}
        if config.environment == "development":
            content["details"] = traceback.format_exc()
        return JSONResponse(status_code=500, content=content)

    logger.info("Plan generated successfully")
    return state["response"]


@router.post("/generate-trip")
async def generate_trip(
    request: Request,
    client: GenerationClient = Depends(get_generation_client),
    config: Settings = Depends(get_settings),
):
    """
    Generate a free-form trip plan, falling back to a template plan.

    Only toDestination and duration are required. Backend, parsing and
    schema failures never fail the request: the response carries
    ``fallback: true`` (plus ``isQuotaError`` for quota failures) instead.
    """
    body, _ = await _read_json(request)
    if not isinstance(body, dict):
        body = {}

    trip_request = GenerateTripRequest.model_validate(body)

    destination = (trip_request.to_destination or "").strip()
    if not destination or not trip_request.duration:
        return JSONResponse(
            status_code=400,
            content={"error": "Destination and duration are required"},
        )

    logger.info(
        f"Received trip request: from={trip_request.from_destination!r} "
        f"to={trip_request.to_destination!r} duration={trip_request.duration!r}"
    )

    pipeline = PlanPipeline(client, FreeformPlanAdapter(max_days=config.fallback_max_days))
    try:
        state = await pipeline.run(trip_request)
    except Exception as e:
        logger.error(f"Error generating trip plan: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": str(e) or "Failed to generate trip plan"},
        )

    return state["response"]
