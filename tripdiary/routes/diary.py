"""
API routes for the AI diary writing helpers.
"""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from tripdiary.planning import (
    GenerationClient,
    expand_to_diary_entry,
    get_generation_client,
    suggest_next_destination,
    summarize_trip_entry,
)
from tripdiary.schemas import ExpandEntryRequest, SuggestDestinationsRequest, SummarizeEntryRequest
from tripdiary.utils.exceptions import CredentialMissingError, TripDiaryError

from .plans import missing_key_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ai", tags=["diary"])


def _failure(error: TripDiaryError, what: str) -> JSONResponse:
    if isinstance(error, CredentialMissingError):
        return missing_key_response()
    logger.error(f"{what} failed: {error.message}")
    content = {"error": f"Failed to {what}", "message": error.message}
    validation_errors = getattr(error, "validation_errors", None)
    if validation_errors:
        content["details"] = validation_errors
    return JSONResponse(status_code=500, content=content)


@router.post("/summarize-entry")
async def summarize_entry(
    request: SummarizeEntryRequest,
    client: GenerationClient = Depends(get_generation_client),
):
    """Summarize a diary entry into its key moments"""
    try:
        return await summarize_trip_entry(client, request.trip_entry_content)
    except TripDiaryError as e:
        return _failure(e, "summarize entry")


@router.post("/expand-entry")
async def expand_entry(
    request: ExpandEntryRequest,
    client: GenerationClient = Depends(get_generation_client),
):
    """Expand bullet points into a diary-style entry"""
    try:
        return await expand_to_diary_entry(client, request.bullet_points)
    except TripDiaryError as e:
        return _failure(e, "expand entry")


@router.post("/suggest-destinations")
async def suggest_destinations(
    request: SuggestDestinationsRequest,
    client: GenerationClient = Depends(get_generation_client),
):
    """Suggest new destinations from the user's past trips"""
    try:
        return await suggest_next_destination(client, request.past_trips)
    except TripDiaryError as e:
        return _failure(e, "suggest destinations")
