"""
Pydantic schemas for the trip diary API
"""
from .trip import (
    Activity,
    DayPlan,
    BudgetItem,
    TripPlan,
    ScheduledActivity,
    ItineraryDay,
    Recommendations,
    GeneratedTripPlan,
    FallbackTripPlan,
)
from .requests import TripPlanRequest, GenerateTripRequest
from .writing import (
    SummarizeEntryRequest,
    SummarizeEntryResponse,
    ExpandEntryRequest,
    DiaryEntryResponse,
    SuggestDestinationsRequest,
    DestinationSuggestions,
)
from .validation import validate_plan_request, diagnostics_from_error

__all__ = [
    # Strict plan
    "Activity",
    "DayPlan",
    "BudgetItem",
    "TripPlan",
    # Free-form plan
    "ScheduledActivity",
    "ItineraryDay",
    "Recommendations",
    "GeneratedTripPlan",
    "FallbackTripPlan",
    # API request models
    "TripPlanRequest",
    "GenerateTripRequest",
    # Writing helpers
    "SummarizeEntryRequest",
    "SummarizeEntryResponse",
    "ExpandEntryRequest",
    "DiaryEntryResponse",
    "SuggestDestinationsRequest",
    "DestinationSuggestions",
    # Validation
    "validate_plan_request",
    "diagnostics_from_error",
]
