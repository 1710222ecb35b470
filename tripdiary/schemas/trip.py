"""
Pydantic schemas for generated trip plans.

Two output contracts exist:
- TripPlan: the schema-validated day-by-day plan returned by /api/ai/plan
- FallbackTripPlan: the free-form plan returned by /api/generate-trip
"""
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# STRICT PLAN (TripPlan)
# ============================================================================

TimeOfDay = Literal["morning", "afternoon", "evening"]


class Activity(BaseModel):
    """Single activity in a day's plan"""
    model_config = ConfigDict(populate_by_name=True)

    time_of_day: Optional[TimeOfDay] = Field(default=None, alias="timeOfDay")
    name: str = Field(..., description="Activity name", examples=["Louvre Museum"])
    description: str = Field(..., description="What to do and why")
    location: Optional[str] = Field(default=None, description="Location name")
    tips: Optional[str] = Field(default=None, description="Helpful tips")
    estimated_cost: Optional[str] = Field(
        default=None, alias="estimatedCost", description="Ballpark cost, marked approx."
    )


class DayPlan(BaseModel):
    """A single day in the itinerary"""
    day: int = Field(..., description="1-based day number")
    title: str
    activities: List[Activity] = Field(..., description="2-5 activities expected")


class BudgetItem(BaseModel):
    category: str = Field(..., examples=["Accommodation"])
    amount: str = Field(..., examples=["$500"])


class TripPlan(BaseModel):
    """Complete day-by-day plan"""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "summary": "Three relaxed days of art and food in Paris",
                "dailyPlan": [
                    {
                        "day": 1,
                        "title": "Left Bank classics",
                        "activities": [
                            {
                                "timeOfDay": "morning",
                                "name": "Musée d'Orsay",
                                "description": "Impressionist collection in a former railway station",
                                "location": "7th arrondissement",
                                "estimatedCost": "approx. EUR 16",
                            }
                        ],
                    }
                ],
                "packingTips": ["Comfortable walking shoes"],
                "localTips": ["Greet shopkeepers with 'Bonjour'"],
            }
        },
    )

    summary: str
    daily_plan: List[DayPlan] = Field(..., alias="dailyPlan")
    packing_tips: Optional[List[str]] = Field(default=None, alias="packingTips")
    local_tips: Optional[List[str]] = Field(default=None, alias="localTips")
    estimated_budget_breakdown: Optional[List[BudgetItem]] = Field(
        default=None, alias="estimatedBudgetBreakdown"
    )


# ============================================================================
# FREE-FORM PLAN (FallbackTripPlan)
# ============================================================================

class ScheduledActivity(BaseModel):
    time: str = Field(..., examples=["Morning"])
    activity: str


class ItineraryDay(BaseModel):
    day: int
    title: str
    activities: List[ScheduledActivity]


class Recommendations(BaseModel):
    accommodation: List[str] = []
    dining: List[str] = []
    activities: List[str] = []
    transportation: List[str] = []


class GeneratedTripPlan(BaseModel):
    """The part of a free-form plan the generation backend is asked to produce"""
    itinerary: List[ItineraryDay]
    recommendations: Recommendations
    tips: List[str] = []


class FallbackTripPlan(GeneratedTripPlan):
    """Free-form plan including the echoed request fields"""
    model_config = ConfigDict(populate_by_name=True)

    from_destination: str = Field(default="", alias="fromDestination")
    to_destination: str = Field(..., alias="toDestination")
    duration: Union[int, str]
    budget: str = "Moderate"
