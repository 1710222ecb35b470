"""
Pydantic schemas for API request bodies
"""
from typing import Annotated, Any, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator


class TripPlanRequest(BaseModel):
    """
    Validated input to the strict planning flow.

    Strictly typed (no "2" -> 2 coercion), frozen once validated, and unknown
    fields are ignored.
    """
    model_config = ConfigDict(strict=True, frozen=True, populate_by_name=True, extra="ignore")

    destination: str = Field(..., min_length=2, examples=["Paris"])
    start_date: str = Field(..., alias="startDate", description="ISO date for trip start")
    end_date: str = Field(..., alias="endDate", description="ISO date for trip end")
    starting_city: Optional[str] = Field(default=None, alias="startingCity")
    budget_level: Literal["low", "medium", "high"] = Field(default="medium", alias="budgetLevel")
    travelers: int = Field(default=1, ge=1)
    interests: Tuple[str, ...] = Field(default=())
    travel_style: Literal["relaxed", "balanced", "packed"] = Field(
        default="balanced", alias="travelStyle"
    )
    notes: Optional[str] = None

    @field_validator("travelers", mode="before")
    @classmethod
    def whole_number_travelers(cls, value: Any) -> Any:
        # JSON has one number type; 2.0 counts as a whole number
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value

    @field_validator("interests", mode="before")
    @classmethod
    def interests_as_tuple(cls, value: Any) -> Any:
        if isinstance(value, list):
            return tuple(value)
        return value


def _as_text(value: Any) -> Optional[str]:
    """Scalars become strings; anything else is dropped."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return str(value)
    return None


def _as_count(value: Any) -> Optional[Union[int, str]]:
    """Keep ints and strings, truncate floats, drop anything else."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, str)):
        return value
    if isinstance(value, float):
        return int(value)
    return None


def _as_interests(value: Any) -> Optional[Union[str, List[str]]]:
    if isinstance(value, list):
        return [text for text in (_as_text(item) for item in value) if text]
    return _as_text(value)


LenientText = Annotated[Optional[str], BeforeValidator(_as_text)]
LenientCount = Annotated[Optional[Union[int, str]], BeforeValidator(_as_count)]


class GenerateTripRequest(BaseModel):
    """
    Request body for the free-form (fallback-first) planning flow.

    Every field is optional and loosely read: numbers are accepted where text
    is expected and values of an unusable type are dropped. The route enforces
    that toDestination and duration are present.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    from_destination: LenientText = Field(default=None, alias="fromDestination")
    to_destination: LenientText = Field(default=None, alias="toDestination")
    duration: LenientCount = Field(default=None, examples=[3, "5"])
    budget: LenientText = None
    travelers: LenientCount = None
    interests: Annotated[
        Optional[Union[str, List[str]]], BeforeValidator(_as_interests)
    ] = None
    travel_style: LenientText = Field(default=None, alias="travelStyle")

    @property
    def interests_text(self) -> str:
        """Interests as a single comma-separated string."""
        if not self.interests:
            return ""
        if isinstance(self.interests, list):
            return ", ".join(self.interests)
        return self.interests
