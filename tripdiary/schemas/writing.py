"""
Pydantic schemas for the diary writing helpers (summaries, diary entries,
destination suggestions).
"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class SummarizeEntryRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    trip_entry_content: str = Field(
        ..., alias="tripEntryContent", min_length=1,
        description="The content of the trip entry to summarize",
    )


class SummarizeEntryResponse(BaseModel):
    summary: str = Field(..., description="A concise summary of the trip entry")


class ExpandEntryRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    bullet_points: List[str] = Field(
        ..., alias="bulletPoints", min_length=1,
        description="Bullet points to expand into a diary entry",
    )


class DiaryEntryResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    diary_entry: str = Field(..., alias="diaryEntry")


class SuggestDestinationsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    past_trips: List[str] = Field(
        ..., alias="pastTrips", min_length=1,
        description="Descriptions of the user's past trips",
    )


class DestinationSuggestions(BaseModel):
    suggestions: List[str]
