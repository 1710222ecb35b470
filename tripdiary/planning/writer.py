"""
Diary writing helpers: entry summaries, bullet-point expansion and
destination suggestions.

Each helper is a single prompt → generation → parse → validate pass with no
fallback; failures propagate as typed errors.
"""

import logging
from typing import Any, Dict, List, Type

from pydantic import BaseModel

from ..schemas.writing import DestinationSuggestions, DiaryEntryResponse, SummarizeEntryResponse
from .llm_config import GenerationClient
from .parser import parse_response, validate_output
from .prompts import build_diary_prompt, build_suggestion_prompt, build_summary_prompt

logger = logging.getLogger(__name__)

WRITER_SYSTEM_PROMPT = "You are a helpful travel writing assistant. You reply with a single JSON object."


async def _generate_structured(
    client: GenerationClient,
    prompt: str,
    output_model: Type[BaseModel],
) -> Dict[str, Any]:
    raw_text = await client.generate(prompt, system_prompt=WRITER_SYSTEM_PROMPT)
    return validate_output(parse_response(raw_text), output_model)


async def summarize_trip_entry(client: GenerationClient, content: str) -> Dict[str, Any]:
    """Summarize a diary entry. Returns {"summary": str}."""
    logger.info(f"Summarizing trip entry ({len(content)} characters)")
    return await _generate_structured(client, build_summary_prompt(content), SummarizeEntryResponse)


async def expand_to_diary_entry(client: GenerationClient, bullet_points: List[str]) -> Dict[str, Any]:
    """Expand bullet points into a diary entry. Returns {"diaryEntry": str}."""
    logger.info(f"Expanding {len(bullet_points)} bullet points into a diary entry")
    return await _generate_structured(client, build_diary_prompt(bullet_points), DiaryEntryResponse)


async def suggest_next_destination(client: GenerationClient, past_trips: List[str]) -> Dict[str, Any]:
    """Suggest destinations from past trips. Returns {"suggestions": [str]}."""
    logger.info(f"Suggesting destinations from {len(past_trips)} past trips")
    return await _generate_structured(client, build_suggestion_prompt(past_trips), DestinationSuggestions)
