"""
Trip-plan generation pipeline.

This package contains the prompt builders, the generation client, the
response parser/validator, the fallback synthesizer and the LangGraph
workflow that ties them together.
"""

from .state import PlanState
from .llm_config import GenerationClient, create_generation_client, get_generation_client
from .adapters import PlanAdapter, StrictPlanAdapter, FreeformPlanAdapter
from .graph import PlanPipeline, create_plan_graph
from .writer import summarize_trip_entry, expand_to_diary_entry, suggest_next_destination

__all__ = [
    "PlanState",
    "GenerationClient",
    "create_generation_client",
    "get_generation_client",
    "PlanAdapter",
    "StrictPlanAdapter",
    "FreeformPlanAdapter",
    "PlanPipeline",
    "create_plan_graph",
    "summarize_trip_entry",
    "expand_to_diary_entry",
    "suggest_next_destination",
]
