"""
LangGraph workflow for trip-plan generation.

The graph runs prepare → generate → parse → validate → finalize. When a step
fails, the lenient flow routes to the fallback node (which always succeeds)
and then finalizes; the strict flow stops and PlanPipeline re-raises the
typed error to the caller.
"""

from typing import Any, Callable, Optional

from langgraph.graph import END, StateGraph

from ..utils.exceptions import (
    BackendError,
    CredentialMissingError,
    MalformedResponseError,
    SchemaViolationError,
    TripDiaryError,
)
from ..utils.logger import get_logger
from .adapters import PlanAdapter
from .llm_config import API_KEY_ENV_VAR, GenerationClient
from .parser import parse_response, validate_output
from .state import PlanState, initial_state

logger = get_logger(__name__)

# Failures the pipeline knows how to recover from (lenient) or report (strict)
RECOVERABLE_ERRORS = (
    CredentialMissingError,
    BackendError,
    MalformedResponseError,
    SchemaViolationError,
)


def fallback_reason(error: Optional[TripDiaryError]) -> str:
    """Short machine-readable reason for switching to the fallback plan."""
    if isinstance(error, CredentialMissingError):
        return "missing_api_key"
    if isinstance(error, BackendError):
        return "quota_exceeded" if error.is_quota else "backend_error"
    if isinstance(error, SchemaViolationError):
        return "schema_violation"
    if isinstance(error, MalformedResponseError):
        return "malformed_response"
    return "unknown"


def create_plan_graph(client: GenerationClient, adapter: PlanAdapter):
    """
    Build the planning workflow for one generation client and output adapter.

    Args:
        client: Generation backend client (possibly unconfigured)
        adapter: Strict or free-form output adapter

    Returns:
        Compiled LangGraph application
    """

    async def prepare_node(state: PlanState) -> dict:
        prompt = adapter.build_prompt(state["request"])
        update = {"prompt": prompt, "status": "prompt_ready"}
        if not client.configured:
            # Skip the network entirely when there is no credential
            update["error"] = CredentialMissingError(
                f"{API_KEY_ENV_VAR} is not configured",
                context={"env_var": API_KEY_ENV_VAR},
            )
        return update

    async def generate_node(state: PlanState) -> dict:
        try:
            raw_text = await client.generate(state["prompt"], system_prompt=adapter.system_prompt)
        except RECOVERABLE_ERRORS as e:
            logger.error(
                "plan_generation_failed",
                flow=adapter.name,
                error=e.message,
                error_type=type(e).__name__,
            )
            return {"error": e, "status": "generation_failed"}
        return {"raw_text": raw_text, "status": "generated"}

    async def parse_node(state: PlanState) -> dict:
        try:
            parsed = parse_response(state["raw_text"])
        except MalformedResponseError as e:
            return {"error": e, "status": "parse_failed"}
        return {"parsed": parsed, "status": "parsed"}

    async def validate_node(state: PlanState) -> dict:
        try:
            plan = validate_output(state["parsed"], adapter.output_model)
        except SchemaViolationError as e:
            return {"error": e, "diagnostics": e.validation_errors, "status": "validation_failed"}
        return {"plan": plan, "status": "validated"}

    async def fallback_node(state: PlanState) -> dict:
        request = state["request"]
        error = state.get("error")
        reason = fallback_reason(error)
        truncated = adapter.is_truncated(request)

        logger.warning(
            "fallback_used",
            flow=adapter.name,
            reason=reason,
            error=error.message if error else None,
            days_truncated=truncated,
        )
        return {
            "plan": adapter.fallback(request),
            "fallback": True,
            "fallback_reason": reason,
            "is_quota_error": isinstance(error, BackendError) and error.is_quota,
            "days_truncated": truncated,
            "status": "fallback",
        }

    async def finalize_node(state: PlanState) -> dict:
        response = adapter.build_response(state["request"], state["plan"], state)
        return {"response": response, "status": "completed"}

    def route_after(next_node: str) -> Callable[[PlanState], str]:
        def route(state: PlanState) -> str:
            if state.get("error") is None:
                return next_node
            return "fallback" if adapter.lenient else END
        return route

    workflow = StateGraph(PlanState)

    workflow.add_node("prepare", prepare_node)
    workflow.add_node("generate", generate_node)
    workflow.add_node("parse", parse_node)
    workflow.add_node("validate", validate_node)
    workflow.add_node("fallback", fallback_node)
    workflow.add_node("finalize", finalize_node)

    workflow.set_entry_point("prepare")
    for source, target in (
        ("prepare", "generate"),
        ("generate", "parse"),
        ("parse", "validate"),
        ("validate", "finalize"),
    ):
        workflow.add_conditional_edges(
            source,
            route_after(target),
            {target: target, "fallback": "fallback", END: END},
        )
    workflow.add_edge("fallback", "finalize")
    workflow.add_edge("finalize", END)

    return workflow.compile()


class PlanPipeline:
    """
    Runs the planning workflow for a single request.

    Stateless apart from the injected client and adapter; build one per
    request or share it, there is no mutable state between runs.
    """

    def __init__(self, client: GenerationClient, adapter: PlanAdapter):
        self.client = client
        self.adapter = adapter
        self.graph = create_plan_graph(client, adapter)

    async def run(self, request: Any) -> PlanState:
        """
        Produce a plan for a validated request.

        Returns:
            Final workflow state; ``response`` holds the body to return

        Raises:
            TripDiaryError: Strict flow only, the typed failure that stopped
                the workflow
        """
        final_state = await self.graph.ainvoke(initial_state(request))

        error = final_state.get("error")
        if error is not None and not final_state.get("fallback"):
            raise error

        logger.info(
            "plan_ready",
            flow=self.adapter.name,
            fallback=final_state.get("fallback", False),
        )
        return final_state
