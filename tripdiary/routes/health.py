"""
Operator diagnostics for the generation backend.
"""
from fastapi import APIRouter, Depends

from tripdiary.planning.llm_config import API_KEY_ENV_VAR
from tripdiary.utils.config import Settings, get_settings

router = APIRouter(prefix="/api/ai", tags=["health"])


@router.get("/health")
async def ai_health(config: Settings = Depends(get_settings)):
    """Report whether a generation credential is configured. No auth."""
    has_key = config.has_api_key
    return {
        "status": "configured" if has_key else "missing_api_key",
        "message": "API key is configured" if has_key else f"{API_KEY_ENV_VAR} not found in environment",
        "envVars": {
            API_KEY_ENV_VAR: "✓ Set" if has_key else "✗ Not set",
        },
    }
