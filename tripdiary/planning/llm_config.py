"""
Generation backend configuration.

This module wraps the LangChain chat model used for text generation in an
explicitly constructed GenerationClient. Backend failures are normalized into
typed errors so the pipeline can switch on the error kind.
"""

import logging
from typing import Any, Optional

import openai
from fastapi import Depends
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from ..utils.config import Settings, get_settings
from ..utils.exceptions import (
    BackendError,
    BackendErrorKind,
    CredentialMissingError,
    MalformedResponseError,
)

logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = "OPENAI_API_KEY"

QUOTA_MARKERS = ("quota", "rate limit", "429")


def classify_backend_error(error: Exception) -> BackendError:
    """
    Convert an exception raised by the chat model into a BackendError.

    Rate limiting is recognised from the typed openai exception or an HTTP 429
    status first; the message markers only catch wrappers that drop both.

    Args:
        error: Exception raised while invoking the model

    Returns:
        BackendError with kind QUOTA or TRANSPORT
    """
    if isinstance(error, BackendError):
        return error

    http_status = getattr(error, "status_code", None)
    if http_status is None:
        response = getattr(error, "response", None)
        http_status = getattr(response, "status_code", None)
    if not isinstance(http_status, int):
        http_status = None

    message = str(error) or type(error).__name__
    lowered = message.lower()

    if (
        isinstance(error, openai.RateLimitError)
        or http_status == 429
        or any(marker in lowered for marker in QUOTA_MARKERS)
    ):
        kind = BackendErrorKind.QUOTA
    else:
        kind = BackendErrorKind.TRANSPORT

    return BackendError(
        message,
        kind=kind,
        http_status=http_status,
        context={"error_type": type(error).__name__},
    )


def _content_text(content: Any) -> str:
    """Flatten message content (a string or a list of content blocks) to text."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text", ""))
        return "".join(parts)
    return ""


class GenerationClient:
    """
    Thin async wrapper around a LangChain chat model.

    A client built without a model represents a missing credential: every
    generate() call fails fast with CredentialMissingError and never touches
    the network.
    """

    def __init__(self, model: Optional[BaseChatModel] = None, model_name: str = ""):
        self.model = model
        self.model_name = model_name

    @property
    def configured(self) -> bool:
        return self.model is not None

    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        json_mode: bool = True,
    ) -> str:
        """
        Send a prompt to the backend and return the raw response text.

        A single attempt is made; no timeout is enforced here.

        Args:
            prompt: Rendered instruction
            system_prompt: Optional system message
            json_mode: Ask the backend for a JSON object response

        Returns:
            Raw response text

        Raises:
            CredentialMissingError: No API key configured
            BackendError: The backend call failed (kind QUOTA or TRANSPORT)
            MalformedResponseError: The backend returned no text
        """
        if self.model is None:
            raise CredentialMissingError(
                f"{API_KEY_ENV_VAR} is not configured",
                context={"env_var": API_KEY_ENV_VAR},
            )

        messages = []
        if system_prompt:
            messages.append(SystemMessage(content=system_prompt))
        messages.append(HumanMessage(content=prompt))

        runnable = self.model
        if json_mode:
            runnable = self.model.bind(response_format={"type": "json_object"})

        try:
            response = await runnable.ainvoke(messages)
        except Exception as e:
            backend_error = classify_backend_error(e)
            logger.error(
                f"Generation backend failed ({backend_error.kind.value}, "
                f"status={backend_error.http_status}): {backend_error.message}"
            )
            raise backend_error from e

        text = _content_text(getattr(response, "content", ""))
        if not text.strip():
            raise MalformedResponseError("No response text received from AI")

        logger.info(f"Generation backend returned {len(text)} characters")
        return text


def create_generation_client(config: Settings) -> GenerationClient:
    """
    Build a GenerationClient from settings.

    Returns an unconfigured client when no API key is set.
    """
    if not config.has_api_key:
        logger.warning(f"{API_KEY_ENV_VAR} not found, generation disabled")
        return GenerationClient()

    model = ChatOpenAI(
        model=config.openai_model,
        temperature=config.llm_temperature,
        max_tokens=config.llm_max_tokens,
        api_key=config.openai_api_key,
    )
    logger.info(f"Initialized OpenAI model {config.openai_model}")
    return GenerationClient(model, model_name=config.openai_model)


def get_generation_client(config: Settings = Depends(get_settings)) -> GenerationClient:
    """FastAPI dependency building a client from the current settings."""
    return create_generation_client(config)
