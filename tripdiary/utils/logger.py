"""
Structured logging for the planning pipeline.

structlog sits on top of the standard library logger so events from the
planning modules and plain ``logging`` records from the routes share one
output stream. Production always writes JSON lines; elsewhere DEBUG switches
to the coloured console renderer.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from .config import Settings

SERVICE_NAME = "tripdiary"


def add_service_context(environment: str) -> Processor:
    """Processor stamping every event with the service and its environment."""

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", SERVICE_NAME)
        event_dict.setdefault("environment", environment)
        return event_dict

    return processor


def select_renderer(environment: str, log_level: str) -> Processor:
    if environment.lower() != "production" and log_level.upper() == "DEBUG":
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def build_processors(environment: str, log_level: str) -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        add_service_context(environment),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        select_renderer(environment, log_level),
    ]


def configure_logging(config: Settings) -> None:
    """
    Configure structlog and the root stdlib logger from settings.

    Args:
        config: Settings providing ``environment`` and ``log_level``
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, config.log_level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=build_processors(config.environment, config.log_level),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """Structured logger for the given module name."""
    return structlog.get_logger(name)
