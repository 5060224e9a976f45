"""
Structured logging configuration using structlog.
"""

from __future__ import annotations

import logging
import sys
import uuid
from contextvars import ContextVar
from typing import Any

import structlog
from structlog.types import FilteringBoundLogger

# Correlates every log line emitted while one HTTP request is served
request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)

# Service context (set once at startup)
_service_name: str = "unknown"
_service_version: str = "0.0.0"


def set_service_context(name: str, version: str) -> None:
    """Set service context for all log entries."""
    global _service_name, _service_version
    _service_name = name
    _service_version = version


def add_service_context(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add service identification to all log entries."""
    event_dict["service"] = _service_name
    event_dict["version"] = _service_version
    return event_dict


def add_request_context(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    request_id = request_id_ctx.get()
    if request_id:
        event_dict["request_id"] = request_id
    return event_dict


def setup_logging(level: str = "INFO", json_logs: bool = True) -> None:
    """Configure structured logging."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_service_context,
        add_request_context,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> FilteringBoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name or __name__)


def generate_request_id() -> str:
    return uuid.uuid4().hex


def set_request_id(request_id: str) -> None:
    request_id_ctx.set(request_id)


def clear_request_id() -> None:
    request_id_ctx.set(None)
