"""
structlog setup for the Travelogue backend

Every log line goes through stdlib logging on stdout. Lines emitted while a
request is being handled carry its ``request_id``.
"""

import base64
import logging
import secrets
import sys
import time
from contextvars import ContextVar
from typing import Any

import structlog

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)


def add_request_id(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    request_id = request_id_ctx.get()
    if request_id:
        event_dict["request_id"] = request_id
    return event_dict


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Route structlog through stdlib logging.

    Args:
        debug: Coloured console lines when True, one JSON object per line otherwise.
        level: Explicit level name such as "WARNING"; defaults to DEBUG or INFO
            depending on ``debug``.
    """
    if level:
        log_level = logging.getLevelName(level.upper())
    else:
        log_level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(level=log_level, stream=sys.stdout, format="%(message)s", force=True)

    renderer = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_request_id,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """14 url-safe characters: microsecond clock followed by 2 random bytes."""
    raw = int(time.time() * 1_000_000).to_bytes(8, "big") + secrets.token_bytes(2)
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def set_request_context(request_id: str | None = None) -> str:
    """Bind a request id (a fresh one if none is given) to the current context."""
    request_id = request_id or generate_request_id()
    request_id_ctx.set(request_id)
    return request_id


def clear_request_context() -> None:
    request_id_ctx.set(None)
