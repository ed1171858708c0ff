"""Structured logging configuration using structlog."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from .settings import settings

SERVICE_NAME = "cardgate"
SERVICE_VERSION = "0.1.0"


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Add application context to log events.

    Adds service name, environment, and version to every log entry.
    """
    event_dict["service"] = SERVICE_NAME
    event_dict["environment"] = settings.ENVIRONMENT
    event_dict["version"] = SERVICE_VERSION
    return event_dict


def drop_color_message_key(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Remove the 'color_message' key from the event dict.

    Structlog's ConsoleRenderer adds a 'color_message' key which is redundant in JSON output.
    """
    event_dict.pop("color_message", None)
    return event_dict


def configure_structlog(json_logs: bool = False) -> None:
    """
    Configure structlog for the gateway.

    Args:
        json_logs: If True, output JSON logs. If False, use human-readable console format.
                   Defaults to JSON unless DEBUG is set.
    """
    shared: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        add_app_context,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]
    if json_logs or settings.LOG_JSON or not settings.DEBUG:
        # Production: JSON logs for aggregation
        processors: list[Processor] = [
            *shared,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            drop_color_message_key,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.INFO,
    )

    # The stripe SDK logs every request at INFO
    logging.getLogger("stripe").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger

    Usage:
        logger = get_logger(__name__)
        logger.info("gateway_purchase", order_id=options.order_id, amount=amount)
    """
    return structlog.get_logger(name)


__all__ = ["configure_structlog", "get_logger"]
