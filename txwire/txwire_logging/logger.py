"""
Structured logging: timestamp, level, logger name, event_type.

structlog with ISO timestamps and consistent keys so conversion failures
from relayer / block-engine processes aggregate cleanly. All txwire modules
use get_logger(__name__) and log a snake_case event name plus keyword context.

Only imports txwire.config (no other txwire modules) to avoid circular imports.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

from txwire.config.settings import Settings, get_settings


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Ensure timestamp is always present (ISO 8601)."""
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _normalize_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Rename structlog 'event' to event_type; keep message if present."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    if "message" not in event_dict and "event_type" in event_dict:
        event_dict["message"] = str(event_dict["event_type"])
    return event_dict


def configure_structlog(settings: Settings | None = None) -> None:
    """
    Configure structlog from ``settings`` (default: current env via get_settings()).

    log_format json renders one JSON object per line; console renders
    human-readable output. Events below log_level are dropped.
    """
    if settings is None:
        settings = get_settings()
    level = getattr(logging, settings.log_level, logging.INFO)
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _add_timestamp,
        _normalize_event,
    ]
    if settings.log_format == "json":
        shared_processors.append(structlog.processors.JSONRenderer())
    else:
        shared_processors.append(
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
        )
    structlog.configure(
        processors=shared_processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


# One-time configuration on first import; host applications that configured
# structlog themselves keep their setup.
if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Return a structured logger for the given module name.

        logger = get_logger(__name__)
        logger.warning("batch_element_failed", index=3, error_code="decode_error")

    Output (JSON): {"event_type": "batch_element_failed", "index": 3, ...,
    "timestamp": "...", "level": "warning", "logger_name": "txwire.convert.expiring"}
    """
    # Lazy proxy: module-level loggers pick up later configure_structlog() calls
    return structlog.get_logger(name, logger_name=name)


def bind_bundle(bundle_id: str) -> structlog.BoundLogger:
    """Return a logger with bundle_id bound to all subsequent log calls."""
    return get_logger("txwire").bind(bundle_id=bundle_id)
