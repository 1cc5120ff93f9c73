"""
Runtime settings for txwire.

Conversion rules (packet buffer size, message hash length) are fixed
constants of the wire contract and live next to the code that enforces
them; only ambient concerns are configurable here.
"""

from __future__ import annotations

from dataclasses import dataclass

from txwire.config.env import get_log_format, get_log_level


@dataclass(frozen=True)
class Settings:
    """Resolved settings snapshot."""

    log_level: str
    """Minimum structlog level name (e.g. INFO)."""
    log_format: str
    """json for aggregation-friendly output, console for local runs."""


def get_settings() -> Settings:
    """Return the current settings, read from env (and .env) on each call."""
    return Settings(
        log_level=get_log_level(),
        log_format=get_log_format(),
    )
