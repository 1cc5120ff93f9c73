"""
Environment variable loading for txwire.

- LOG_LEVEL: DEBUG | INFO | WARNING | ERROR (default: INFO)
- LOG_FORMAT: json | console (default: json)
- Loads .env from project root when available.

No txwire imports here; the logging package reads these at import time.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is txwire/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "json"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_LOG_FORMATS = ("json", "console")


def load_txwire_env() -> None:
    """Load .env from project root. Safe to call multiple times; existing env wins."""
    load_dotenv(_ENV_PATH, override=False)


def get_log_level() -> str:
    """
    Return LOG_LEVEL from env, upper-cased.
    Unknown values fall back to INFO.
    """
    load_txwire_env()
    raw = (os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    if raw in VALID_LOG_LEVELS:
        return raw
    return DEFAULT_LOG_LEVEL


def get_log_format() -> str:
    """
    Return LOG_FORMAT from env: json | console.
    Default: json.
    """
    load_txwire_env()
    raw = (os.getenv("LOG_FORMAT") or DEFAULT_LOG_FORMAT).strip().lower()
    if raw in VALID_LOG_FORMATS:
        return raw
    return DEFAULT_LOG_FORMAT
