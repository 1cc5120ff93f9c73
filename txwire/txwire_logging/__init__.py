"""
Structured logging for txwire.

Use get_logger() in every module for aggregation-friendly output.
"""

from txwire.txwire_logging.logger import bind_bundle, configure_structlog, get_logger

__all__ = ["bind_bundle", "configure_structlog", "get_logger"]
