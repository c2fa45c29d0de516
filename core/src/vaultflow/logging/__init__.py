"""Logging infrastructure for vaultflow.

This module provides structured logging with JSON output, context tracking,
and OpenTelemetry trace correlation.
"""

from vaultflow.logging.filters import ContextFilter
from vaultflow.logging.logger import CustomJsonFormatter, get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "CustomJsonFormatter",
    "ContextFilter",
]
