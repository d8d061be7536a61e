"""Logging module for formsemantics."""

from .logger import (
    LogContext,
    PerformanceLogger,
    get_logger,
    mark_logging_initialized,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "mark_logging_initialized",
    "LogContext",
    "PerformanceLogger",
]
