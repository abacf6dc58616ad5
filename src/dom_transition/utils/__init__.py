"""Utility modules for DOM transition recording.

Provides:
- Structured logging configuration
"""

from .logging import configure_logging, get_logger, LogContext

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
]
