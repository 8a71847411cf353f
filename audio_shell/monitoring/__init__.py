"""
Monitoring for Audio Shell.

Components:
    StructuredLogger - JSON structured logging for store events

Example:
    from audio_shell.monitoring import configure_logging

    logger = configure_logging(level="debug", json_format=False)
"""

from audio_shell.monitoring.logging import (
    StructuredLogger,
    LogLevel,
    LogRecord,
    configure_logging,
    get_logger,
)

__all__ = [
    "StructuredLogger",
    "LogLevel",
    "LogRecord",
    "configure_logging",
    "get_logger",
]
