"""
Structured logging for Audio Shell.
"""

from __future__ import annotations

import json
import logging
import sys
import threading
import time
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, TextIO


class LogLevel(Enum):
    """Log levels."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def numeric(self) -> int:
        """Get numeric log level."""
        return {
            "debug": logging.DEBUG,
            "info": logging.INFO,
            "warning": logging.WARNING,
            "error": logging.ERROR,
        }[self.value]


@dataclass
class LogRecord:
    """A structured log record.

    Attributes:
        level: Log level.
        event: Event name.
        message: Human-readable message.
        timestamp: Unix timestamp.
        data: Additional structured data, flattened into the output.
    """

    level: str
    event: str
    message: str = ""
    timestamp: float = field(default_factory=time.time)
    data: dict[str, Any] = field(default_factory=dict)
    logger_name: str = ""

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d.update(d.pop("data", {}))
        return d

    def to_json(self) -> str:
        # Opaque source descriptors may not be JSON-native
        return json.dumps(self.to_dict(), default=repr)


class StructuredLogger:
    """Event-based logger emitting one line per record.

    Example:
        logger = StructuredLogger("audio_shell")
        logger.action_dispatched("resize", "applied", index=3)
        # {"level": "debug", "event": "action_dispatched", "kind": "resize", ...}

        store_logger = logger.bind(store="main")
        # All records from store_logger include store="main"
    """

    def __init__(
        self,
        name: str = "audio_shell",
        level: LogLevel = LogLevel.INFO,
        output: TextIO | None = None,
        json_format: bool = True,
    ):
        """Initialize the logger.

        Args:
            name: Logger name.
            level: Minimum log level.
            output: Output stream (default: stderr).
            json_format: Output as JSON (vs. human-readable).
        """
        self.name = name
        self._level = level
        self._output = output or sys.stderr
        self._json_format = json_format
        self._context: dict[str, Any] = {}
        self._lock = threading.Lock()

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def output(self) -> TextIO:
        return self._output

    @property
    def json_format(self) -> bool:
        return self._json_format

    def bind(self, **context: Any) -> "StructuredLogger":
        """Create a new logger with bound context."""
        new_logger = StructuredLogger(
            name=self.name,
            level=self._level,
            output=self._output,
            json_format=self._json_format,
        )
        new_logger._context = {**self._context, **context}
        return new_logger

    def _log(self, level: LogLevel, event: str, message: str = "", **data: Any) -> None:
        if level.numeric < self._level.numeric:
            return

        record = LogRecord(
            level=level.value,
            event=event,
            message=message,
            data={**self._context, **data},
            logger_name=self.name,
        )

        with self._lock:
            if self._json_format:
                line = record.to_json()
            else:
                line = self._format_human(record)
            print(line, file=self._output)

    def _format_human(self, record: LogRecord) -> str:
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(record.timestamp))
        parts = [f"[{timestamp}]", f"[{record.level.upper()}]", f"[{record.event}]"]
        if record.message:
            parts.append(record.message)
        if record.data:
            data_str = " ".join(f"{k}={v}" for k, v in record.data.items())
            parts.append(f"({data_str})")
        return " ".join(parts)

    def debug(self, event: str, message: str = "", **data: Any) -> None:
        self._log(LogLevel.DEBUG, event, message, **data)

    def info(self, event: str, message: str = "", **data: Any) -> None:
        self._log(LogLevel.INFO, event, message, **data)

    def warning(self, event: str, message: str = "", **data: Any) -> None:
        self._log(LogLevel.WARNING, event, message, **data)

    def error(self, event: str, message: str = "", **data: Any) -> None:
        self._log(LogLevel.ERROR, event, message, **data)

    # Store events

    def action_dispatched(self, kind: str, status: str, **extra: Any) -> None:
        """Log a dispatched action that was not rejected."""
        self.debug("action_dispatched", kind=kind, status=status, **extra)

    def action_rejected(self, kind: str, reason: str, **extra: Any) -> None:
        """Log an action whose payload failed validation."""
        self.warning("action_rejected", reason, kind=kind, **extra)

    def state_replayed(self, action_count: int, **extra: Any) -> None:
        self.info(
            "state_replayed",
            f"Replayed {action_count} actions",
            action_count=action_count,
            **extra,
        )


_global_logger: StructuredLogger | None = None


def configure_logging(
    level: LogLevel | str = LogLevel.INFO,
    output: TextIO | None = None,
    json_format: bool = True,
) -> StructuredLogger:
    """Configure the module-level logger.

    Args:
        level: Log level.
        output: Output stream.
        json_format: Use JSON format.

    Returns:
        Configured logger.
    """
    global _global_logger

    if isinstance(level, str):
        level = LogLevel(level)

    _global_logger = StructuredLogger(
        name="audio_shell",
        level=level,
        output=output,
        json_format=json_format,
    )
    return _global_logger


def get_logger() -> StructuredLogger:
    """Get the module-level logger, creating a default one if needed."""
    global _global_logger

    if _global_logger is None:
        _global_logger = StructuredLogger()
    return _global_logger
