"""
Store configuration for Audio Shell.
"""

from __future__ import annotations

from dataclasses import dataclass

from audio_shell.monitoring.logging import LogLevel


@dataclass
class StoreConfig:
    """Configuration for a Store.

    Args:
        history_limit: Number of dispatched actions kept for inspection
            and replay. 0 disables history.
        check_invariants: Check every new snapshot against the state
            invariants and raise InvariantViolationError on failure.
        log_level: Minimum level for the store's structured logger. None
            keeps the level of the logger set up by configure_logging().
        json_logs: Emit JSON lines (vs. human-readable lines). None keeps
            the format of the configured logger.

    Example:
        config = StoreConfig(history_limit=500, check_invariants=True)
    """

    history_limit: int = 100
    """Maximum number of history entries kept."""

    check_invariants: bool = False
    """Verify invariants after each applied transition."""

    log_level: LogLevel | None = None
    """Minimum structured log level (None: inherit)."""

    json_logs: bool | None = None
    """Structured logs as JSON lines."""

    def __post_init__(self) -> None:
        """Validate configuration."""
        if isinstance(self.log_level, str):
            self.log_level = LogLevel(self.log_level)
        if isinstance(self.history_limit, bool) or not isinstance(self.history_limit, int):
            raise ValueError("history_limit must be an integer")
        if self.history_limit < 0:
            raise ValueError("history_limit must be >= 0")
