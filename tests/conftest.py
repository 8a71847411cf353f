"""
Shared fixtures for state and store tests.
"""

from __future__ import annotations

import io

import pytest

from audio_shell.monitoring.logging import LogLevel, StructuredLogger
from audio_shell.runtime import Store, StoreConfig
from audio_shell.state import (
    ApplicationState,
    AudioSource,
    Size,
    initial_state,
)


@pytest.fixture
def log_output() -> io.StringIO:
    """Captures structured log lines."""
    return io.StringIO()


@pytest.fixture
def structured_logger(log_output: io.StringIO) -> StructuredLogger:
    return StructuredLogger(level=LogLevel.DEBUG, output=log_output)


@pytest.fixture
def store(structured_logger: StructuredLogger) -> Store:
    """An isolated store starting from the initial state."""
    return Store(config=StoreConfig(check_invariants=True), logger=structured_logger)


@pytest.fixture
def empty_state() -> ApplicationState:
    return initial_state()


@pytest.fixture
def three_sources() -> ApplicationState:
    """A sized state with sources a, b, c (b muted)."""
    return ApplicationState(
        size=Size(width=1024, height=768),
        audio_sources=(
            AudioSource(id="a", label="mic"),
            AudioSource(id="b", label="line in", muted=True),
            AudioSource(id="c", label="loopback", source={"device": 3}),
        ),
        muted=False,
        next_source_id=1,
    )
