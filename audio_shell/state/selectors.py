"""
Selectors - Read-only views of a snapshot for observers.

Observers (views, audio routing) never touch the snapshot's internals
directly; they read it through these functions.
"""

from __future__ import annotations

from typing import Any

from . import sequence
from .states import ApplicationState, AudioSource, SourceID


def select_app(state: ApplicationState) -> dict[str, Any]:
    """Plain-dict view of the whole state, in its serialized shape."""
    return state.to_dict()


def source_index(state: ApplicationState, source_id: SourceID) -> int:
    """Position of a source in display order, or -1."""
    return sequence.index_of(state.audio_sources, lambda s: s.id == source_id)


def find_source(state: ApplicationState, source_id: SourceID) -> AudioSource | None:
    index = source_index(state, source_id)
    return state.audio_sources[index] if index >= 0 else None


def is_audible(state: ApplicationState, source_id: SourceID) -> bool:
    """A source is audible when it exists and neither it nor the app is muted."""
    source = find_source(state, source_id)
    return source is not None and not source.muted and not state.muted


def audible_sources(state: ApplicationState) -> tuple[AudioSource, ...]:
    if state.muted:
        return ()
    return tuple(s for s in state.audio_sources if not s.muted)
