"""
Audio Shell State Module - Actions, snapshots and the pure reducer.

Unidirectional flow:

    host event ──► action creator ──► Action(kind, value)
                                          │
                                          ▼
    snapshot ───────────────────────► reduce(state, action) ──► next snapshot
                                                                     │
                                                       observers ◄───┘

Everything in this package is pure. Ownership of the current snapshot and
publication to observers live in audio_shell.runtime.
"""

from .actions import (
    ACTION_CREATORS,
    Action,
    ActionKind,
    app_mute,
    app_reset,
    app_resize,
    app_unmute,
    audio_source_add,
    audio_source_move,
    audio_source_mute,
    audio_source_remove,
    audio_source_unmute,
    make_action,
)
from .errors import (
    InvariantViolationError,
    NotFoundError,
    StateError,
    ValidationError,
)
from .invariants import InvariantViolation, check_invariants
from .reducer import TransitionResult, TransitionStatus, reduce, transition
from .selectors import audible_sources, find_source, is_audible, select_app, source_index
from .states import (
    INITIAL_STATE,
    ApplicationState,
    AudioSource,
    Size,
    SourceID,
    initial_state,
)

__all__ = [
    # Actions
    "Action",
    "ActionKind",
    "ACTION_CREATORS",
    "make_action",
    "app_reset",
    "app_resize",
    "app_mute",
    "app_unmute",
    "audio_source_add",
    "audio_source_remove",
    "audio_source_mute",
    "audio_source_unmute",
    "audio_source_move",
    # States
    "ApplicationState",
    "AudioSource",
    "Size",
    "SourceID",
    "INITIAL_STATE",
    "initial_state",
    # Reducer
    "reduce",
    "transition",
    "TransitionResult",
    "TransitionStatus",
    # Selectors
    "select_app",
    "find_source",
    "source_index",
    "is_audible",
    "audible_sources",
    # Invariants
    "InvariantViolation",
    "check_invariants",
    # Errors
    "StateError",
    "ValidationError",
    "NotFoundError",
    "InvariantViolationError",
]
