"""
Audio Shell - Application state core for an audio front-end.

Tracks the window size, a global mute flag and an ordered list of audio
sources with a unidirectional update pattern: one store, dispatched
actions, and a pure reducer.

Public API (stable):
    reduce          - Pure (state, action) -> next state
    transition      - Same, returning a TransitionResult with status and error
    Store           - Owns the current snapshot, notifies subscribers
    ApplicationState, AudioSource, Size - Immutable snapshot models
    app_* / audio_source_* - Action creators

Components:
    state           - Actions, snapshots, reducer, validation, selectors
    runtime         - Store, StoreConfig, WindowSizeTracker
    debug           - diff_states for comparing snapshots
    monitoring      - StructuredLogger, configure_logging

Example:
    from audio_shell import Store, app_resize, audio_source_add, audio_source_move

    store = Store()
    store.dispatch(app_resize({"width": 800, "height": 600}))
    store.dispatch(audio_source_add({"id": "a", "label": "mic"}))
    store.dispatch(audio_source_add({"id": "b", "label": "line in"}))
    store.dispatch(audio_source_move({"id": "a", "toIndex": 1}))

    print(store.state.source_ids)   # ('b', 'a')
"""

__version__ = "0.1.0"

from audio_shell.state import (
    ACTION_CREATORS,
    INITIAL_STATE,
    Action,
    ActionKind,
    ApplicationState,
    AudioSource,
    InvariantViolationError,
    NotFoundError,
    Size,
    StateError,
    TransitionResult,
    TransitionStatus,
    ValidationError,
    app_mute,
    app_reset,
    app_resize,
    app_unmute,
    audio_source_add,
    audio_source_move,
    audio_source_mute,
    audio_source_remove,
    audio_source_unmute,
    initial_state,
    make_action,
    reduce,
    transition,
)
from audio_shell.runtime import Store, StoreConfig, WindowSizeTracker

__all__ = [
    "__version__",
    # Reducer
    "reduce",
    "transition",
    "TransitionResult",
    "TransitionStatus",
    # States
    "ApplicationState",
    "AudioSource",
    "Size",
    "INITIAL_STATE",
    "initial_state",
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
    # Runtime
    "Store",
    "StoreConfig",
    "WindowSizeTracker",
    # Errors
    "StateError",
    "ValidationError",
    "NotFoundError",
    "InvariantViolationError",
]
