"""
State Reducer - Pure (state, action) -> next state.

Two entry points:

    transition(state, action) -> TransitionResult
        Full decision: next state, status (applied / unchanged / rejected)
        and the error that caused a rejection or a soft no-op.

    reduce(state, action) -> ApplicationState
        The dispatcher-facing form. Returns transition(...).state and logs
        rejected actions instead of raising.

Rules:
- Pure: no I/O, no clocks, no hidden context. Same input, same output.
- Total: every action is handled. Unknown kinds are identity transitions.
- Never mutates its input; unchanged sub-trees are shared with the result.
- A rejected action returns the prior state object unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable

from . import sequence
from .actions import Action, ActionKind
from .errors import NotFoundError, StateError, ValidationError
from .states import (
    ApplicationState,
    AudioSource,
    SourceID,
    auto_id_counter,
    auto_source_id,
    initial_state,
)
from .validation import (
    validate_resize,
    validate_source_add,
    validate_source_move,
    validate_source_ref,
)

logger = logging.getLogger(__name__)


class TransitionStatus(Enum):
    """Outcome of a single transition."""
    APPLIED = "applied"        # A new snapshot was produced
    UNCHANGED = "unchanged"    # Valid action with no effect (idempotent, unknown id or kind)
    REJECTED = "rejected"      # Payload failed validation


@dataclass(frozen=True)
class TransitionResult:
    """Result of applying one action to one snapshot."""
    state: ApplicationState
    action: Action
    status: TransitionStatus
    error: StateError | None = None

    @property
    def applied(self) -> bool:
        return self.status == TransitionStatus.APPLIED

    @property
    def rejected(self) -> bool:
        return self.status == TransitionStatus.REJECTED

    @property
    def reason(self) -> str:
        """Human-readable reason for the outcome."""
        if self.error is not None:
            return self.error.message
        if self.status == TransitionStatus.APPLIED:
            return f"{self.action.kind} applied"
        return f"{self.action.kind or '<empty>'} left state unchanged"


# =============================================================================
# Transition handlers
# =============================================================================

Handler = Callable[[ApplicationState, Any], ApplicationState]


def _reset(state: ApplicationState, value: Any) -> ApplicationState:
    return initial_state()


def _resize(state: ApplicationState, value: Any) -> ApplicationState:
    size = validate_resize(value)
    if size == state.size:
        return state
    return replace(state, size=size)


def _set_muted(muted: bool) -> Handler:
    def handler(state: ApplicationState, value: Any) -> ApplicationState:
        if state.muted == muted:
            return state
        return replace(state, muted=muted)
    return handler


def _find(state: ApplicationState, kind: ActionKind, source_id: SourceID) -> int:
    index = sequence.index_of(state.audio_sources, lambda s: s.id == source_id)
    if index < 0:
        raise NotFoundError(source_id, kind=kind.value)
    return index


def _source_add(state: ApplicationState, value: Any) -> ApplicationState:
    parsed = validate_source_add(value, state)

    next_source_id = state.next_source_id
    source_id = parsed.id
    if source_id is None:
        taken = set(state.source_ids)
        counter = state.next_source_id
        while auto_source_id(counter) in taken:
            counter += 1
        source_id = auto_source_id(counter)
        next_source_id = counter + 1
    else:
        # Explicit ids in the automatic format use up that counter value
        counter = auto_id_counter(source_id)
        if counter is not None and counter >= next_source_id:
            next_source_id = counter + 1

    source = AudioSource(
        id=source_id,
        label=parsed.label,
        source=parsed.source,
        muted=parsed.muted,
    )
    return replace(
        state,
        audio_sources=sequence.append(state.audio_sources, source),
        next_source_id=next_source_id,
    )


def _source_remove(state: ApplicationState, value: Any) -> ApplicationState:
    source_id = validate_source_ref(ActionKind.SOURCE_REMOVE, value)
    index = _find(state, ActionKind.SOURCE_REMOVE, source_id)
    return replace(state, audio_sources=sequence.remove_at(state.audio_sources, index))


def _set_source_muted(kind: ActionKind, muted: bool) -> Handler:
    def handler(state: ApplicationState, value: Any) -> ApplicationState:
        source_id = validate_source_ref(kind, value)
        index = _find(state, kind, source_id)
        current = state.audio_sources[index]
        if current.muted == muted:
            return state
        sources = sequence.replace_at(
            state.audio_sources, index, replace(current, muted=muted)
        )
        return replace(state, audio_sources=sources)
    return handler


def _source_move(state: ApplicationState, value: Any) -> ApplicationState:
    parsed = validate_source_move(value)
    index = _find(state, ActionKind.SOURCE_MOVE, parsed.id)
    sources = sequence.move(state.audio_sources, index, parsed.to_index)
    if sources is state.audio_sources:
        return state
    return replace(state, audio_sources=sources)


HANDLERS: dict[str, Handler] = {
    ActionKind.RESET.value: _reset,
    ActionKind.RESIZE.value: _resize,
    ActionKind.MUTE.value: _set_muted(True),
    ActionKind.UNMUTE.value: _set_muted(False),
    ActionKind.SOURCE_ADD.value: _source_add,
    ActionKind.SOURCE_REMOVE.value: _source_remove,
    ActionKind.SOURCE_MUTE.value: _set_source_muted(ActionKind.SOURCE_MUTE, True),
    ActionKind.SOURCE_UNMUTE.value: _set_source_muted(ActionKind.SOURCE_UNMUTE, False),
    ActionKind.SOURCE_MOVE.value: _source_move,
}


# =============================================================================
# Entry points
# =============================================================================

def as_action(action: Any) -> Action:
    """
    Normalize whatever was dispatched into an Action.

    Accepts Action instances, {"kind"|"type": ..., "value": ...} mappings
    and bare kind strings. Anything else becomes an action with an empty
    (unknown) kind.
    """
    if isinstance(action, Action):
        return action
    if isinstance(action, Mapping):
        return Action.from_dict(action)
    if isinstance(action, str):
        return Action(kind=action)
    return Action(kind="")


def transition(state: ApplicationState | None, action: Any) -> TransitionResult:
    """
    Apply one action to one snapshot.

    Args:
        state: Current snapshot, or None on first use
        action: Action to apply (see as_action for accepted shapes)

    Returns:
        TransitionResult with the next snapshot and the decision
    """
    if state is None:
        state = initial_state()
    action = as_action(action)

    handler = HANDLERS.get(action.kind) if isinstance(action.kind, str) else None
    if handler is None:
        return TransitionResult(state, action, TransitionStatus.UNCHANGED)

    try:
        next_state = handler(state, action.value)
    except ValidationError as e:
        return TransitionResult(state, action, TransitionStatus.REJECTED, e)
    except NotFoundError as e:
        return TransitionResult(state, action, TransitionStatus.UNCHANGED, e)

    status = TransitionStatus.UNCHANGED if next_state is state else TransitionStatus.APPLIED
    return TransitionResult(next_state, action, status)


def reduce(state: ApplicationState | None, action: Any) -> ApplicationState:
    """
    Compute the next snapshot from the current one and an action.

    Called with state=None on first use to obtain the initial state.
    Rejected actions are logged and leave the state unchanged.
    """
    result = transition(state, action)
    if result.rejected:
        logger.warning("Rejected %s action: %s", result.action.kind, result.reason)
    elif isinstance(result.error, NotFoundError):
        logger.debug("Ignored %s action: %s", result.action.kind, result.reason)
    return result.state
