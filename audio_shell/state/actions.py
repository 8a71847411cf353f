"""
Action Factory - Tagged records describing intended state changes.

Every action is a (kind, value) pair. The factory functions below are thin
partial applications of make_action() that fix the kind; none of them look
at the payload. Validation happens in the reducer.

Usage:
    from audio_shell.state.actions import app_resize, audio_source_add

    action = app_resize({"width": 800, "height": 600})
    action = audio_source_add({"label": "mic"})
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Any, Callable


class ActionKind(str, Enum):
    """The action kinds the reducer understands."""

    # Application
    RESET = "reset"
    RESIZE = "resize"
    MUTE = "mute"
    UNMUTE = "unmute"

    # Audio sources
    SOURCE_ADD = "source-add"
    SOURCE_REMOVE = "source-remove"
    SOURCE_MUTE = "source-mute"
    SOURCE_UNMUTE = "source-unmute"
    SOURCE_MOVE = "source-move"


KNOWN_KINDS = frozenset(k.value for k in ActionKind)


@dataclass(frozen=True)
class Action:
    """
    A dispatched action.

    `kind` is an ActionKind value for known actions; any other string is
    allowed and treated as an unknown kind by the reducer.
    """
    kind: str
    value: Any = None

    def __post_init__(self) -> None:
        # Store plain strings so equality does not depend on how kind was given
        if isinstance(self.kind, ActionKind):
            object.__setattr__(self, "kind", self.kind.value)

    @property
    def known(self) -> bool:
        return isinstance(self.kind, str) and self.kind in KNOWN_KINDS

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "value": self.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Action:
        """Build an Action from {"kind": ..., "value": ...}.

        "type" is accepted in place of "kind".
        """
        kind = data.get("kind", data.get("type", ""))
        return cls(kind=kind, value=data.get("value"))


def make_action(kind: str | ActionKind, value: Any = None) -> Action:
    """Construct an action from a kind and a payload."""
    return Action(kind=kind, value=value)


ActionCreator = Callable[..., Action]

app_reset: ActionCreator = partial(make_action, ActionKind.RESET)
app_resize: ActionCreator = partial(make_action, ActionKind.RESIZE)
app_mute: ActionCreator = partial(make_action, ActionKind.MUTE)
app_unmute: ActionCreator = partial(make_action, ActionKind.UNMUTE)
audio_source_add: ActionCreator = partial(make_action, ActionKind.SOURCE_ADD)
audio_source_remove: ActionCreator = partial(make_action, ActionKind.SOURCE_REMOVE)
audio_source_mute: ActionCreator = partial(make_action, ActionKind.SOURCE_MUTE)
audio_source_unmute: ActionCreator = partial(make_action, ActionKind.SOURCE_UNMUTE)
audio_source_move: ActionCreator = partial(make_action, ActionKind.SOURCE_MOVE)


ACTION_CREATORS: dict[ActionKind, ActionCreator] = {
    ActionKind.RESET: app_reset,
    ActionKind.RESIZE: app_resize,
    ActionKind.MUTE: app_mute,
    ActionKind.UNMUTE: app_unmute,
    ActionKind.SOURCE_ADD: audio_source_add,
    ActionKind.SOURCE_REMOVE: audio_source_remove,
    ActionKind.SOURCE_MUTE: audio_source_mute,
    ActionKind.SOURCE_UNMUTE: audio_source_unmute,
    ActionKind.SOURCE_MOVE: audio_source_move,
}
