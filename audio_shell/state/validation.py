"""
Payload Validation - One validator per action kind.

Each validator takes the raw payload (and, where needed, the current
snapshot) and returns a normalized form, or raises ValidationError that
names the kind and the offending field.

Payload fields are read from mappings. Both camelCase (as dispatched by
the original UI) and snake_case spellings are accepted for multi-word
fields, e.g. "toIndex" / "to_index".
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .actions import ActionKind
from .errors import ValidationError
from .states import ApplicationState, Size, SourceID


_MISSING = object()


@dataclass(frozen=True)
class SourceSpec:
    """Normalized source-add payload. id is None when it must be assigned."""
    id: SourceID | None
    label: Any
    source: Any
    muted: bool


@dataclass(frozen=True)
class MoveSpec:
    """Normalized source-move payload (to_index not yet clamped)."""
    id: SourceID
    to_index: int


def is_int(value: Any) -> bool:
    """True for ints, excluding bools."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_source_id(value: Any) -> bool:
    if isinstance(value, str):
        return bool(value)
    return is_int(value)


def _payload(kind: ActionKind, value: Any, allow_none: bool = False) -> Mapping:
    if value is None and allow_none:
        return {}
    if not isinstance(value, Mapping):
        raise ValidationError(
            kind.value,
            f"Payload must be a mapping, got {type(value).__name__}",
            value=value,
        )
    return value


def _get(payload: Mapping, *names: str) -> Any:
    for name in names:
        if name in payload:
            return payload[name]
    return _MISSING


def _require_id(kind: ActionKind, payload: Mapping) -> SourceID:
    source_id = _get(payload, "id")
    if source_id is _MISSING:
        raise ValidationError(kind.value, "Missing required field", field="id")
    if not is_source_id(source_id):
        raise ValidationError(
            kind.value,
            f"Source id must be a non-empty string or an integer, got {source_id!r}",
            field="id",
            value=source_id,
        )
    return source_id


def validate_resize(value: Any) -> Size:
    """Validate a resize payload: non-negative integer width and height."""
    if isinstance(value, Size):
        value = value.to_dict()
    payload = _payload(ActionKind.RESIZE, value)

    dims = {}
    for name in ("width", "height"):
        dim = _get(payload, name)
        if dim is _MISSING:
            raise ValidationError(ActionKind.RESIZE.value, "Missing required field", field=name)
        if not is_int(dim):
            raise ValidationError(
                ActionKind.RESIZE.value,
                f"Dimension must be an integer, got {dim!r}",
                field=name,
                value=dim,
            )
        if dim < 0:
            raise ValidationError(
                ActionKind.RESIZE.value,
                f"Dimension must be >= 0, got {dim}",
                field=name,
                value=dim,
            )
        dims[name] = dim

    return Size(width=dims["width"], height=dims["height"])


def validate_source_add(value: Any, state: ApplicationState) -> SourceSpec:
    """
    Validate a source-add payload.

    An explicit id must not already be present in state. A missing or
    None payload adds an unlabelled source with an automatic id.
    """
    kind = ActionKind.SOURCE_ADD
    payload = _payload(kind, value, allow_none=True)

    source_id = _get(payload, "id")
    if source_id is _MISSING or source_id is None:
        source_id = None
    elif not is_source_id(source_id):
        raise ValidationError(
            kind.value,
            f"Source id must be a non-empty string or an integer, got {source_id!r}",
            field="id",
            value=source_id,
        )
    elif source_id in state.source_ids:
        raise ValidationError(
            kind.value,
            f"Duplicate source id: {source_id!r}",
            field="id",
            value=source_id,
        )

    label = _get(payload, "label")
    if label is _MISSING:
        label = None

    source = _get(payload, "source")
    if source is _MISSING:
        source = None

    muted = _get(payload, "muted")
    if muted is _MISSING:
        muted = False
    elif not isinstance(muted, bool):
        raise ValidationError(
            kind.value,
            f"muted must be a boolean, got {muted!r}",
            field="muted",
            value=muted,
        )

    return SourceSpec(id=source_id, label=label, source=source, muted=muted)


def validate_source_ref(kind: ActionKind, value: Any) -> SourceID:
    """Validate payloads that only reference a source: remove, mute, unmute."""
    return _require_id(kind, _payload(kind, value))


def validate_source_move(value: Any) -> MoveSpec:
    """Validate a source-move payload: id plus an integer target index."""
    kind = ActionKind.SOURCE_MOVE
    payload = _payload(kind, value)
    source_id = _require_id(kind, payload)

    to_index = _get(payload, "toIndex", "to_index")
    if to_index is _MISSING:
        raise ValidationError(kind.value, "Missing required field", field="toIndex")
    if not is_int(to_index):
        raise ValidationError(
            kind.value,
            f"Target index must be an integer, got {to_index!r}",
            field="toIndex",
            value=to_index,
        )

    return MoveSpec(id=source_id, to_index=to_index)
