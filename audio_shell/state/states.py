"""
Application State Models - Immutable snapshots of the shell's state tree.

A snapshot is replaced wholesale on every transition:

    ApplicationState
    ├── size: Size(width, height)
    ├── audio_sources: (AudioSource, ...)   # order is display/playback order
    ├── muted: bool                         # global mute flag
    └── next_source_id: int                 # counter for automatic ids

All models are frozen dataclasses. Transitions build new instances with
dataclasses.replace(), so unaffected sub-trees are shared between the old
and the new snapshot.

Serialized shape (to_dict / from_dict):
    {
        "size": {"width": 0, "height": 0},
        "audioSources": [{"id": ..., "label": ..., "source": ..., "muted": false}],
        "muted": false,
        "nextSourceId": 1
    }
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

# Source identifiers are opaque strings or integers
SourceID = Union[str, int]

AUTO_ID_PREFIX = "source"


@dataclass(frozen=True)
class Size:
    """Last known viewport dimensions."""
    width: int = 0
    height: int = 0

    def to_dict(self) -> dict[str, int]:
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True)
class AudioSource:
    """
    A logical audio input tracked by the shell.

    `label` and `source` describe the underlying input and are never
    interpreted by the reducer.
    """
    id: SourceID
    label: Any = None
    source: Any = None
    muted: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "source": self.source,
            "muted": self.muted,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AudioSource:
        return cls(
            id=data["id"],
            label=data.get("label"),
            source=data.get("source"),
            muted=bool(data.get("muted", False)),
        )


@dataclass(frozen=True)
class ApplicationState:
    """
    Complete application state - the root snapshot.

    Held by a single owner (usually a Store) and replaced, never mutated.
    """
    size: Size = field(default_factory=Size)
    audio_sources: tuple[AudioSource, ...] = ()
    muted: bool = False
    next_source_id: int = 1

    @property
    def source_ids(self) -> tuple[SourceID, ...]:
        """Ids of all sources, in order."""
        return tuple(s.id for s in self.audio_sources)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the plain serializable shape."""
        return {
            "size": self.size.to_dict(),
            "audioSources": [s.to_dict() for s in self.audio_sources],
            "muted": self.muted,
            "nextSourceId": self.next_source_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ApplicationState:
        """
        Create ApplicationState from its serialized shape.

        Missing sections fall back to the initial state's values.

        Args:
            data: Dict as produced by to_dict()

        Returns:
            ApplicationState instance
        """
        size_data = data.get("size") or {}
        sources = tuple(
            AudioSource.from_dict(s) for s in data.get("audioSources", [])
        )
        return cls(
            size=Size(
                width=size_data.get("width", 0),
                height=size_data.get("height", 0),
            ),
            audio_sources=sources,
            muted=bool(data.get("muted", False)),
            next_source_id=data.get("nextSourceId", len(sources) + 1),
        )


INITIAL_STATE = ApplicationState()


def initial_state() -> ApplicationState:
    """The state a fresh store starts from (and reset returns to)."""
    return INITIAL_STATE


def auto_source_id(counter: int) -> str:
    """Format an automatically assigned source id."""
    return f"{AUTO_ID_PREFIX}-{counter}"


def auto_id_counter(source_id: SourceID) -> int | None:
    """Counter value of an id in the automatic format, or None."""
    if not isinstance(source_id, str):
        return None
    prefix, _, counter = source_id.rpartition("-")
    if prefix != AUTO_ID_PREFIX or not (counter.isascii() and counter.isdigit()):
        return None
    return int(counter)
