"""
State Invariants - Structural checks over a snapshot.

Invariants:
    state.sources.unique_ids      - no two sources share an id
    state.sources.valid_ids       - every id is a non-empty string or an int
    state.size.non_negative       - width and height are >= 0
    state.counter.positive        - next_source_id is >= 1

The reducer maintains all of these by construction. They are checked by
tests and, when configured, by the Store after every dispatch.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from .states import ApplicationState
from .validation import is_int, is_source_id


@dataclass
class InvariantViolation:
    """Record of an invariant violation."""
    invariant_id: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"invariant_id": self.invariant_id, "message": self.message}


class StateInvariant(ABC):
    """Base class for snapshot invariants."""

    @property
    @abstractmethod
    def id(self) -> str:
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        ...

    @abstractmethod
    def check(self, state: ApplicationState) -> list[InvariantViolation]:
        """Return an empty list when the invariant holds."""
        ...

    def _violation(self, message: str) -> InvariantViolation:
        return InvariantViolation(invariant_id=self.id, message=message)


class UniqueSourceIdsInvariant(StateInvariant):
    id = "state.sources.unique_ids"
    description = "Audio sources never share an id"

    def check(self, state: ApplicationState) -> list[InvariantViolation]:
        seen = set()
        violations = []
        for source_id in state.source_ids:
            if source_id in seen:
                violations.append(self._violation(f"Duplicate source id {source_id!r}"))
            seen.add(source_id)
        return violations


class ValidSourceIdsInvariant(StateInvariant):
    id = "state.sources.valid_ids"
    description = "Source ids are non-empty strings or integers"

    def check(self, state: ApplicationState) -> list[InvariantViolation]:
        return [
            self._violation(f"Invalid source id {source_id!r}")
            for source_id in state.source_ids
            if not is_source_id(source_id)
        ]


class NonNegativeSizeInvariant(StateInvariant):
    id = "state.size.non_negative"
    description = "Viewport width and height are non-negative integers"

    def check(self, state: ApplicationState) -> list[InvariantViolation]:
        violations = []
        for name in ("width", "height"):
            value = getattr(state.size, name)
            if not is_int(value) or value < 0:
                violations.append(self._violation(f"size.{name} is {value!r}"))
        return violations


class PositiveCounterInvariant(StateInvariant):
    id = "state.counter.positive"
    description = "The automatic id counter starts at 1 and never goes below"

    def check(self, state: ApplicationState) -> list[InvariantViolation]:
        if is_int(state.next_source_id) and state.next_source_id >= 1:
            return []
        return [self._violation(f"next_source_id is {state.next_source_id!r}")]


STATE_INVARIANTS: tuple[StateInvariant, ...] = (
    UniqueSourceIdsInvariant(),
    ValidSourceIdsInvariant(),
    NonNegativeSizeInvariant(),
    PositiveCounterInvariant(),
)


def check_invariants(
    state: ApplicationState,
    invariants: tuple[StateInvariant, ...] = STATE_INVARIANTS,
) -> list[InvariantViolation]:
    """Check a snapshot against every invariant."""
    violations = []
    for invariant in invariants:
        violations.extend(invariant.check(state))
    return violations


def list_invariants() -> list[dict[str, str]]:
    return [{"id": inv.id, "description": inv.description} for inv in STATE_INVARIANTS]
