"""
State Errors - Error types raised or reported by the state core.

Error hierarchy:
    StateError (base)
    ├── ValidationError
    ├── NotFoundError (soft, reported but never raised by reduce)
    └── InvariantViolationError
"""

from __future__ import annotations

from typing import Any


class StateError(Exception):
    """Base error for all state-related errors."""
    
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(StateError):
    """
    Raised when an action payload is missing fields or out of range.
    
    The reducer catches this and reports it on the TransitionResult,
    leaving the prior state untouched.
    """
    
    def __init__(
        self,
        kind: str,
        message: str,
        field: str | None = None,
        value: Any = None,
        details: dict[str, Any] | None = None,
    ):
        location = f"{kind}.{field}" if field else kind
        super().__init__(f"[{location}] {message}", details)
        self.kind = kind
        self.field = field
        self.value = value


class NotFoundError(StateError):
    """
    A source id referenced by an action does not exist.
    
    Soft error: the transition is a no-op and the error is only
    attached to the result.
    """
    
    def __init__(
        self,
        source_id: Any,
        kind: str = "",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(f"Audio source not found: {source_id!r}", details)
        self.source_id = source_id
        self.kind = kind


class InvariantViolationError(StateError):
    """
    Raised when a snapshot breaks a structural invariant.
    
    Only a store configured with check_invariants=True raises this.
    """
    
    def __init__(
        self,
        invariant_id: str,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(f"[{invariant_id}] {message}", details)
        self.invariant_id = invariant_id
