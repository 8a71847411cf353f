"""
Store - Owner of the current snapshot.

The store is the single authority for state changes in a running shell:

    1. An action is dispatched (from a view or a host signal)
    2. The pure reducer computes the transition
    3. The store commits the new snapshot
    4. Subscribers are notified with the new snapshot
    5. A history entry is recorded for inspection and replay

Stores are ordinary objects. The hosting application creates one and
hands it to whatever needs to dispatch or observe; there is no
process-wide instance.

Usage:
    store = Store()
    unsubscribe = store.subscribe(lambda state: render(state))

    result = store.dispatch(app_resize({"width": 800, "height": 600}))
    if result.rejected:
        log.info(f"Rejected: {result.reason}")
"""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from audio_shell.debug.diff import StateDiff, diff_states
from audio_shell.monitoring.logging import StructuredLogger, get_logger
from audio_shell.state.actions import Action, app_reset
from audio_shell.state.errors import InvariantViolationError
from audio_shell.state.invariants import check_invariants
from audio_shell.state.reducer import TransitionResult, TransitionStatus, transition
from audio_shell.state.states import ApplicationState, initial_state

from .config import StoreConfig

Listener = Callable[[ApplicationState], None]


@dataclass(frozen=True)
class HistoryEntry:
    """Record of one dispatched action and what it did."""
    index: int
    action: Action
    status: TransitionStatus
    diff: StateDiff

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "action": self.action.to_dict(),
            "status": self.status.value,
            "diff": self.diff.to_dict(),
        }


class Store:
    """
    Holds one ApplicationState and serializes every change to it.

    Dispatches are processed one at a time under a re-entrant lock, so a
    subscriber may dispatch from inside its callback; that nested
    dispatch completes before the outer dispatch returns.
    """

    def __init__(
        self,
        config: StoreConfig | None = None,
        state: ApplicationState | None = None,
        logger: StructuredLogger | None = None,
    ) -> None:
        self.config = config or StoreConfig()
        self._state = state if state is not None else initial_state()
        self._logger = logger or self._default_logger()
        self._lock = threading.RLock()
        self._listeners: list[Listener] = []
        self._history: deque[HistoryEntry] = deque(maxlen=self.config.history_limit)
        self._dispatch_count = 0

    def _default_logger(self) -> StructuredLogger:
        """The configured module-level logger, with StoreConfig overrides."""
        base = get_logger()
        if self.config.log_level is None and self.config.json_logs is None:
            return base.bind(component="store")
        return StructuredLogger(
            name=base.name,
            level=self.config.log_level or base.level,
            output=base.output,
            json_format=(
                base.json_format if self.config.json_logs is None else self.config.json_logs
            ),
        ).bind(component="store")

    @property
    def state(self) -> ApplicationState:
        """The latest snapshot."""
        return self._state

    @property
    def history(self) -> tuple[HistoryEntry, ...]:
        """Recorded history entries, oldest first."""
        with self._lock:
            return tuple(self._history)

    @property
    def dispatch_count(self) -> int:
        return self._dispatch_count

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called with each new snapshot.

        Listeners run only when a dispatch produced a new snapshot, in
        subscription order.

        Returns:
            A callable that removes the listener (safe to call twice)
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: Any, raise_on_reject: bool = False) -> TransitionResult:
        """
        Apply an action to the current snapshot.

        Args:
            action: Action, {"kind": ..., "value": ...} mapping or kind string
            raise_on_reject: Raise the ValidationError instead of only
                reporting it on the result

        Returns:
            TransitionResult describing the transition

        Raises:
            ValidationError: If raise_on_reject is set and the payload is invalid
            InvariantViolationError: If check_invariants is enabled and the
                new snapshot breaks an invariant (the snapshot is not committed)
        """
        with self._lock:
            before = self._state
            result = transition(before, action)

            if self.config.check_invariants and result.applied:
                violations = check_invariants(result.state)
                if violations:
                    first = violations[0]
                    raise InvariantViolationError(
                        first.invariant_id,
                        first.message,
                        details={
                            "action": result.action.to_dict(),
                            "violations": [v.to_dict() for v in violations],
                        },
                    )

            self._state = result.state
            index = self._dispatch_count
            self._dispatch_count += 1
            if self.config.history_limit:
                self._history.append(
                    HistoryEntry(
                        index=index,
                        action=result.action,
                        status=result.status,
                        diff=diff_states(before, result.state),
                    )
                )

            if result.rejected:
                self._logger.action_rejected(result.action.kind, result.reason, index=index)
                if raise_on_reject:
                    raise result.error
            else:
                self._logger.action_dispatched(
                    result.action.kind, result.status.value, index=index
                )

            if result.applied:
                for listener in list(self._listeners):
                    # A listener dispatched re-entrantly and the nested
                    # dispatch already notified everyone with a newer snapshot
                    if self._state is not result.state:
                        break
                    listener(result.state)

        return result

    def reset(self) -> TransitionResult:
        """Dispatch a reset action."""
        return self.dispatch(app_reset())

    def replay(
        self,
        actions: Iterable[Any],
        state: ApplicationState | None = None,
    ) -> "Store":
        """
        Replay actions into a fresh store.

        The reducer is deterministic, so replaying the actions a store
        received (from the same starting snapshot) reproduces its state.

        Args:
            actions: Actions to dispatch, in order
            state: Starting snapshot (initial state when None)

        Returns:
            New Store holding the replayed state
        """
        replayed = Store(config=self.config, state=state, logger=self._logger)
        count = 0
        for action in actions:
            replayed.dispatch(action)
            count += 1
        self._logger.state_replayed(count)
        return replayed
