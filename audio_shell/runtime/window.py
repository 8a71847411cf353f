"""
Window signal adapter - viewport size notifications into resize actions.

The host (a GUI toolkit, a browser bridge, a terminal) calls
WindowSizeTracker.on_resize() whenever its viewport changes, and once
at startup so the store learns the initial size.
"""

from __future__ import annotations

import logging
import math

from audio_shell.state.actions import Action, app_resize
from audio_shell.state.reducer import TransitionResult

from .store import Store

logger = logging.getLogger(__name__)


def resize_action(width: int | float, height: int | float) -> Action:
    """Build a resize action from host-reported dimensions.

    Fractional sizes (high-DPI hosts) are rounded down to whole pixels.
    Negative or non-finite floats are passed through as-is so the reducer
    rejects them.
    """
    return app_resize({"width": _whole_pixels(width), "height": _whole_pixels(height)})


def _whole_pixels(value: int | float) -> int | float:
    if isinstance(value, float) and math.isfinite(value) and value >= 0:
        return math.floor(value)
    return value


class WindowSizeTracker:
    """Dispatches resize actions to a store when the viewport size changes."""

    def __init__(self, store: Store) -> None:
        self._store = store

    def on_resize(self, width: int | float, height: int | float) -> TransitionResult | None:
        """
        Report the current viewport size.

        Returns:
            The dispatch result, or None when the size did not change
        """
        action = resize_action(width, height)
        size = self._store.state.size
        if (size.width, size.height) == (action.value["width"], action.value["height"]):
            logger.debug("Viewport size unchanged at %sx%s", size.width, size.height)
            return None
        return self._store.dispatch(action)
