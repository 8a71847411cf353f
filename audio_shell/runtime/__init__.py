"""
Audio Shell Runtime - Store, configuration and host signal adapters.
"""

from .config import StoreConfig
from .store import HistoryEntry, Listener, Store
from .window import WindowSizeTracker, resize_action

__all__ = [
    "Store",
    "StoreConfig",
    "HistoryEntry",
    "Listener",
    "WindowSizeTracker",
    "resize_action",
]
