"""
Debug tools for Audio Shell.

    diff_states     - Field-level diff between two snapshots
"""

from audio_shell.debug.diff import FieldDiff, StateDiff, diff_states

__all__ = [
    "FieldDiff",
    "StateDiff",
    "diff_states",
]
