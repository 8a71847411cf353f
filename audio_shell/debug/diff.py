"""
State Diff Tool - Compare two snapshots field by field.

Usage:
    from audio_shell.debug import diff_states

    diff = diff_states(before, after)
    print(diff)
    # Differences:
    #   size.width: 0 → 800
    #   audio_sources['mic'].muted: False → True
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from audio_shell.state.states import ApplicationState


@dataclass
class FieldDiff:
    """A single field difference."""
    path: str
    old_value: Any
    new_value: Any

    def __str__(self) -> str:
        return f"{self.path}: {self.old_value!r} → {self.new_value!r}"


@dataclass
class StateDiff:
    """Complete diff between two snapshots.

    left_only/right_only hold ids of sources present in only one side.
    order_changed is set when the shared sources appear in a different order.
    """
    diffs: list[FieldDiff] = field(default_factory=list)
    left_only: list[Any] = field(default_factory=list)
    right_only: list[Any] = field(default_factory=list)
    order_changed: bool = False

    @property
    def has_differences(self) -> bool:
        return bool(self.diffs or self.left_only or self.right_only or self.order_changed)

    @property
    def change_count(self) -> int:
        return (
            len(self.diffs)
            + len(self.left_only)
            + len(self.right_only)
            + int(self.order_changed)
        )

    def summary(self) -> str:
        """Short summary of changes."""
        if not self.has_differences:
            return "No differences"

        parts = []
        if self.diffs:
            parts.append(f"{len(self.diffs)} field changes")
        if self.left_only:
            parts.append(f"{len(self.left_only)} removed")
        if self.right_only:
            parts.append(f"{len(self.right_only)} added")
        if self.order_changed:
            parts.append("reordered")
        return ", ".join(parts)

    def report(self) -> str:
        """Detailed diff report."""
        if not self.has_differences:
            return "States are identical"

        lines = ["Differences:"]
        for diff in self.diffs:
            lines.append(f"  {diff}")

        if self.left_only:
            lines.append("")
            lines.append("Removed sources:")
            for source_id in self.left_only:
                lines.append(f"  - {source_id!r}")

        if self.right_only:
            lines.append("")
            lines.append("Added sources:")
            for source_id in self.right_only:
                lines.append(f"  + {source_id!r}")

        if self.order_changed:
            lines.append("")
            lines.append("Source order changed")

        return "\n".join(lines)

    def __str__(self) -> str:
        return self.report()

    def to_dict(self) -> dict[str, Any]:
        return {
            "has_differences": self.has_differences,
            "change_count": self.change_count,
            "diffs": [
                {"path": d.path, "old": d.old_value, "new": d.new_value}
                for d in self.diffs
            ],
            "left_only": self.left_only,
            "right_only": self.right_only,
            "order_changed": self.order_changed,
        }


def _changed(old: Any, new: Any) -> bool:
    """Inequality that tolerates opaque payloads without a truth value."""
    if old is new:
        return False
    try:
        return bool(old != new)
    except (TypeError, ValueError):
        # Array-likes compare elementwise; treat a new object as a change
        return True


def diff_states(left: "ApplicationState", right: "ApplicationState") -> StateDiff:
    """Compare two snapshots and return their differences.

    Sources are matched by id, so a moved source shows up as an order
    change rather than as field changes.

    Args:
        left: Baseline snapshot
        right: Comparison snapshot

    Returns:
        StateDiff with all differences
    """
    result = StateDiff()
    if left is right:
        return result

    def compare(path: str, old: Any, new: Any) -> None:
        if _changed(old, new):
            result.diffs.append(FieldDiff(path, old, new))

    if left.size is not right.size:
        compare("size.width", left.size.width, right.size.width)
        compare("size.height", left.size.height, right.size.height)
    compare("muted", left.muted, right.muted)
    compare("next_source_id", left.next_source_id, right.next_source_id)

    if left.audio_sources is right.audio_sources:
        return result

    left_by_id = {s.id: s for s in left.audio_sources}
    right_by_id = {s.id: s for s in right.audio_sources}

    result.left_only = [sid for sid in left_by_id if sid not in right_by_id]
    result.right_only = [sid for sid in right_by_id if sid not in left_by_id]

    for source_id, old in left_by_id.items():
        new = right_by_id.get(source_id)
        if new is None or new is old:
            continue
        prefix = f"audio_sources[{source_id!r}]"
        compare(f"{prefix}.label", old.label, new.label)
        compare(f"{prefix}.source", old.source, new.source)
        compare(f"{prefix}.muted", old.muted, new.muted)

    shared_left = [sid for sid in left_by_id if sid in right_by_id]
    shared_right = [sid for sid in right_by_id if sid in left_by_id]
    result.order_changed = shared_left != shared_right

    return result
