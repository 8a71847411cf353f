"""
Tests for the snapshot diff tool.
"""

from audio_shell.debug import FieldDiff, StateDiff, diff_states
from audio_shell.runtime import Store
from audio_shell.state import (
    ApplicationState,
    AudioSource,
    app_mute,
    app_resize,
    audio_source_add,
    audio_source_move,
    audio_source_mute,
    audio_source_remove,
    reduce,
)


class TestDiffStates:
    """Tests for diff_states."""

    def test_identical(self, three_sources):
        diff = diff_states(three_sources, three_sources)

        assert not diff.has_differences
        assert diff.summary() == "No differences"
        assert str(diff) == "States are identical"

    def test_size_change(self, three_sources):
        after = reduce(three_sources, app_resize({"width": 1024, "height": 100}))

        diff = diff_states(three_sources, after)

        assert [(d.path, d.old_value, d.new_value) for d in diff.diffs] == [
            ("size.height", 768, 100),
        ]

    def test_global_mute(self, three_sources):
        diff = diff_states(three_sources, reduce(three_sources, app_mute()))

        assert diff.diffs == [FieldDiff("muted", False, True)]

    def test_source_field_change(self, three_sources):
        after = reduce(three_sources, audio_source_mute({"id": "a"}))

        diff = diff_states(three_sources, after)

        assert str(diff.diffs[0]) == "audio_sources['a'].muted: False → True"
        assert not diff.order_changed

    def test_added_and_removed(self, three_sources):
        after = reduce(three_sources, audio_source_remove({"id": "b"}))
        after = reduce(after, audio_source_add({"id": "z"}))

        diff = diff_states(three_sources, after)

        assert diff.left_only == ["b"]
        assert diff.right_only == ["z"]
        assert diff.summary() == "1 removed, 1 added"

    def test_auto_add_changes_counter(self, empty_state):
        after = reduce(empty_state, audio_source_add({}))

        diff = diff_states(empty_state, after)

        assert FieldDiff("next_source_id", 1, 2) in diff.diffs
        assert diff.right_only == ["source-1"]

    def test_move_is_order_change(self, three_sources):
        after = reduce(three_sources, audio_source_move({"id": "a", "toIndex": 2}))

        diff = diff_states(three_sources, after)

        assert diff.order_changed
        assert diff.diffs == []
        assert diff.change_count == 1
        assert "Source order changed" in diff.report()

    def test_to_dict(self, three_sources):
        after = reduce(three_sources, app_mute())

        data = diff_states(three_sources, after).to_dict()

        assert data["has_differences"] is True
        assert data["diffs"] == [{"path": "muted", "old": False, "new": True}]

    def test_report_lists_sections(self, three_sources):
        after = reduce(three_sources, audio_source_remove({"id": "c"}))
        after = reduce(after, audio_source_add({"id": "d"}))

        report = diff_states(three_sources, after).report()

        assert "Removed sources:" in report
        assert "  - 'c'" in report
        assert "Added sources:" in report
        assert "  + 'd'" in report


class ElementwiseBuffer:
    """Compares elementwise like an array; the result has no truth value."""

    def __init__(self, *values):
        self.values = values

    def __ne__(self, other):
        return ElementwiseResult()

    __eq__ = __ne__


class ElementwiseResult:

    def __bool__(self):
        raise ValueError("truth value is ambiguous")


class TestOpaqueSourcePayloads:
    """Source descriptors are compared without relying on their truth value."""

    def test_same_payload_object_is_no_change(self):
        buffer = ElementwiseBuffer(1, 2)
        state = ApplicationState(audio_sources=(AudioSource(id="a", source=buffer),))

        after = reduce(state, audio_source_mute({"id": "a"}))
        diff = diff_states(state, after)

        assert [d.path for d in diff.diffs] == ["audio_sources['a'].muted"]

    def test_different_payload_objects_reported(self):
        left = ApplicationState(audio_sources=(AudioSource(id="a", source=ElementwiseBuffer(1)),))
        right = ApplicationState(audio_sources=(AudioSource(id="a", source=ElementwiseBuffer(2)),))

        diff = diff_states(left, right)

        assert [d.path for d in diff.diffs] == ["audio_sources['a'].source"]

    def test_store_dispatch_with_payload(self, structured_logger):
        state = ApplicationState(audio_sources=(AudioSource(id="a", source=ElementwiseBuffer(1)),))
        store = Store(state=state, logger=structured_logger)

        result = store.dispatch(audio_source_mute({"id": "a"}))

        assert result.applied
        assert store.history[-1].diff.change_count == 1


class TestStateDiff:

    def test_empty(self):
        assert StateDiff().change_count == 0
