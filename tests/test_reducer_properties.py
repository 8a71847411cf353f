"""
Property-Based Reducer Tests - Invariants across random states and actions.

Uses Hypothesis to generate random snapshots and action sequences and
checks that the reducer's guarantees hold in every case.

Properties tested:
    1. Purity - the input snapshot is never mutated
    2. Invariants - unique ids and non-negative size survive any sequence
    3. Idempotence - mute twice equals mute once
    4. Round trip - add then remove restores the source list
    5. Move - always a permutation, ids preserved
    6. Unknown ids - mute/unmute/remove leave sources unchanged
    7. Determinism - replaying a sequence gives the same state
"""

import copy

from hypothesis import given, settings, strategies as st

from audio_shell.state import (
    ApplicationState,
    AudioSource,
    Size,
    app_mute,
    app_unmute,
    audio_source_add,
    audio_source_move,
    audio_source_mute,
    audio_source_remove,
    audio_source_unmute,
    check_invariants,
    make_action,
    reduce,
)


# =============================================================================
# Hypothesis Strategies
# =============================================================================

source_id_strategy = st.one_of(
    st.text(alphabet="abcdefgh", min_size=1, max_size=3),
    st.integers(min_value=0, max_value=50),
)

source_strategy = st.builds(
    AudioSource,
    id=source_id_strategy,
    label=st.one_of(st.none(), st.text(max_size=8)),
    muted=st.booleans(),
)

state_strategy = st.builds(
    ApplicationState,
    size=st.builds(
        Size,
        width=st.integers(min_value=0, max_value=4096),
        height=st.integers(min_value=0, max_value=4096),
    ),
    audio_sources=st.lists(source_strategy, max_size=8, unique_by=lambda s: s.id).map(tuple),
    muted=st.booleans(),
    next_source_id=st.integers(min_value=1, max_value=20),
)

# Payloads are deliberately loose so invalid ones are exercised too
action_strategy = st.one_of(
    st.builds(
        make_action,
        st.just("resize"),
        st.fixed_dictionaries({
            "width": st.integers(min_value=-10, max_value=2000),
            "height": st.integers(min_value=-10, max_value=2000),
        }),
    ),
    st.just(app_mute()),
    st.just(app_unmute()),
    st.builds(
        audio_source_add,
        st.one_of(
            st.none(),
            st.fixed_dictionaries({"label": st.text(max_size=5)}),
            st.fixed_dictionaries({"id": source_id_strategy}),
        ),
    ),
    st.builds(audio_source_remove, st.fixed_dictionaries({"id": source_id_strategy})),
    st.builds(audio_source_mute, st.fixed_dictionaries({"id": source_id_strategy})),
    st.builds(audio_source_unmute, st.fixed_dictionaries({"id": source_id_strategy})),
    st.builds(
        audio_source_move,
        st.fixed_dictionaries({
            "id": source_id_strategy,
            "toIndex": st.integers(min_value=-3, max_value=12),
        }),
    ),
    st.builds(make_action, st.text(max_size=6)),
)


# =============================================================================
# Property Tests
# =============================================================================

class TestPurity:
    """Property: reduce never mutates its input."""

    @given(state_strategy, action_strategy)
    @settings(max_examples=200)
    def test_input_not_mutated(self, state, action):
        before = copy.deepcopy(state)

        reduce(state, action)

        assert state == before


class TestInvariantsHold:
    """Property: any action sequence keeps the snapshot valid."""

    @given(state_strategy, st.lists(action_strategy, max_size=25))
    @settings(max_examples=200)
    def test_sequence_preserves_invariants(self, state, actions):
        for action in actions:
            state = reduce(state, action)
            assert check_invariants(state) == []


class TestIdempotence:
    """Property: mute and unmute are idempotent."""

    @given(state_strategy)
    def test_mute_twice(self, state):
        once = reduce(state, app_mute())

        assert reduce(once, app_mute()) == once

    @given(state_strategy)
    def test_unmute_twice(self, state):
        once = reduce(state, app_unmute())

        assert reduce(once, app_unmute()) == once


class TestRoundTrip:
    """Property: add followed by remove restores the source list."""

    @given(state_strategy, st.one_of(st.none(), st.text(max_size=8)))
    def test_add_then_remove(self, state, label):
        added = reduce(state, audio_source_add({"label": label}))
        new_id = added.audio_sources[-1].id
        removed = reduce(added, audio_source_remove({"id": new_id}))

        assert removed.audio_sources == state.audio_sources


class TestMove:
    """Property: move only reorders."""

    @given(state_strategy, st.data())
    def test_move_is_permutation(self, state, data):
        if not state.audio_sources:
            return

        source = data.draw(st.sampled_from(state.audio_sources))
        to_index = data.draw(st.integers(min_value=0, max_value=len(state.audio_sources) - 1))

        moved = reduce(state, audio_source_move({"id": source.id, "toIndex": to_index}))

        assert len(moved.audio_sources) == len(state.audio_sources)
        assert sorted(map(repr, moved.audio_sources)) == sorted(map(repr, state.audio_sources))
        assert moved.audio_sources[to_index] == source


class TestUnknownIds:
    """Property: operations on absent ids leave sources unchanged."""

    @given(state_strategy, st.sampled_from([audio_source_mute, audio_source_unmute, audio_source_remove]))
    def test_absent_id(self, state, creator):
        result = reduce(state, creator({"id": "not-present-id"}))

        assert result.audio_sources == state.audio_sources


class TestDeterminism:
    """Property: identical input gives identical output."""

    @given(state_strategy, st.lists(action_strategy, max_size=15))
    def test_replay_identical(self, state, actions):
        first = state
        second = state
        for action in actions:
            first = reduce(first, action)
        for action in actions:
            second = reduce(second, action)

        assert first == second
