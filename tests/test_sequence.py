"""
Tests for the immutable sequence helpers.
"""

import pytest

from audio_shell.state import sequence


ITEMS = ("a", "b", "c", "d")


class TestIndexOf:

    def test_found(self):
        assert sequence.index_of(ITEMS, lambda x: x == "c") == 2

    def test_missing(self):
        assert sequence.index_of(ITEMS, lambda x: x == "z") == -1

    def test_first_match_wins(self):
        assert sequence.index_of(("x", "y", "x"), lambda v: v == "x") == 0


class TestAppendRemoveReplace:

    def test_append(self):
        assert sequence.append(ITEMS, "e") == ("a", "b", "c", "d", "e")

    def test_remove_at(self):
        assert sequence.remove_at(ITEMS, 1) == ("a", "c", "d")

    def test_remove_out_of_range_returns_input(self):
        assert sequence.remove_at(ITEMS, 10) is ITEMS
        assert sequence.remove_at(ITEMS, -1) is ITEMS

    def test_replace_at(self):
        assert sequence.replace_at(ITEMS, 3, "z") == ("a", "b", "c", "z")

    def test_replace_same_object_returns_input(self):
        assert sequence.replace_at(ITEMS, 0, ITEMS[0]) is ITEMS


class TestClampIndex:

    @pytest.mark.parametrize(
        "index,length,expected",
        [(0, 4, 0), (3, 4, 3), (4, 4, 3), (-2, 4, 0), (5, 0, 0)],
    )
    def test_clamp(self, index, length, expected):
        assert sequence.clamp_index(index, length) == expected


class TestMove:

    @pytest.mark.parametrize(
        "from_index,to_index,expected",
        [
            (0, 3, ("b", "c", "d", "a")),
            (3, 0, ("d", "a", "b", "c")),
            (1, 2, ("a", "c", "b", "d")),
            (2, 1, ("a", "c", "b", "d")),
            (0, 100, ("b", "c", "d", "a")),
            (3, -100, ("d", "a", "b", "c")),
        ],
    )
    def test_move(self, from_index, to_index, expected):
        assert sequence.move(ITEMS, from_index, to_index) == expected

    def test_move_to_same_index_returns_input(self):
        assert sequence.move(ITEMS, 2, 2) is ITEMS

    def test_invalid_from_index_returns_input(self):
        assert sequence.move(ITEMS, 9, 0) is ITEMS

    def test_input_untouched(self):
        items = ("a", "b")
        sequence.move(items, 0, 1)

        assert items == ("a", "b")
