"""Tests for the UnhardenedIndex value type."""

import operator
from dataclasses import FrozenInstanceError

import pytest

from keyscan.errors import HardenedIndexError
from keyscan.index import HARDENED_INDEX_BOUNDARY, UnhardenedIndex


class TestConstruction:
    def test_boundary_is_two_to_the_31(self):
        assert HARDENED_INDEX_BOUNDARY == 2**31

    def test_largest_unhardened_index(self):
        assert int(UnhardenedIndex(2**31 - 1)) == 2147483647

    def test_boundary_itself_is_hardened(self):
        with pytest.raises(HardenedIndexError) as exc_info:
            UnhardenedIndex.from_index(2**31)
        assert exc_info.value.value == 2**31

    def test_top_of_u32_is_hardened(self):
        with pytest.raises(HardenedIndexError):
            UnhardenedIndex(2**32 - 1)

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            UnhardenedIndex(-1)

    def test_non_int_rejected(self):
        with pytest.raises(TypeError):
            UnhardenedIndex("5")
        with pytest.raises(TypeError):
            UnhardenedIndex(True)

    def test_zero_and_one(self):
        assert int(UnhardenedIndex.zero()) == 0
        assert int(UnhardenedIndex.one()) == 1


class TestValueSemantics:
    def test_compared_by_numeric_value(self):
        assert UnhardenedIndex(3) == UnhardenedIndex(3)
        assert UnhardenedIndex(2) < UnhardenedIndex(10)
        assert sorted([UnhardenedIndex(9), UnhardenedIndex(1)]) == [
            UnhardenedIndex(1),
            UnhardenedIndex(9),
        ]

    def test_hashable(self):
        assert len({UnhardenedIndex(4), UnhardenedIndex(4)}) == 1

    def test_usable_as_int(self):
        index = UnhardenedIndex(7)
        assert operator.index(index) == 7
        assert list(range(index)) == list(range(7))
        assert str(index) == "7"

    def test_immutable(self):
        index = UnhardenedIndex(1)
        with pytest.raises(FrozenInstanceError):
            index.value = 2
