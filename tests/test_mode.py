"""Tests for resolver mode parsing and queries.

Functions under test in keyscan/mode.py.
"""

from dataclasses import FrozenInstanceError

import pytest

from keyscan.errors import (
    HardenedIndexError,
    InvalidIntegerError,
    ResolverModeError,
    UnrecognizedModeError,
)
from keyscan.index import UnhardenedIndex
from keyscan.mode import (
    FirstMode,
    RandomMode,
    WhileMode,
    mode_count,
    mode_kind,
    parse,
    parse_resolver_mode,
)


class TestParseValidDirectives:
    """Each of the five grammar forms."""

    def test_while(self):
        assert parse_resolver_mode("while") == WhileMode()

    def test_bare_first_means_one(self):
        assert parse_resolver_mode("first") == FirstMode(1)

    def test_first_with_count(self):
        assert parse_resolver_mode("first5") == FirstMode(5)

    def test_bare_random_means_one(self):
        assert parse_resolver_mode("random") == RandomMode(1)

    def test_random_with_count(self):
        assert parse_resolver_mode("random3") == RandomMode(3)

    def test_zero_count_is_accepted(self):
        assert parse_resolver_mode("first0") == FirstMode(0)
        assert parse_resolver_mode("random0") == RandomMode(0)

    def test_leading_zeros(self):
        assert parse_resolver_mode("first007") == FirstMode(7)
        assert parse_resolver_mode("first" + "0" * 5000 + "9") == FirstMode(9)

    def test_largest_unhardened_count(self):
        assert parse_resolver_mode("first2147483647") == FirstMode(2**31 - 1)

    def test_parse_alias(self):
        assert parse is parse_resolver_mode


class TestParseErrors:
    """Failures are typed and carry diagnostics."""

    def test_hardened_boundary(self):
        with pytest.raises(HardenedIndexError) as exc_info:
            parse_resolver_mode("first2147483648")
        assert exc_info.value.value == 2147483648

    def test_hardened_random(self):
        with pytest.raises(HardenedIndexError):
            parse_resolver_mode("random4294967295")

    def test_overflow_is_malformed_integer(self):
        with pytest.raises(InvalidIntegerError) as exc_info:
            parse_resolver_mode("first4294967296")
        assert "too large" in exc_info.value.reason

    def test_huge_number_is_malformed_integer(self):
        with pytest.raises(InvalidIntegerError):
            parse_resolver_mode("random" + "9" * 50)

    def test_non_digits(self):
        with pytest.raises(InvalidIntegerError) as exc_info:
            parse_resolver_mode("firstabc")
        assert exc_info.value.text == "abc"
        assert exc_info.value.reason == "invalid digit found in string"

    @pytest.mark.parametrize("directive", ["firstabc", "random1x", "first-"])
    def test_non_digits_wrap_int_parse_failure(self, directive):
        with pytest.raises(InvalidIntegerError) as exc_info:
            parse_resolver_mode(directive)
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert not isinstance(exc_info.value.__cause__, InvalidIntegerError)

    @pytest.mark.parametrize(
        "directive",
        ["first+5", "first-1", "first 5", "first5 ", "first0x10", "first1_000", "first５"],
    )
    def test_only_ascii_digits(self, directive):
        with pytest.raises(InvalidIntegerError):
            parse_resolver_mode(directive)

    def test_prefix_wins_over_while(self):
        with pytest.raises(InvalidIntegerError):
            parse_resolver_mode("firstwhile")

    def test_unrecognized_carries_text(self):
        with pytest.raises(UnrecognizedModeError) as exc_info:
            parse_resolver_mode("banana")
        assert exc_info.value.name == "banana"
        assert "banana" in str(exc_info.value)

    @pytest.mark.parametrize("directive", ["", "While", "FIRST5", " while", "whilex", "rand"])
    def test_case_and_whitespace_sensitive(self, directive):
        with pytest.raises(UnrecognizedModeError):
            parse_resolver_mode(directive)

    def test_all_errors_are_value_errors(self):
        for directive in ("firstabc", "first2147483648", "banana"):
            with pytest.raises(ResolverModeError):
                parse_resolver_mode(directive)
            with pytest.raises(ValueError):
                parse_resolver_mode(directive)


class TestModeQueries:
    def test_while(self):
        mode = WhileMode()
        assert mode.count() == 1
        assert mode.range() == range(0, 1)
        assert mode.is_while() is True
        assert mode.is_random() is False
        assert mode.kind == "while"

    def test_first(self):
        mode = FirstMode(5)
        assert mode.count() == 5
        assert mode.range() == range(0, 5)
        assert mode.is_while() is False
        assert mode.is_random() is False
        assert mode.kind == "first"

    def test_random(self):
        mode = RandomMode(3)
        assert mode.count() == 3
        assert mode.range() == range(0, 3)
        assert mode.is_while() is False
        assert mode.is_random() is True
        assert mode.kind == "random"

    def test_zero_count_range_is_empty(self):
        assert len(FirstMode(0).range()) == 0

    def test_module_level_helpers(self):
        assert mode_count(RandomMode(9)) == 9
        assert mode_kind(FirstMode(9)) == "first"


class TestModeValues:
    def test_int_and_index_construction_agree(self):
        assert FirstMode(UnhardenedIndex(4)) == FirstMode(4)
        assert isinstance(FirstMode(4).limit, UnhardenedIndex)

    def test_programmatic_construction_validates(self):
        with pytest.raises(HardenedIndexError):
            FirstMode(2**31)
        with pytest.raises(HardenedIndexError):
            RandomMode(2**31 + 5)
        with pytest.raises(ValueError):
            RandomMode(-3)

    def test_variants_with_same_count_differ(self):
        assert FirstMode(3) != RandomMode(3)
        assert WhileMode() != FirstMode(1)

    def test_hashable(self):
        modes = {WhileMode(), WhileMode(), FirstMode(2), FirstMode(2), RandomMode(2)}
        assert len(modes) == 3

    def test_immutable(self):
        mode = FirstMode(2)
        with pytest.raises(FrozenInstanceError):
            mode.limit = UnhardenedIndex(3)

    def test_structural_ordering(self):
        modes = [RandomMode(1), FirstMode(5), WhileMode(), RandomMode(0), FirstMode(2)]
        assert sorted(modes) == [
            WhileMode(),
            FirstMode(2),
            FirstMode(5),
            RandomMode(0),
            RandomMode(1),
        ]
        assert WhileMode() < FirstMode(0)
        assert FirstMode(100) < RandomMode(1)
        assert RandomMode(2) >= RandomMode(2)


class TestDirectiveDisplay:
    def test_str(self):
        assert str(WhileMode()) == "while"
        assert str(FirstMode(20)) == "first20"
        assert str(RandomMode(1)) == "random1"

    @pytest.mark.parametrize(
        "mode",
        [WhileMode(), FirstMode(0), FirstMode(1), RandomMode(7), FirstMode(2**31 - 1)],
    )
    def test_display_parses_back(self, mode):
        assert parse_resolver_mode(str(mode)) == mode
