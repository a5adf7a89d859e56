"""Resolver modes: how many child indices a wallet scan probes, and in what order.

A mode is one of three closed variants:

- WhileMode: probe index 0 only
- FirstMode(limit): probe indices 0..limit-1 in ascending order
- RandomMode(limit): probe `limit` uniformly random 32-bit indices

Modes are written as short directives ("while", "first20", "random5") in
config files and on the command line. parse_resolver_mode() is the only
place a directive becomes a mode; str(mode) turns it back into one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union, assert_never, cast

from .errors import HardenedIndexError, InvalidIntegerError, UnrecognizedModeError
from .index import HARDENED_INDEX_BOUNDARY, U32_MAX, UnhardenedIndex

if TYPE_CHECKING:
    from .sequence import IndexSequence, RandomSource


_WHILE = "while"
_FIRST = "first"
_RANDOM = "random"

_DECIMAL_PATTERN = re.compile(r"[0-9]+")

# Variant rank used for structural ordering
_VARIANT_ORDER = {_WHILE: 0, _FIRST: 1, _RANDOM: 2}


class _ModeQueries:
    """Queries shared by all resolver mode variants."""

    __slots__ = ()

    @property
    def kind(self) -> str:
        return mode_kind(_as_mode(self))

    def count(self) -> int:
        """Number of indices a scan with this mode probes."""
        return mode_count(_as_mode(self))

    def range(self) -> range:
        """Half-open cursor interval ``[0, count)``."""
        return range(0, self.count())

    def is_while(self) -> bool:
        return isinstance(self, WhileMode)

    def is_random(self) -> bool:
        return isinstance(self, RandomMode)

    def sort_key(self) -> tuple[int, int]:
        mode = _as_mode(self)
        match mode:
            case WhileMode():
                return (_VARIANT_ORDER[_WHILE], 0)
            case FirstMode(limit=limit) | RandomMode(limit=limit):
                return (_VARIANT_ORDER[mode_kind(mode)], int(limit))
            case _:
                assert_never(mode)

    def sequence(self, rng: RandomSource | None = None) -> IndexSequence:
        """Start a fresh one-shot index sequence for this mode.

        Each call returns an independent sequence; for random modes a new
        randomness source is created unless ``rng`` is given.
        """
        from .sequence import IndexSequence

        return IndexSequence(_as_mode(self), rng=rng)

    def __iter__(self):
        return self.sequence()

    def __lt__(self, other):
        if not isinstance(other, _ModeQueries):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other):
        if not isinstance(other, _ModeQueries):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other):
        if not isinstance(other, _ModeQueries):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __ge__(self, other):
        if not isinstance(other, _ModeQueries):
            return NotImplemented
        return self.sort_key() >= other.sort_key()

    def __str__(self) -> str:
        mode = _as_mode(self)
        match mode:
            case WhileMode():
                return _WHILE
            case FirstMode(limit=limit):
                return f"{_FIRST}{limit}"
            case RandomMode(limit=limit):
                return f"{_RANDOM}{limit}"
            case _:
                assert_never(mode)


def _coerce_limit(limit: UnhardenedIndex | int) -> UnhardenedIndex:
    if isinstance(limit, UnhardenedIndex):
        return limit
    return UnhardenedIndex.from_index(limit)


@dataclass(frozen=True)
class WhileMode(_ModeQueries):
    """Probe a single index (0)."""


@dataclass(frozen=True)
class FirstMode(_ModeQueries):
    """Probe the first ``limit`` indices in ascending order."""

    limit: UnhardenedIndex

    def __post_init__(self) -> None:
        object.__setattr__(self, "limit", _coerce_limit(self.limit))


@dataclass(frozen=True)
class RandomMode(_ModeQueries):
    """Probe ``limit`` independently drawn random indices."""

    limit: UnhardenedIndex

    def __post_init__(self) -> None:
        object.__setattr__(self, "limit", _coerce_limit(self.limit))


ResolverMode = Union[WhileMode, FirstMode, RandomMode]


def _as_mode(value: _ModeQueries) -> ResolverMode:
    return cast(ResolverMode, value)


def mode_kind(mode: ResolverMode) -> str:
    """Directive name of a mode without its count ("while", "first", "random")."""
    match mode:
        case WhileMode():
            return _WHILE
        case FirstMode():
            return _FIRST
        case RandomMode():
            return _RANDOM
        case _:
            assert_never(mode)


def mode_count(mode: ResolverMode) -> int:
    match mode:
        case WhileMode():
            return 1
        case FirstMode(limit=index) | RandomMode(limit=index):
            return int(index)
        case _:
            assert_never(mode)


# =============================================================================
# Directive parsing
# =============================================================================


def _parse_limit(text: str) -> UnhardenedIndex:
    """Parse the numeric suffix of a first/random directive.

    Only ASCII decimal digits are accepted; leading zeros are allowed.
    """
    if not _DECIMAL_PATTERN.fullmatch(text):
        try:
            int(text)
        except ValueError as exc:
            raise InvalidIntegerError(text) from exc
        # int() also takes signs, underscores and non-ASCII digits
        raise InvalidIntegerError(text)
    digits = text.lstrip("0") or "0"
    # More than 10 significant digits can't fit in 32 bits
    if len(digits) > 10 or int(digits) > U32_MAX:
        raise InvalidIntegerError(text, "number too large to fit in target type")
    value = int(digits)
    if value >= HARDENED_INDEX_BOUNDARY:
        raise HardenedIndexError(value)
    return UnhardenedIndex(value)


def parse_resolver_mode(text: str) -> ResolverMode:
    """Parse a resolver mode directive.

    Examples:
        "while"    → WhileMode()
        "first"    → FirstMode(1)
        "first20"  → FirstMode(20)
        "random"   → RandomMode(1)
        "random5"  → RandomMode(5)

    Raises:
        InvalidIntegerError: If the suffix after first/random isn't an
            unsigned 32-bit decimal.
        HardenedIndexError: If the suffix is a hardened index (>= 2**31).
        UnrecognizedModeError: If the directive matches no mode name.
    """
    if text.startswith(_FIRST):
        suffix = text[len(_FIRST) :]
        return FirstMode(UnhardenedIndex.one() if not suffix else _parse_limit(suffix))
    if text.startswith(_RANDOM):
        suffix = text[len(_RANDOM) :]
        return RandomMode(UnhardenedIndex.one() if not suffix else _parse_limit(suffix))
    if text == _WHILE:
        return WhileMode()
    raise UnrecognizedModeError(text)


parse = parse_resolver_mode
