"""One-shot index sequences produced from a resolver mode.

An IndexSequence owns a cursor and, for random modes, its own randomness
source. The cursor counts items produced, not the values emitted, so a
random sequence stops after exactly ``count`` draws.
"""

from __future__ import annotations

import random
from typing import Protocol, assert_never, runtime_checkable

from .index import U32_MAX
from .mode import FirstMode, RandomMode, ResolverMode, WhileMode


@runtime_checkable
class RandomSource(Protocol):
    """Provider of uniformly distributed unsigned 32-bit values."""

    def next_u32(self) -> int: ...


class SystemRandomSource:
    """Randomness from the operating system entropy pool."""

    def __init__(self):
        self._rng = random.SystemRandom()

    def next_u32(self) -> int:
        return self._rng.getrandbits(32)


class SeededRandomSource:
    """Deterministic randomness for reproducible runs.

    Not suitable for privacy-sensitive scans: anyone knowing the seed can
    reproduce the probed indices.
    """

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_u32(self) -> int:
        return self._rng.getrandbits(32)


class IndexSequence:
    """Lazily produced child indices for a single scan pass.

    Iterate it directly; once exhausted it stays exhausted. Create a new
    sequence from the mode to scan again.
    """

    def __init__(self, mode: ResolverMode, rng: RandomSource | None = None):
        self._mode = mode
        self._end = mode.range().stop
        self._offset = mode.range().start
        self._rng = rng

    @property
    def mode(self) -> ResolverMode:
        return self._mode

    @property
    def produced(self) -> int:
        """Number of indices emitted so far."""
        return self._offset

    @property
    def remaining(self) -> int:
        return max(0, self._end - self._offset)

    @property
    def exhausted(self) -> bool:
        return self._offset >= self._end

    def __iter__(self) -> "IndexSequence":
        return self

    def __next__(self) -> int:
        if self._offset >= self._end:
            raise StopIteration

        mode = self._mode
        match mode:
            case WhileMode() | FirstMode():
                index = self._offset
            case RandomMode():
                index = self._draw()
            case _:
                assert_never(mode)

        self._offset += 1
        return index

    def next(self) -> int | None:
        """Return the next index, or None at the end of the sequence."""
        return next(self, None)

    def _draw(self) -> int:
        rng = self._rng
        if rng is None:
            # OS entropy, created on first draw and private to this sequence
            rng = self._rng = SystemRandomSource()
        value = rng.next_u32()
        if not 0 <= value <= U32_MAX:
            raise ValueError(f"Random source returned out-of-range value {value}")
        return value

    def __repr__(self) -> str:
        return (
            f"IndexSequence(mode={str(self._mode)!r}, "
            f"produced={self._offset}, remaining={self.remaining})"
        )
