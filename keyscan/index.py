"""Unhardened BIP32 child index value type."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import HardenedIndexError

# First hardened child index (2**31). Indices at or above it are hardened.
HARDENED_INDEX_BOUNDARY = 0x80000000

U32_MAX = 0xFFFFFFFF


@dataclass(frozen=True, order=True)
class UnhardenedIndex:
    """A child index in the range ``0 <= value < 2**31``.

    Construction always validates, so an instance can be passed anywhere an
    unhardened index is required without re-checking.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(
                f"UnhardenedIndex requires an int, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise ValueError(f"Child index must be non-negative, got {self.value}")
        if self.value >= HARDENED_INDEX_BOUNDARY:
            raise HardenedIndexError(self.value)

    @classmethod
    def from_index(cls, value: int) -> "UnhardenedIndex":
        return cls(value)

    @classmethod
    def zero(cls) -> "UnhardenedIndex":
        return cls(0)

    @classmethod
    def one(cls) -> "UnhardenedIndex":
        return cls(1)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
