"""Scan loop: feed indices from a resolver mode into a derivation callable.

Key derivation lives outside this package. Callers pass ``derive``, which
maps a child index to whatever artifact they want to test (an address, a
script pubkey, a public key), and ``matches``, which decides whether the
artifact is a hit.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from .mode import ResolverMode
from .sequence import RandomSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ScanHit(Generic[T]):
    index: int
    artifact: T


@dataclass
class ScanResult(Generic[T]):
    """Outcome of one scan pass over a single branch."""

    mode: ResolverMode
    hits: list[ScanHit[T]] = field(default_factory=list)
    probed: int = 0

    @property
    def found(self) -> bool:
        return bool(self.hits)

    @property
    def indexes(self) -> list[int]:
        return [hit.index for hit in self.hits]


def resolve(
    mode: ResolverMode,
    derive: Callable[[int], T],
    matches: Callable[[T], bool],
    *,
    rng: RandomSource | None = None,
    stop_on_first: bool = False,
) -> ScanResult[T]:
    """Probe every index of a fresh sequence for ``mode``.

    Args:
        mode: Resolver mode deciding which indices to probe
        derive: Maps a child index to a derived artifact
        matches: Predicate applied to each derived artifact
        rng: Optional randomness source for random modes
        stop_on_first: Stop iterating after the first hit

    Returns:
        ScanResult with every hit in probe order
    """
    result: ScanResult[T] = ScanResult(mode=mode)

    for index in mode.sequence(rng=rng):
        artifact = derive(index)
        result.probed += 1
        if not matches(artifact):
            logger.debug("[%s] index %d: no match", mode, index)
            continue

        logger.debug("[%s] index %d: match", mode, index)
        result.hits.append(ScanHit(index=index, artifact=artifact))
        if stop_on_first:
            break

    logger.info(
        "Resolver mode %s probed %d of %d indices, %d hit(s)",
        mode,
        result.probed,
        mode.count(),
        len(result.hits),
    )
    return result


def resolve_many(
    mode: ResolverMode,
    derive_for_branch: Callable[[int, int], Any],
    branches: Iterable[int],
    matches: Callable[[Any], bool],
    *,
    rng: RandomSource | None = None,
    stop_on_first: bool = False,
) -> dict[int, ScanResult]:
    """Run one scan pass per branch.

    Every branch gets its own sequence, so random modes draw fresh indices
    for each branch. ``derive_for_branch`` is called as ``(branch, index)``.
    """
    results: dict[int, ScanResult] = {}
    for branch in branches:
        logger.debug("Scanning branch %d with mode %s", branch, mode)
        results[branch] = resolve(
            mode,
            lambda index, _branch=branch: derive_for_branch(_branch, index),
            matches,
            rng=rng,
            stop_on_first=stop_on_first,
        )
    return results
