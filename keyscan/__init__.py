"""keyscan: resolver mode directives for HD wallet index scanning.

Turns short directives ("while", "first20", "random5") into resolver modes
and resolver modes into lazily produced child-index sequences.
"""

__version__ = "0.1.0"

from .errors import (
    ResolverModeError,
    InvalidIntegerError,
    HardenedIndexError,
    UnrecognizedModeError,
)
from .index import HARDENED_INDEX_BOUNDARY, UnhardenedIndex
from .mode import (
    ResolverMode,
    WhileMode,
    FirstMode,
    RandomMode,
    parse,
    parse_resolver_mode,
)
from .sequence import (
    IndexSequence,
    RandomSource,
    SeededRandomSource,
    SystemRandomSource,
)
from .resolver import ScanHit, ScanResult, resolve, resolve_many

__all__ = [
    "__version__",
    # Errors
    "ResolverModeError",
    "InvalidIntegerError",
    "HardenedIndexError",
    "UnrecognizedModeError",
    # Index
    "HARDENED_INDEX_BOUNDARY",
    "UnhardenedIndex",
    # Modes
    "ResolverMode",
    "WhileMode",
    "FirstMode",
    "RandomMode",
    "parse",
    "parse_resolver_mode",
    # Sequences
    "IndexSequence",
    "RandomSource",
    "SeededRandomSource",
    "SystemRandomSource",
    # Resolver
    "ScanHit",
    "ScanResult",
    "resolve",
    "resolve_many",
]
