"""CLI commands for keyscan."""

from . import (
    parse_cmd,
    indexes,
    scan,
    config_cmd,
)

__all__ = [
    "parse_cmd",
    "indexes",
    "scan",
    "config_cmd",
]
