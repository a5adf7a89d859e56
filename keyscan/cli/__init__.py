"""Command-line interface for keyscan."""

from .app import app

__all__ = ["app"]
