"""Configuration management for keyscan.

Config resolution order (highest priority first):
1. Programmatic (KeyscanConfig constructed in code)
2. Environment variables (KEYSCAN_MODE, KEYSCAN_SEED)
3. Config file (~/.config/keyscan/config.json, managed by `keyscan config`)
4. Hardcoded defaults
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

from .errors import ResolverModeError
from .mode import ResolverMode, parse_resolver_mode

logger = logging.getLogger(__name__)


# =============================================================================
# Config file location
# =============================================================================

CONFIG_DIR = Path.home() / ".config" / "keyscan"
CONFIG_FILE = CONFIG_DIR / "config.json"


# =============================================================================
# Config dataclasses
# =============================================================================


@dataclass
class ScanDefaults:
    """Defaults applied when a command doesn't name a resolver mode.

    - mode: resolver mode directive (while, first<N>, random<N>)
    - seed: fixed seed for random modes (None = OS entropy)
    """

    mode: str = "first20"
    seed: int | None = None


@dataclass
class KeyscanConfig:
    """Top-level keyscan configuration.

    Examples:
        # Package use
        config = KeyscanConfig(scan=ScanDefaults(mode="random5"))

        # CLI use — loads from ~/.config/keyscan/config.json
        config = KeyscanConfig.load()
    """

    scan: ScanDefaults = field(default_factory=ScanDefaults)

    @classmethod
    def load(cls) -> "KeyscanConfig":
        """Load config from file + env vars.

        Priority: env var values > config.json values > defaults.
        """
        config = cls()

        # Layer 1: config file
        if CONFIG_FILE.exists():
            try:
                with open(CONFIG_FILE) as f:
                    data = json.load(f)
                _apply_dict(config, data)
            except (ValueError, TypeError, OSError) as exc:
                logger.warning("Failed to load config from %s: %s", CONFIG_FILE, exc)

        # Layer 2: env var overrides
        if val := os.environ.get("KEYSCAN_MODE"):
            try:
                parse_resolver_mode(val)
                config.scan.mode = val
            except ResolverModeError as exc:
                logger.warning("Invalid KEYSCAN_MODE=%r (%s), ignoring", val, exc)
        if val := os.environ.get("KEYSCAN_SEED"):
            try:
                config.scan.seed = int(val)
            except ValueError:
                logger.warning("Invalid KEYSCAN_SEED=%r, ignoring", val)

        return config

    def save(self) -> None:
        """Save config to ~/.config/keyscan/config.json."""
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for display."""
        return {"scan": asdict(self.scan)}

    def default_resolver_mode(self) -> ResolverMode:
        """Parse the configured default mode.

        Raises:
            ResolverModeError: If the configured directive is invalid.
        """
        return parse_resolver_mode(self.scan.mode)


def _apply_dict(config: KeyscanConfig, data: Any) -> None:
    """Apply a dict of values onto a KeyscanConfig.

    Values that don't validate are logged and skipped, leaving the
    default (or an earlier layer's value) in place.
    """
    if not isinstance(data, dict) or not isinstance(data.get("scan"), dict):
        return
    scan = data["scan"]

    if "mode" in scan:
        mode = scan["mode"]
        if not isinstance(mode, str):
            logger.warning(
                "Invalid scan.mode=%r in %s (not a string), ignoring", mode, CONFIG_FILE
            )
        else:
            try:
                parse_resolver_mode(mode)
                config.scan.mode = mode
            except ResolverModeError as exc:
                logger.warning(
                    "Invalid scan.mode=%r in %s (%s), ignoring", mode, CONFIG_FILE, exc
                )

    if "seed" in scan:
        seed = scan["seed"]
        try:
            config.scan.seed = _coerce_seed(seed)
        except (TypeError, ValueError):
            logger.warning("Invalid scan.seed=%r in %s, ignoring", seed, CONFIG_FILE)


def _coerce_seed(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise TypeError(f"seed must be an integer, got {type(value).__name__}")
    return int(value)


# =============================================================================
# Global config singleton
# =============================================================================

_config: KeyscanConfig | None = None


def get_config() -> KeyscanConfig:
    """Get the global KeyscanConfig instance.

    First call loads from file + env vars. Subsequent calls return cached instance.
    """
    global _config
    if _config is None:
        _config = KeyscanConfig.load()
    return _config


def configure(config: KeyscanConfig) -> None:
    """Set the global KeyscanConfig programmatically."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global config (forces reload on next get_config())."""
    global _config
    _config = None
