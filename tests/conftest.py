"""Shared fixtures: keep every test away from the user's real config."""

import pytest

from keyscan import config as keyscan_config
from keyscan.cli.commands import config_cmd


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    config_dir = tmp_path / "config"
    config_file = config_dir / "config.json"
    monkeypatch.setattr(keyscan_config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(keyscan_config, "CONFIG_FILE", config_file)
    monkeypatch.setattr(config_cmd, "CONFIG_FILE", config_file)
    monkeypatch.delenv("KEYSCAN_MODE", raising=False)
    monkeypatch.delenv("KEYSCAN_SEED", raising=False)
    keyscan_config.reset_config()
    yield config_file
    keyscan_config.reset_config()


class StubRandomSource:
    """Returns canned values in order and records how often it was asked."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def next_u32(self) -> int:
        value = self.values[self.calls]
        self.calls += 1
        return value


class ExplodingRandomSource:
    """Fails the test if any value is drawn."""

    def next_u32(self) -> int:
        raise AssertionError("randomness must not be used for this mode")


@pytest.fixture
def stub_rng():
    return StubRandomSource


@pytest.fixture
def exploding_rng():
    return ExplodingRandomSource()
