"""Scan profiles: named resolver mode + branch lists stored as YAML."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from .index import UnhardenedIndex
from .mode import ResolverMode, parse_resolver_mode
from .errors import ResolverModeError


class ScanProfile(BaseModel):
    """A reusable scan configuration.

    Example YAML:
        name: cold-wallet
        mode: first20
        branches: [0, 1]
    """

    name: str = Field(description="Human-readable profile name")
    mode: str = Field(
        default="first20",
        description="Resolver mode directive (while, first<N>, random<N>)",
    )
    branches: list[int] = Field(
        default_factory=lambda: [0, 1],
        description="Unhardened derivation branches to scan (0=receive, 1=change)",
    )
    description: str | None = Field(default=None)

    @field_validator("mode")
    @classmethod
    def validate_mode(cls, v: str) -> str:
        try:
            parse_resolver_mode(v)
        except ResolverModeError as e:
            raise ValueError(str(e)) from e
        return v

    @field_validator("branches")
    @classmethod
    def validate_branches(cls, v: list[int]) -> list[int]:
        if not v:
            raise ValueError("At least one branch is required")
        for branch in v:
            try:
                UnhardenedIndex.from_index(branch)
            except ValueError as e:
                raise ValueError(f"Invalid branch {branch}: {e}") from e
        return v

    def resolver_mode(self) -> ResolverMode:
        return parse_resolver_mode(self.mode)

    def to_yaml(self, path: Path | str) -> None:
        """Save profile to YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data = self.model_dump(mode="json", exclude_none=True)

        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_yaml(cls, path: Path | str) -> "ScanProfile":
        """Load profile from YAML file."""
        path = Path(path)

        with open(path) as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ValueError("Scan profile YAML must parse to an object")

        return cls.model_validate(data)
