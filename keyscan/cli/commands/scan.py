"""Scan command: preview the probe plan of a scan profile."""

from itertools import islice
from pathlib import Path

import typer
import yaml
from pydantic import ValidationError

from ..app import app, console, get_json_mode
from ..utils import ExitCode, Output, describe_mode, make_random_source
from ...config import get_config
from ...profile import ScanProfile


@app.command("scan")
def scan_command(
    profile_file: Path = typer.Argument(..., help="Scan profile YAML file"),
    seed: int | None = typer.Option(
        None, "--seed", help="Seed for random modes (defaults to scan.seed)"
    ),
    limit: int = typer.Option(
        1000, "--limit", "-n", min=0, help="Maximum indices to print per branch"
    ),
):
    """Show which child indices each branch of a profile would probe.

    Derivation happens in the wallet; this only previews the plan.
    Every branch gets its own sequence, so random modes differ per branch.
    """
    out = Output(console=console, json_mode=get_json_mode())

    if not profile_file.exists():
        out.error(
            f"Profile not found: {profile_file}", exit_code=ExitCode.FILE_NOT_FOUND
        )
        raise typer.Exit(out.finish())

    try:
        profile = ScanProfile.from_yaml(profile_file)
    except OSError as e:
        out.error(
            f"Cannot read profile {profile_file}: {e}",
            exit_code=ExitCode.FILE_NOT_FOUND,
        )
        raise typer.Exit(out.finish())
    except (ValidationError, ValueError, yaml.YAMLError) as e:
        out.error(f"Invalid profile {profile_file}: {e}", category="profile")
        raise typer.Exit(out.finish())

    mode = profile.resolver_mode()
    if seed is None:
        seed = get_config().scan.seed
    rng = make_random_source(seed)

    plan: dict[str, list[int]] = {}
    for branch in profile.branches:
        plan[str(branch)] = list(islice(mode.sequence(rng=rng), limit))

    out.set_data("profile", profile.name)
    out.set_data("mode", describe_mode(mode))
    out.set_data("branches", plan)

    if not out.json_mode:
        out.text(f"[bold]{profile.name}[/bold] ({mode}, {mode.count()} per branch)")
        out.table(
            "Probe Plan",
            ["Branch", "Indexes"],
            [[branch, ", ".join(map(str, indexes))] for branch, indexes in plan.items()],
        )
    raise typer.Exit(out.finish())
