"""Indexes command: print the child indices a resolver mode would probe."""

import logging
from itertools import islice

import typer

from ..app import app, console, get_json_mode
from ..utils import Output, describe_mode, make_random_source
from ...config import get_config
from ...errors import ResolverModeError
from ...mode import parse_resolver_mode
from .parse_cmd import report_directive_error

logger = logging.getLogger(__name__)


@app.command("indexes")
def indexes_command(
    directive: str | None = typer.Argument(
        None, help="Resolver mode directive (defaults to the configured scan.mode)"
    ),
    seed: int | None = typer.Option(
        None, "--seed", help="Seed for random modes (defaults to scan.seed)"
    ),
    limit: int = typer.Option(
        1000, "--limit", "-n", min=0, help="Maximum number of indices to print"
    ),
):
    """Print the index sequence for a resolver mode.

    Examples:
        keyscan indexes first5
        keyscan indexes random3 --seed 42
        keyscan --json indexes
    """
    out = Output(console=console, json_mode=get_json_mode())
    config = get_config()

    text = directive if directive is not None else config.scan.mode
    try:
        mode = parse_resolver_mode(text)
    except ResolverModeError as e:
        report_directive_error(out, e)
        raise typer.Exit(out.finish())

    if seed is None:
        seed = config.scan.seed
    if seed is not None and not mode.is_random():
        logger.info("Ignoring seed %d: mode %s is not random", seed, mode)

    sequence = mode.sequence(rng=make_random_source(seed))
    shown = list(islice(sequence, limit))
    truncated = not sequence.exhausted

    out.set_data("mode", describe_mode(mode))
    out.set_data("indexes", shown)
    out.set_data("truncated", truncated)

    if not out.json_mode:
        out.text(f"[bold]{mode}[/bold]: {mode.count()} index(es)")
        for index in shown:
            console.print(index)
        if truncated:
            out.text(
                f"[dim]… {sequence.remaining} more not shown (raise --limit)[/dim]"
            )
    raise typer.Exit(out.finish())
