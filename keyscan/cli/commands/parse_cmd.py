"""Parse command: validate a resolver mode directive and describe it."""

import typer

from ..app import app, console, get_json_mode
from ..utils import Output, describe_mode
from ...errors import (
    HardenedIndexError,
    InvalidIntegerError,
    ResolverModeError,
    UnrecognizedModeError,
)
from ...mode import parse_resolver_mode

_SUGGESTIONS = {
    InvalidIntegerError: "Use an unsigned decimal count, e.g. first20",
    HardenedIndexError: "Counts must be below 2147483648 (2^31)",
    UnrecognizedModeError: "Valid directives: while, first, first<N>, random, random<N>",
}


def error_category(exc: ResolverModeError) -> str:
    """Stable machine-readable name for a directive error."""
    if isinstance(exc, InvalidIntegerError):
        return "invalid_integer"
    if isinstance(exc, HardenedIndexError):
        return "hardened_index"
    if isinstance(exc, UnrecognizedModeError):
        return "unrecognized_mode"
    return "resolver_mode"


def report_directive_error(out: Output, exc: ResolverModeError) -> None:
    out.error(
        str(exc),
        category=error_category(exc),
        suggestion=_SUGGESTIONS.get(type(exc)),
    )


@app.command("parse")
def parse_command(
    directive: str = typer.Argument(
        ..., help="Resolver mode directive (while, first<N>, random<N>)"
    ),
):
    """Validate a resolver mode directive and show what it scans.

    Examples:
        keyscan parse while
        keyscan parse first20
        keyscan --json parse random5
    """
    out = Output(console=console, json_mode=get_json_mode())

    try:
        mode = parse_resolver_mode(directive)
    except ResolverModeError as e:
        report_directive_error(out, e)
        raise typer.Exit(out.finish())

    info = describe_mode(mode)
    out.success(f"Valid directive: {mode}", mode=info)
    out.table(
        "Resolver Mode",
        ["Property", "Value"],
        [
            ["kind", info["kind"]],
            ["count", str(info["count"])],
            ["range", f"[{info['range'][0]}, {info['range'][1]})"],
            ["random", "yes" if info["is_random"] else "no"],
        ],
        data_key="properties",
    )
    if mode.count() == 0:
        out.warning(
            "Count is 0: this mode scans no indices",
            category="zero_count",
            suggestion="Use first<N> or random<N> with N > 0 to probe indices",
        )
    raise typer.Exit(out.finish())
