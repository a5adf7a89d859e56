"""Config command for viewing and managing keyscan configuration."""

import typer
from rich.markup import escape

from ..app import app, console
from ...config import get_config, reset_config, CONFIG_FILE
from ...errors import ResolverModeError
from ...mode import parse_resolver_mode


VALID_KEYS = {
    "scan.mode",
    "scan.seed",
}


@app.command("config")
def config_command(
    action: str = typer.Argument(
        ...,
        help="Action: show, set, reset",
    ),
    key: str | None = typer.Argument(
        None,
        help="Config key (e.g. scan.mode, scan.seed)",
    ),
    value: str | None = typer.Argument(
        None,
        help="Value to set",
    ),
):
    """View or modify keyscan configuration.

    Examples:
        keyscan config show
        keyscan config set scan.mode random5
        keyscan config set scan.seed 42
        keyscan config set scan.seed none
        keyscan config reset
    """
    if action == "show":
        _show_config()
    elif action == "set":
        if not key or value is None:
            console.print("[red]Usage:[/red] keyscan config set <key> <value>")
            console.print()
            console.print("Available keys:")
            for k in sorted(VALID_KEYS):
                console.print(f"  {k}")
            raise typer.Exit(1)
        _set_config(key, value)
    elif action == "reset":
        _reset_config()
    else:
        console.print(f"[red]Unknown action:[/red] {escape(action)}")
        console.print("Valid actions: show, set, reset")
        raise typer.Exit(1)


def _show_config():
    """Display current resolved configuration."""
    config = get_config()

    console.print()
    console.print("[bold]Keyscan Configuration[/bold]")
    console.print("─" * 40)

    console.print()
    console.print("[bold cyan]Scan[/bold cyan] (defaults for indexes / scan)")
    console.print(f"  mode = {config.scan.mode}")
    seed = config.scan.seed if config.scan.seed is not None else "[dim](OS entropy)[/dim]"
    console.print(f"  seed = {seed}")

    console.print()
    if CONFIG_FILE.exists():
        console.print(f"Config file: {CONFIG_FILE}")
    else:
        console.print(f"Config file: [dim]not created yet[/dim] ({CONFIG_FILE})")
    console.print()


def _set_config(key: str, value: str):
    """Set a config value and save."""
    if key not in VALID_KEYS:
        console.print(f"[red]Unknown key:[/red] {escape(key)}")
        console.print()
        console.print("Available keys:")
        for k in sorted(VALID_KEYS):
            console.print(f"  {k}")
        raise typer.Exit(1)

    config = get_config()

    if key == "scan.mode":
        try:
            parse_resolver_mode(value)
        except ResolverModeError as e:
            console.print(f"[red]Invalid resolver mode:[/red] {escape(str(e))}")
            raise typer.Exit(1)
        config.scan.mode = value
    elif key == "scan.seed":
        if value.lower() in ("none", ""):
            config.scan.seed = None
        else:
            try:
                config.scan.seed = int(value)
            except ValueError:
                console.print(f"[red]Invalid integer value:[/red] {escape(value)}")
                raise typer.Exit(1)

    config.save()
    reset_config()  # Clear cached singleton so next get_config() reloads

    console.print(f"[green]✓[/green] Set {key} = {value}")
    console.print(f"  Saved to {CONFIG_FILE}")


def _reset_config():
    """Reset config to defaults."""
    if CONFIG_FILE.exists():
        CONFIG_FILE.unlink()
        reset_config()
        console.print("[green]✓[/green] Config reset to defaults")
        console.print(f"  Removed {CONFIG_FILE}")
    else:
        console.print("Config already at defaults (no config file exists)")
