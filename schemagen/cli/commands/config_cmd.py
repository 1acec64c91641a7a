"""Config command for viewing and managing schemagen configuration."""

from dataclasses import fields

import typer

from ..app import app, console
from ...config import (
    CONFIG_FILE,
    SchemagenConfig,
    coerce_field,
    get_config,
    reset_config,
)
from ...generators import reset_registry


VALID_KEYS = {f.name for f in fields(SchemagenConfig)}


@app.command("config")
def config_command(
    action: str = typer.Argument(
        ...,
        help="Action: show, set, reset",
    ),
    key: str | None = typer.Argument(
        None,
        help="Config key (e.g. seed, string_max_length)",
    ),
    value: str | None = typer.Argument(
        None,
        help="Value to set",
    ),
):
    """View or modify schemagen configuration.

    Examples:
        schemagen config show
        schemagen config set seed 42
        schemagen config set faker_locale de_DE
        schemagen config reset
    """
    if action == "show":
        _show_config()
    elif action == "set":
        if not key or value is None:
            console.print("[red]Usage:[/red] schemagen config set <key> <value>")
            console.print()
            console.print("Available keys:")
            for k in sorted(VALID_KEYS):
                console.print(f"  {k}")
            raise typer.Exit(1)
        _set_config(key, value)
    elif action == "reset":
        _reset_config()
    else:
        console.print(f"[red]Unknown action:[/red] {action}")
        console.print("Valid actions: show, set, reset")
        raise typer.Exit(1)


def _show_config():
    """Display current resolved configuration."""
    config = get_config()

    console.print()
    console.print("[bold]schemagen Configuration[/bold]")
    console.print("─" * 40)

    console.print()
    console.print("[bold cyan]Generation[/bold cyan]")
    seed = config.seed if config.seed is not None else "[dim](random)[/dim]"
    console.print(f"  seed              = {seed}")
    console.print(f"  faker_locale      = {config.faker_locale}")

    console.print()
    console.print("[bold cyan]Defaults[/bold cyan] (used when a constraint is unset)")
    console.print(f"  string_min_length = {config.string_min_length}")
    console.print(f"  string_max_length = {config.string_max_length}")
    console.print(f"  integer_minimum   = {config.integer_minimum}")
    console.print(f"  integer_maximum   = {config.integer_maximum}")
    console.print(f"  float_minimum     = {config.float_minimum}")
    console.print(f"  float_maximum     = {config.float_maximum}")
    console.print(f"  float_precision   = {config.float_precision}")

    console.print()
    if CONFIG_FILE.exists():
        console.print(f"Config file: {CONFIG_FILE}")
    else:
        console.print(f"Config file: [dim]not created yet[/dim] ({CONFIG_FILE})")
    console.print()


def _set_config(key: str, value: str):
    """Set a config value and save."""
    if key not in VALID_KEYS:
        console.print(f"[red]Unknown key:[/red] {key}")
        console.print()
        console.print("Available keys:")
        for k in sorted(VALID_KEYS):
            console.print(f"  {k}")
        raise typer.Exit(1)

    config = get_config()
    try:
        setattr(config, key, coerce_field(key, value))
    except ValueError:
        console.print(f"[red]Invalid value for {key}:[/red] {value}")
        raise typer.Exit(1)

    config.save()
    reset_config()  # Clear cached singleton so next get_config() reloads
    reset_registry()  # Built-in generators capture config at creation

    console.print(f"[green]✓[/green] Set {key} = {value}")
    console.print(f"  Saved to {CONFIG_FILE}")


def _reset_config():
    """Reset config to defaults."""
    if CONFIG_FILE.exists():
        CONFIG_FILE.unlink()
        reset_config()
        reset_registry()
        console.print("[green]✓[/green] Config reset to defaults")
        console.print(f"  Removed {CONFIG_FILE}")
    else:
        console.print("Config already at defaults (no config file exists)")
