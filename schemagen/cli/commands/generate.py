"""Generate command: produce values for every attribute in a schema file."""

import json
from dataclasses import replace
from pathlib import Path

import typer
import yaml
from rich.markup import escape
from rich.table import Table

from ..app import app, console, get_json_mode
from ...config import get_config
from ...core.models import load_attributes
from ...generators import GeneratorError, GeneratorRegistry, get_registry


@app.command("generate")
def generate_command(
    schema_file: Path = typer.Argument(
        ..., help="YAML or JSON file with a `properties` mapping of attributes"
    ),
    count: int = typer.Option(1, "--count", "-n", min=1, help="Values per attribute"),
    seed: int | None = typer.Option(
        None, "--seed", help="Random seed (overrides config)"
    ),
):
    """Generate values for each attribute declared in SCHEMA_FILE.

    Attributes with no matching generator come out as null.

    Examples:
        schemagen generate user.yaml
        schemagen --json generate user.yaml --count 5 --seed 42
    """
    try:
        attributes = load_attributes(schema_file)
    except FileNotFoundError:
        console.print(f"[red]✗[/red] File not found: {schema_file}")
        raise typer.Exit(1)
    except (ValueError, yaml.YAMLError) as exc:
        console.print(f"[red]✗[/red] Invalid schema file {schema_file}: {escape(str(exc))}")
        raise typer.Exit(1)

    if seed is None:
        registry = get_registry()
    else:
        registry = GeneratorRegistry.with_defaults(replace(get_config(), seed=seed))

    try:
        records = [
            {
                attr.name: registry.trigger(attr.bias_type, attr.name, attr)
                for attr in attributes
            }
            for _ in range(count)
        ]
    except GeneratorError as exc:
        console.print(f"[red]✗[/red] Generation failed: {escape(str(exc))}")
        raise typer.Exit(1)

    if get_json_mode():
        print(json.dumps(records, indent=2, default=str))
        return

    table = Table(title=str(schema_file), show_header=True, header_style="bold")
    for attr in attributes:
        table.add_column(attr.name)
    for record in records:
        table.add_row(
            *["[dim]null[/dim]" if v is None else escape(str(v)) for v in record.values()]
        )
    console.print(table)
