"""Generators command: list registered generators in lookup order."""

from rich.table import Table

from ..app import app, console, get_json_mode
from ...generators import get_registry


def _label(value) -> str:
    return str(getattr(value, "value", value))


def _matcher_label(matcher) -> str:
    if matcher is None:
        return "*"
    pattern = getattr(matcher, "pattern", None)
    if pattern is not None:
        return f"/{pattern}/"
    if isinstance(matcher, str):
        return f"/{matcher}/"
    return getattr(matcher, "__name__", repr(matcher))


@app.command("generators")
def generators_command():
    """List registered generators, highest priority first."""
    registry = get_registry()
    rows = [
        [str(i + 1), _label(gen.type), _matcher_label(gen.matcher)]
        for i, gen in enumerate(reversed(registry.instances))
    ]

    if get_json_mode():
        console.print_json(
            data=[
                {"priority": int(p), "type": t, "matcher": m} for p, t, m in rows
            ]
        )
        return

    table = Table(title="Generators", show_header=True, header_style="bold")
    table.add_column("Priority", justify="right")
    table.add_column("Type")
    table.add_column("Matcher")
    for row in rows:
        table.add_row(*row)
    console.print(table)
