"""Enums command: list user-defined parameter types found in glue code."""

from pathlib import Path

import typer
from rich.markup import escape

from ..constants import CONFIG_FILENAME
from ..output import get_output_context
from .scan import load_cli_config, run_scan


def enums(
    directories: list[Path] | None = typer.Argument(
        None, help="Glue code directories (defaults to configured ones)"
    ),
    config_path: Path = typer.Option(
        Path(CONFIG_FILENAME), "--config", "-c", help="Path to config file"
    ),
) -> None:
    """List enumeration types used by step parameters."""
    ctx = get_output_context()
    config = load_cli_config(config_path)
    parser, _ = run_scan(directories, config, config_path)
    registry = parser.get_enum_registry()

    if ctx.json_mode:
        ctx.print_json(registry.to_dict())
        return

    if not registry.enumerations:
        ctx.console.print("[yellow]No enumeration types found[/yellow]")
        return

    for name in registry.enumerations:
        qualified = registry.qualified_name(name)
        if qualified:
            ctx.console.print(f"{escape(name)}  [dim]{escape(qualified)}[/dim]")
        else:
            ctx.console.print(f"{escape(name)}  [yellow](no import found)[/yellow]")
