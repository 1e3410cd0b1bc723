"""Init command implementation."""

from pathlib import Path

import typer

from ..config import write_config_template
from ..constants import CONFIG_FILENAME
from ..output import get_output_context


def init(
    directory: Path = typer.Argument(
        Path("."),
        help="Directory to write the config template into",
        file_okay=False,
    ),
) -> None:
    """Write a gherkin-builder.toml template."""
    ctx = get_output_context()

    config_path = directory / CONFIG_FILENAME
    if config_path.exists():
        ctx.error(f"Config already exists: {config_path}", {"path": str(config_path)})
        raise typer.Exit(1)

    directory.mkdir(parents=True, exist_ok=True)
    written = write_config_template(directory)
    ctx.success(f"Created config template: {written}", {"path": str(written)})
