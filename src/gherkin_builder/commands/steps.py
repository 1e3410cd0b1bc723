"""Steps command: generate builder steps from glue code."""

import json
from pathlib import Path

import typer

from ..config import OutputFormat
from ..constants import CONFIG_FILENAME
from ..core import ErrorPolicy
from ..output import get_output_context
from ..render import render_steps, steps_to_dicts
from .scan import load_cli_config, run_scan


def steps(
    directories: list[Path] | None = typer.Argument(
        None, help="Glue code directories (defaults to configured ones)"
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write steps to this file instead of stdout"
    ),
    policy: ErrorPolicy | None = typer.Option(
        None, "--policy", "-p", help="Handling of malformed glue code lines"
    ),
    config_path: Path = typer.Option(
        Path(CONFIG_FILENAME), "--config", "-c", help="Path to config file"
    ),
) -> None:
    """Scan glue code and emit one builder step per step definition."""
    ctx = get_output_context()
    config = load_cli_config(config_path)
    parser, report = run_scan(directories, config, config_path, policy)

    found = parser.get_steps()
    registry = parser.get_enum_registry()

    if ctx.json_mode or config.output.format is OutputFormat.JSON:
        data = {
            "steps": steps_to_dicts(found),
            "enumerations": list(registry.enumerations),
            "class_includes": list(registry.class_includes),
            "files": len(report.files),
            "errors": len(report.errors),
        }
        text = json.dumps(data, indent=2)
    else:
        text = render_steps(found)

    target = output
    if target is None and config.output.path:
        target = config_path.parent / config.output.path
    if target is None:
        typer.echo(text)
        return

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text + "\n")
    ctx.success(
        f"Wrote {len(found)} step(s) to {target}",
        {"path": str(target), "steps": len(found), "errors": len(report.errors)},
    )
