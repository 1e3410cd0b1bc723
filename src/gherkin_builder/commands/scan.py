"""Shared scanning for commands that read glue code."""

from pathlib import Path

import typer

from ..config import GherkinBuilderConfig, load_config
from ..core import ErrorPolicy, ScanReport, StepParser, scan_directories
from ..errors import ConfigError, GherkinBuilderError
from ..output import get_output_context


def load_cli_config(config_path: Path) -> GherkinBuilderConfig:
    """Load config, exiting with code 1 when it is invalid."""
    ctx = get_output_context()
    try:
        return load_config(config_path)
    except ConfigError as e:
        ctx.error(str(e))
        raise typer.Exit(1) from None


def run_scan(
    directories: list[Path] | None,
    config: GherkinBuilderConfig,
    config_path: Path,
    policy: ErrorPolicy | None = None,
) -> tuple[StepParser, ScanReport]:
    """Scan the given directories, falling back to the configured ones.

    Configured directories are relative to the config file's directory.
    """
    ctx = get_output_context()

    roots = list(directories or [])
    if not roots:
        roots = config.resolve_directories(config_path.parent)
    if not roots:
        ctx.error("No glue code directories given or configured")
        raise typer.Exit(1)

    try:
        return scan_directories(
            roots,
            suffixes=config.sources.suffixes,
            policy=policy or config.sources.on_error,
            encoding=config.sources.encoding,
        )
    except GherkinBuilderError as e:
        ctx.error(str(e))
        raise typer.Exit(1) from None
