"""Logging configuration for the gherkin-builder CLI.

Scan progress is logged at INFO, each step found at DEBUG, and malformed
glue code lines or dropped steps at WARNING.
"""

import logging
from enum import IntEnum

from rich.console import Console
from rich.logging import RichHandler


class LogLevel(IntEnum):
    """Root logger level selected by the -q/-v flags."""

    QUIET = logging.WARNING  # malformed glue code is still reported
    NORMAL = logging.INFO
    VERBOSE = logging.DEBUG


def level_for(verbosity: int, quiet: bool) -> LogLevel:
    """Pick the log level; --quiet wins over any number of -v flags."""
    if quiet:
        return LogLevel.QUIET
    return LogLevel.VERBOSE if verbosity >= 1 else LogLevel.NORMAL


def configure_logging(verbosity: int = 0, quiet: bool = False, no_color: bool = False) -> Console:
    """Route log records through a Rich handler on stderr.

    Args:
        verbosity: Number of -v flags; -vv also shows timestamps and source paths
        quiet: Only report warnings and errors
        no_color: Disable colored output

    Returns:
        The stderr console, shared with command output
    """
    console = Console(stderr=True, force_terminal=not no_color, no_color=no_color)
    detailed = verbosity >= 2 and not quiet
    handler = RichHandler(console=console, show_time=detailed, show_path=detailed)
    logging.basicConfig(
        level=level_for(verbosity, quiet),
        format="%(message)s",
        handlers=[handler],
        force=True,
    )
    return console
