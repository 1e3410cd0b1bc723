"""Tests for CLI logging configuration."""

import logging

import pytest
from rich.logging import RichHandler

from gherkin_builder.logging import LogLevel, configure_logging, level_for


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize(
    ("verbosity", "quiet", "expected"),
    [
        (0, False, LogLevel.NORMAL),
        (1, False, LogLevel.VERBOSE),
        (2, False, LogLevel.VERBOSE),
        (2, True, LogLevel.QUIET),
    ],
)
def test_level_for(verbosity, quiet, expected):
    assert level_for(verbosity, quiet) == expected


def test_sets_root_level():
    configure_logging(verbosity=1)
    assert logging.getLogger().level == LogLevel.VERBOSE


def test_installs_rich_handler():
    console = configure_logging(no_color=True)
    handlers = logging.getLogger().handlers
    assert any(isinstance(h, RichHandler) for h in handlers)
    assert console.no_color


def test_very_verbose_shows_source_paths():
    configure_logging(verbosity=2)
    handler = next(h for h in logging.getLogger().handlers if isinstance(h, RichHandler))
    assert handler._log_render.show_path
