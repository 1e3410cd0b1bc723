"""CLI command implementations for the Gherkin Builder.

This package contains the implementation of each CLI command,
separated from the CLI framework setup in cli.py.
"""

from .enums import enums
from .init import init
from .steps import steps

__all__ = [
    "enums",
    "init",
    "steps",
]
