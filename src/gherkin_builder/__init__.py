"""Gherkin Builder: turn Cucumber glue code into step descriptors."""

__version__ = "0.1.0"
