"""Output formatting for the gherkin-builder CLI."""

import json
from dataclasses import dataclass
from typing import Any

from rich.console import Console
from rich.markup import escape


@dataclass
class OutputContext:
    """Where command results go: the rich console, or JSON on stdout with --json."""

    console: Console
    json_mode: bool = False

    def print_json(self, data: dict[str, Any]) -> None:
        """Print JSON data; a no-op outside JSON mode."""
        if self.json_mode:
            print(json.dumps(data, indent=2, default=str))

    def _report(
        self, key: str, message: str, data: dict[str, Any] | None, style: str, prefix: str = ""
    ) -> None:
        if self.json_mode:
            self.print_json({key: message, **(data or {})})
        else:
            # glue code text may contain [...] which rich would read as markup
            self.console.print(f"[{style}]{prefix}{escape(message)}[/{style}]")

    def error(self, message: str, data: dict[str, Any] | None = None) -> None:
        self._report("error", message, data, "red", prefix="Error: ")

    def success(self, message: str, data: dict[str, Any] | None = None) -> None:
        self._report("success", message, data, "green")


# Set by the cli.py main callback
_ctx: OutputContext | None = None


def get_output_context() -> OutputContext:
    """Get the current output context, or a plain console one outside the CLI."""
    if _ctx is None:
        return OutputContext(Console())
    return _ctx


def set_output_context(ctx: OutputContext | None) -> None:
    global _ctx
    _ctx = ctx
