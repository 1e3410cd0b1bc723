"""Configuration management for the Gherkin Builder."""

import tomllib
from enum import Enum
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field, ValidationError

from .constants import CONFIG_FILENAME, DEFAULT_SUFFIXES
from .core.glue_source import ErrorPolicy
from .errors import ConfigError


class OutputFormat(str, Enum):
    """Formats the steps command can produce."""

    JS = "js"
    JSON = "json"


class ProjectConfig(BaseModel):
    """Project-level configuration."""

    name: str = "unnamed-project"


class SourcesConfig(BaseModel):
    """Where glue code lives and how to read it."""

    base_directories: list[str] = Field(
        default_factory=list, description="Glue code roots, scanned recursively"
    )
    suffixes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SUFFIXES), description="Glue code file suffixes"
    )
    encoding: str = "utf-8"
    on_error: ErrorPolicy = Field(
        default=ErrorPolicy.ABORT, description="Handling of malformed glue code lines"
    )


class OutputConfig(BaseModel):
    """Configuration for generated step output."""

    path: str | None = None  # stdout when unset
    format: OutputFormat = OutputFormat.JS


class GherkinBuilderConfig(BaseModel):
    """Root configuration for the Gherkin Builder."""

    project: ProjectConfig = Field(default_factory=ProjectConfig)
    sources: SourcesConfig = Field(default_factory=SourcesConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    def resolve_directories(self, base: Path) -> list[Path]:
        """Return configured glue code roots, relative ones resolved against base."""
        return [base / d for d in self.sources.base_directories]


def load_config(config_path: Path) -> GherkinBuilderConfig:
    """Load config from a TOML file.

    Args:
        config_path: Path to gherkin-builder.toml

    Returns:
        Loaded configuration, or defaults if the file doesn't exist

    Raises:
        ConfigError: If the file is not valid TOML or fails validation
    """
    if not config_path.exists():
        return GherkinBuilderConfig()
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        return GherkinBuilderConfig.model_validate(data)
    except (tomllib.TOMLDecodeError, ValidationError) as e:
        raise ConfigError(f"Invalid config {config_path}: {e}") from e


def write_config_template(directory: Path) -> Path:
    """Write default gherkin-builder.toml template.

    Args:
        directory: Directory to write the template into

    Returns:
        Path to the written config file
    """
    config_path = directory / CONFIG_FILENAME
    template = {
        "project": {"name": "your-project"},
        "sources": {
            "base_directories": ["src/test/java"],
            "suffixes": list(DEFAULT_SUFFIXES),
            "encoding": "utf-8",
            # abort: stop reading a file at its first malformed line
            # skip: report the line and continue
            # strict: fail the whole run
            "on_error": ErrorPolicy.ABORT.value,
        },
        "output": {"format": OutputFormat.JS.value},
    }
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
