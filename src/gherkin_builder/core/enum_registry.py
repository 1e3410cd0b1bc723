"""Bookkeeping for user-defined parameter types found in glue code.

The registry only records names. Resolving the values of an enumeration
from its declaring source file is left to downstream tooling, which can
use the recorded base directories and imports to find it.
"""

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class EnumRegistry:
    """Records base directories, imported classes and enumeration type names.

    Includes and enumerations are kept in first-seen order without
    duplicates. Reconfiguring the base directories leaves both intact.
    """

    def __init__(self, directories: Sequence[str | Path] | None = None) -> None:
        self._base_directories: list[Path] = []
        self._class_includes: dict[str, None] = {}
        self._enumerations: dict[str, None] = {}
        if directories:
            self.configure(directories)

    def configure(self, directories: Sequence[str | Path]) -> None:
        """Replace the base directories used to locate type sources."""
        self._base_directories = [Path(d) for d in directories]
        logger.debug(f"Enum registry base directories: {self._base_directories}")

    def add_class_include(self, qualified_name: str) -> None:
        """Record an imported class, e.g. ``com.example.Animal``."""
        qualified_name = qualified_name.strip()
        if qualified_name and qualified_name not in self._class_includes:
            self._class_includes[qualified_name] = None

    def add_enumeration(self, type_name: str) -> None:
        """Record a parameter type that is not a recognized primitive."""
        type_name = type_name.strip()
        if type_name and type_name not in self._enumerations:
            logger.debug(f"Registered enumeration type: {type_name}")
            self._enumerations[type_name] = None

    @property
    def base_directories(self) -> tuple[Path, ...]:
        return tuple(self._base_directories)

    @property
    def class_includes(self) -> tuple[str, ...]:
        return tuple(self._class_includes)

    @property
    def enumerations(self) -> tuple[str, ...]:
        return tuple(self._enumerations)

    def qualified_name(self, type_name: str) -> str | None:
        """Find the recorded import whose simple name is ``type_name``.

        Nested types imported through their outer class
        (``com.example.Outer.Inner``) match on the last segment as well.

        Args:
            type_name: Simple type name as declared on a parameter

        Returns:
            The qualified import, or None if no import declares the type
        """
        for include in self._class_includes:
            if include.rsplit(".", 1)[-1] == type_name:
                return include
        return None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready view of the registry."""
        return {
            "base_directories": [str(d) for d in self._base_directories],
            "class_includes": list(self._class_includes),
            "enumerations": [
                {"name": name, "qualified_name": self.qualified_name(name)}
                for name in self._enumerations
            ],
        }
