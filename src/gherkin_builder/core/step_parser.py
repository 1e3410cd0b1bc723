"""Line-oriented scanner for Cucumber glue code.

The parser is driven one source line at a time, strictly in file order.
A step annotation line moves it into ``AwaitingParams``; the next line is
read as the step's method declaration, its parameters are classified and
a ``StepDescriptor`` is emitted.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from ..constants import (
    IMPORT_PREFIX,
    LIST_SUFFIX,
    PARAMETER_MARKERS,
    STEP_KEYWORDS,
)
from ..errors import MalformedParameterList
from ..models import ParameterDescriptor, StepDescriptor
from .enum_registry import EnumRegistry
from .pattern_extractor import extract_phrase

logger = logging.getLogger(__name__)

NUMBER_TYPES = frozenset({"long", "int", "integer"})
TEXT_TYPES = frozenset({"string", "char", "double", "boolean", "datatable"})
DATE_TYPES = frozenset({"date"})


@dataclass(frozen=True)
class Idle:
    """No step annotation is waiting for its method declaration."""


@dataclass(frozen=True)
class AwaitingParams:
    """A step annotation was read; the next line declares its method."""

    phrase: str


ParserState = Idle | AwaitingParams


def extract_parameter_list(declaration: str) -> list[str]:
    """Split a method declaration's parameter list into raw segments.

    Splitting is on bare commas; generic types holding a comma are not
    supported.

    Args:
        declaration: Method declaration, e.g. ``public void f(String a, int b) {``

    Returns:
        Non-blank raw parameter segments, empty when the method takes no parameters

    Raises:
        MalformedParameterList: If ``(`` or ``)`` is missing, or ``(`` follows ``)``
    """
    start = declaration.find("(")
    end = declaration.rfind(")")
    if start < 0 or end < 0 or start > end:
        raise MalformedParameterList(
            "There is a problem with your method declaration. It does not contain a "
            f"proper parameter definition. Examine the declaration '{declaration}'",
            declaration,
        )
    params = declaration[start + 1 : end]
    return [segment for segment in params.split(",") if segment.strip()]


def is_list(type_name: str) -> bool:
    """Return True for a typed list such as ``List<String>``."""
    return type_name.startswith("List<") and type_name.endswith(">") and len(type_name) > 6


def classify_parameter(segment: str, registry: EnumRegistry) -> ParameterDescriptor:
    """Classify one raw parameter segment.

    Types that are not a known number, text or date type are treated as
    user-defined enumerations and recorded in ``registry``.

    Args:
        segment: One comma-separated piece of a parameter list, e.g. ``List<Animal> pets``
        registry: Registry receiving enumeration type names

    Returns:
        The classified parameter
    """
    parameter = segment.strip()
    if parameter.startswith(PARAMETER_MARKERS):
        _, sep, rest = parameter.partition(") ")
        if sep:
            parameter = rest.strip()

    tokens = parameter.split()
    type_name = tokens[0] if tokens else ""
    name = tokens[1] if len(tokens) > 1 else ""

    if is_list(type_name):
        type_name = type_name[5:-1]
        name += LIST_SUFFIX

    lowered = type_name.lower()
    if lowered in NUMBER_TYPES:
        return ParameterDescriptor.number(name)
    if lowered in TEXT_TYPES:
        return ParameterDescriptor.text(name)
    if lowered in DATE_TYPES:
        return ParameterDescriptor.date(name)
    registry.add_enumeration(type_name)
    return ParameterDescriptor.enum_ref(name, type_name)


def is_step_annotation(line: str) -> bool:
    """Return True if the trimmed line opens with a Given/When/Then annotation."""
    return line.strip().startswith(STEP_KEYWORDS)


def parse_import(line: str) -> str | None:
    """Return the imported name of an import declaration, or None.

    ``import static`` declarations yield the member's qualified name.
    """
    stripped = line.strip()
    if not stripped.startswith(IMPORT_PREFIX):
        return None
    name = stripped[len(IMPORT_PREFIX) :].rstrip(";").strip()
    if name.startswith("static "):
        name = name[len("static ") :].strip()
    return name or None


class StepParser:
    """Stateful scanner turning glue code lines into step descriptors.

    One parser may be fed several files in turn; descriptors accumulate
    in discovery order. A line that raises never changes the parser
    state: a malformed annotation leaves the parser as it was, and a
    malformed declaration leaves the step pending so the caller can feed
    the next line or call ``discard_pending``.

    Not safe for concurrent use.
    """

    def __init__(self, registry: EnumRegistry | None = None) -> None:
        self._registry = registry if registry is not None else EnumRegistry()
        self._state: ParserState = Idle()
        self._steps: list[StepDescriptor] = []

    @property
    def state(self) -> ParserState:
        return self._state

    @property
    def pending(self) -> bool:
        """True while a step annotation waits for its method declaration."""
        return isinstance(self._state, AwaitingParams)

    def add_base_directory(self, path: str | Path) -> None:
        """Add a source root and reconfigure the registry with all roots so far.

        Already recorded includes and enumerations are kept.
        """
        self._registry.configure([*self._registry.base_directories, Path(path)])

    def process_line(self, line: str) -> None:
        """Advance the parser by one source line.

        Raises:
            MalformedParameterList: If a pending step's declaration has no parameter list
            MalformedPattern: If a step annotation has no ``^...$`` expression
        """
        imported = parse_import(line)
        if imported:
            self._registry.add_class_include(imported)

        # both extractions run before any transition so a failing line changes nothing
        segments = None
        if isinstance(self._state, AwaitingParams):
            segments = extract_parameter_list(line)
        phrase = extract_phrase(line.strip()) if is_step_annotation(line) else None

        # the line after an annotation holds the method declaration
        if isinstance(self._state, AwaitingParams) and segments is not None:
            parameters = tuple(classify_parameter(s, self._registry) for s in segments)
            step = StepDescriptor(phrase=self._state.phrase, parameters=parameters)
            self._steps.append(step)
            self._state = Idle()
            logger.debug(f"Step found: {step.phrase} ({len(parameters)} parameters)")

        if phrase is not None:
            self._state = AwaitingParams(phrase=phrase)

    def discard_pending(self) -> str | None:
        """Drop a step still waiting for its declaration.

        Returns:
            The dropped step's phrase, or None if nothing was pending
        """
        if not isinstance(self._state, AwaitingParams):
            return None
        phrase = self._state.phrase
        self._state = Idle()
        return phrase

    def get_steps(self) -> tuple[StepDescriptor, ...]:
        """Return the steps found so far, in discovery order."""
        return tuple(self._steps)

    def get_enum_registry(self) -> EnumRegistry:
        return self._registry
