"""Core glue code scanning for the Gherkin Builder.

- pattern_extractor: Match pattern to display phrase
- step_parser: Line-oriented step scanner and parameter classification
- enum_registry: Bookkeeping of imports and enumeration types
- glue_source: Locating glue code files and scanning them

pattern_extractor and step_parser do no I/O and never log before
raising; the exception carries the message.
"""

from .enum_registry import EnumRegistry
from .glue_source import (
    ErrorPolicy,
    ScanError,
    ScanReport,
    find_glue_files,
    scan_directories,
    scan_file,
)
from .pattern_extractor import extract_pattern, extract_phrase
from .step_parser import (
    AwaitingParams,
    Idle,
    ParserState,
    StepParser,
    classify_parameter,
    extract_parameter_list,
)

__all__ = [
    "AwaitingParams",
    "EnumRegistry",
    "ErrorPolicy",
    "Idle",
    "ParserState",
    "ScanError",
    "ScanReport",
    "StepParser",
    "classify_parameter",
    "extract_parameter_list",
    "extract_pattern",
    "extract_phrase",
    "find_glue_files",
    "scan_directories",
    "scan_file",
]
