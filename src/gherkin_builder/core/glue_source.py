"""Locate glue code files and feed them through a step parser."""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ..constants import DEFAULT_SUFFIXES
from ..errors import GlueSourceError, MalformedGlueCode
from .step_parser import StepParser

logger = logging.getLogger(__name__)


class ErrorPolicy(str, Enum):
    """What to do when a glue code line is malformed."""

    ABORT = "abort"  # stop reading the current file
    SKIP = "skip"  # skip the line and keep going
    STRICT = "strict"  # re-raise to the caller


@dataclass
class ScanError:
    """A malformed line met while scanning."""

    path: Path
    line_number: int
    message: str


@dataclass
class ScanReport:
    """Summary of a scan over one or more glue code files."""

    files: list[Path] = field(default_factory=list)
    lines: int = 0
    errors: list[ScanError] = field(default_factory=list)
    discarded: list[str] = field(default_factory=list)

    def merge(self, other: "ScanReport") -> None:
        self.files.extend(other.files)
        self.lines += other.lines
        self.errors.extend(other.errors)
        self.discarded.extend(other.discarded)


def find_glue_files(base_dir: Path, suffixes: Iterable[str] = DEFAULT_SUFFIXES) -> list[Path]:
    """Find glue code files below a directory.

    Args:
        base_dir: Root directory to search recursively
        suffixes: File suffixes to accept

    Returns:
        Matching files, sorted by path

    Raises:
        GlueSourceError: If base_dir is not a directory
    """
    if not base_dir.is_dir():
        raise GlueSourceError(f"Glue code directory not found: {base_dir}")
    wanted = tuple(suffixes)
    return sorted(p for p in base_dir.rglob("*") if p.is_file() and p.name.endswith(wanted))


def scan_file(
    parser: StepParser,
    path: Path,
    *,
    policy: ErrorPolicy = ErrorPolicy.ABORT,
    encoding: str = "utf-8",
) -> ScanReport:
    """Feed every line of a file to the parser, in order.

    Args:
        parser: Parser accumulating steps
        path: Glue code file
        policy: Handling of malformed lines
        encoding: File encoding

    Returns:
        Report for this file

    Raises:
        GlueSourceError: If the file cannot be read
        MalformedGlueCode: On a malformed line with the strict policy
    """
    report = ScanReport(files=[path])
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise GlueSourceError(f"Cannot read glue code file {path}: {e}") from e

    for line_number, line in enumerate(text.splitlines(), start=1):
        report.lines += 1
        try:
            parser.process_line(line)
        except MalformedGlueCode as e:
            if policy is ErrorPolicy.STRICT:
                raise
            report.errors.append(ScanError(path=path, line_number=line_number, message=str(e)))
            logger.warning(f"{path}:{line_number}: {e}")
            if policy is ErrorPolicy.ABORT:
                break

    # a step cannot span files
    phrase = parser.discard_pending()
    if phrase is not None:
        report.discarded.append(phrase)
        logger.warning(f"{path}: step '{phrase}' has no method declaration, dropped")
    return report


def scan_directories(
    directories: Sequence[str | Path],
    *,
    suffixes: Iterable[str] = DEFAULT_SUFFIXES,
    policy: ErrorPolicy = ErrorPolicy.ABORT,
    encoding: str = "utf-8",
    parser: StepParser | None = None,
) -> tuple[StepParser, ScanReport]:
    """Scan every glue code file below the given directories.

    Each directory is registered with the parser before any file is read,
    so the enum registry sees all source roots. Files are read in root
    order, sorted within each root; a file reachable from several roots
    is read once.

    Returns:
        Tuple of (parser holding the steps, combined report)
    """
    parser = parser if parser is not None else StepParser()
    roots = [Path(d) for d in directories]
    for root in roots:
        parser.add_base_directory(root)

    # overlapping or repeated roots must not feed a file twice
    suffixes = tuple(suffixes)
    seen: set[Path] = set()
    files: list[Path] = []
    for root in roots:
        found = [p for p in find_glue_files(root, suffixes) if p.resolve() not in seen]
        seen.update(p.resolve() for p in found)
        files.extend(found)
        logger.info(f"Found {len(found)} new glue code file(s) in {root}")

    report = ScanReport()
    for path in files:
        report.merge(scan_file(parser, path, policy=policy, encoding=encoding))

    logger.info(
        f"Found {len(parser.get_steps())} step(s), "
        f"{len(parser.get_enum_registry().enumerations)} enumeration type(s)"
    )
    return parser, report
