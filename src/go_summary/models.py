"""Data models shared by the analysis pipeline and the renderers.

Every model is a frozen dataclass built once per run. Renderers only read
these values; all analytical computation happens before they are built.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

LONG_FUNCTION_LINES = 50
RISKY_COMPLEXITY = 5.0
RISKY_DOC_COVERAGE = 50.0
RISKY_LONG_FUNCTIONS = 3


@dataclass(frozen=True)
class SourceFile:
    """A Go file as read from disk."""

    path: str
    package: str
    lines: int
    comment_lines: int


@dataclass(frozen=True)
class TypeDeclaration:
    """A struct or interface type declaration.

    Attributes:
        name: Type name
        comment: Attached doc comment, empty if none
        exported: True if the name starts with an upper-case letter
        definition: Normalized shape text, e.g. ``type T struct {...}``
    """

    name: str
    comment: str
    exported: bool
    definition: str


@dataclass(frozen=True)
class FunctionDeclaration:
    """A function or method declaration with its computed metrics.

    Attributes:
        name: Function or method name
        comment: Attached doc comment, empty if none
        exported: True if the name starts with an upper-case letter
        signature: Normalized signature text
        start_line: First line of the declaration (1-indexed)
        end_line: Last line of the declaration (inclusive)
        complexity: Cyclomatic complexity, at least 1
        max_depth: Maximum simultaneous nesting depth
        literal_complexities: Complexity of each nested function literal
            when literals are measured separately
    """

    name: str
    comment: str
    exported: bool
    signature: str
    start_line: int
    end_line: int
    complexity: int = 1
    max_depth: int = 0
    literal_complexities: tuple[int, ...] = ()

    @property
    def line_count(self) -> int:
        return self.end_line - self.start_line + 1

    @property
    def is_long(self) -> bool:
        return self.line_count > LONG_FUNCTION_LINES

    @property
    def documented(self) -> bool:
        return bool(self.comment)


@dataclass(frozen=True)
class FileSummary:
    """Declarations and derived metrics for one analyzed file."""

    source: SourceFile
    types: tuple[TypeDeclaration, ...]
    functions: tuple[FunctionDeclaration, ...]
    imports: tuple[str, ...]
    avg_complexity: float
    doc_coverage: float
    maintainability_index: float
    max_function_depth: int
    long_functions: tuple[FunctionDeclaration, ...]

    @property
    def path(self) -> str:
        return self.source.path

    @property
    def package(self) -> str:
        return self.source.package

    @property
    def lines(self) -> int:
        return self.source.lines

    @property
    def comment_lines(self) -> int:
        return self.source.comment_lines

    @property
    def comment_ratio(self) -> float:
        """Comment lines as a percentage of all lines."""
        if self.lines == 0:
            return 0.0
        return self.comment_lines / self.lines * 100

    @property
    def largest_function_lines(self) -> int:
        return max((fn.line_count for fn in self.functions), default=0)

    @property
    def is_risky(self) -> bool:
        """Flagged for refactoring by the fixed complexity/doc/length thresholds."""
        return (
            self.avg_complexity > RISKY_COMPLEXITY
            or self.doc_coverage < RISKY_DOC_COVERAGE
            or len(self.long_functions) > RISKY_LONG_FUNCTIONS
        )


@dataclass(frozen=True)
class PackageMetric:
    """Size and coupling numbers for one Go package."""

    file_count: int = 0
    line_count: int = 0
    import_count: int = 0
    coupling_count: int = 0


@dataclass(frozen=True)
class ProjectOverview:
    """Project-wide aggregate of all file summaries.

    ``effort_hours`` is a rough, uncalibrated heuristic and should be read
    as an order of magnitude, not a plan.
    """

    total_files: int = 0
    total_lines: int = 0
    total_functions: int = 0
    total_long_functions: int = 0
    avg_comment_ratio: float = 0.0
    avg_complexity: float = 0.0
    doc_coverage: float = 0.0
    package_count: int = 0
    dependency_count: int = 0
    health_score: float = 0.0
    risky_files: int = 0
    effort_hours: float = 0.0
    package_metrics: dict[str, PackageMetric] = field(default_factory=dict)


@dataclass(frozen=True)
class SkippedFile:
    """A file excluded from the run and why."""

    path: str
    reason: str


@dataclass(frozen=True)
class AnalysisResult:
    """Everything one run produces: the input to every renderer."""

    root: Path
    overview: ProjectOverview
    files: tuple[FileSummary, ...]
    skipped: tuple[SkippedFile, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.files
