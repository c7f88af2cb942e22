"""Per-file metrics: line counts, documentation coverage, maintainability."""

from __future__ import annotations

from typing import Iterable

from ..models import FileSummary, FunctionDeclaration, SourceFile, TypeDeclaration
from ..scanning.syntax import FileSyntax
from .complexity import INLINE, measure_function

COMMENT_MARKERS = ("//", "/*")


def count_lines(text: str) -> tuple[int, int]:
    """Return (total lines, comment lines).

    A line is a comment line when its stripped form starts with ``//`` or
    ``/*``. Continuation lines inside a block comment are not counted.
    """
    lines = text.split("\n")
    comment_lines = sum(1 for line in lines if line.strip().startswith(COMMENT_MARKERS))
    return len(lines), comment_lines


def maintainability_index(lines: int, comment_lines: int, avg_complexity: float) -> float:
    """100 - (lines/100 + avg_complexity*2 - comment_ratio*50), clamped to [0, 100]."""
    if lines == 0:
        return 100.0
    comment_ratio = comment_lines / lines
    index = 100 - (lines / 100 + avg_complexity * 2 - comment_ratio * 50)
    return max(0.0, min(100.0, index))


def doc_coverage(
    types: Iterable[TypeDeclaration], functions: Iterable[FunctionDeclaration]
) -> float:
    """Percentage of exported declarations with a doc comment; 0 when none are exported."""
    exported = 0
    documented = 0
    for decl in (*types, *functions):
        if decl.exported:
            exported += 1
            if decl.comment:
                documented += 1
    if exported == 0:
        return 0.0
    return documented / exported * 100


def average_complexity(functions: Iterable[FunctionDeclaration]) -> float:
    values = [fn.complexity for fn in functions]
    if not values:
        return 0.0
    return sum(values) / len(values)


def build_file_summary(syntax: FileSyntax, nested_literals: str = INLINE) -> FileSummary:
    """Measure every function in ``syntax`` and assemble the FileSummary."""
    functions = []
    for fn in syntax.functions:
        metrics = measure_function(fn.body, nested_literals)
        functions.append(
            FunctionDeclaration(
                name=fn.name,
                comment=fn.comment,
                exported=fn.exported,
                signature=fn.signature,
                start_line=fn.start_line,
                end_line=fn.end_line,
                complexity=metrics.complexity,
                max_depth=metrics.max_depth,
                literal_complexities=metrics.literal_complexities,
            )
        )

    lines, comment_lines = count_lines(syntax.text)
    avg = average_complexity(functions)

    return FileSummary(
        source=SourceFile(
            path=syntax.path,
            package=syntax.package,
            lines=lines,
            comment_lines=comment_lines,
        ),
        types=syntax.types,
        functions=tuple(functions),
        imports=syntax.imports,
        avg_complexity=avg,
        doc_coverage=doc_coverage(syntax.types, functions),
        maintainability_index=maintainability_index(lines, comment_lines, avg),
        max_function_depth=max((fn.max_depth for fn in functions), default=0),
        long_functions=tuple(fn for fn in functions if fn.is_long),
    )
