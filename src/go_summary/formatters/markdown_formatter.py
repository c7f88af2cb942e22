"""Markdown formatter: the plain-text report."""

from typing import List

from ..models import AnalysisResult, FileSummary, ProjectOverview
from .base import BaseFormatter

NO_FILES_MESSAGE = "No Go files found."


class MarkdownFormatter(BaseFormatter):
    """Render the overview, package table and per-file sections as Markdown."""

    filename = "go_code_summary.md"

    def format(self, result: AnalysisResult) -> str:
        out: List[str] = ["# Go Code Summary", "", "## Project Overview", ""]
        if result.is_empty:
            out += [NO_FILES_MESSAGE, ""]
        else:
            out += self._overview(result.overview)
        for summary in result.files:
            out += self._file_section(summary)
        return "\n".join(out)

    def _overview(self, o: ProjectOverview) -> List[str]:
        lines = [
            f"- Files Processed: {o.total_files}",
            f"- Total Lines of Code: {o.total_lines}",
            f"- Total Functions: {o.total_functions}",
            f"- Long Functions (>50 lines): {o.total_long_functions}",
            f"- Average Comment-to-Code Ratio: {o.avg_comment_ratio:.2f}%",
            f"- Average Function Complexity: {o.avg_complexity:.2f}",
            f"- Godoc Coverage: {o.doc_coverage:.2f}%",
            f"- Packages: {o.package_count}",
            f"- Dependencies: {o.dependency_count}",
            f"- Project Health Score: {o.health_score:.2f}/100",
            f"- Risky Files: {o.risky_files}",
            f"- Estimated Refactoring Effort: {o.effort_hours:.2f} hours (rough heuristic)",
            "",
            "### Package Breakdown",
            "",
        ]
        if not o.package_metrics:
            return lines + ["No packages found.", ""]

        lines += [
            "| Package | Files | Lines | Imports | Coupling |",
            "|---------|-------|-------|---------|----------|",
        ]
        for pkg, m in sorted(o.package_metrics.items()):
            lines.append(
                f"| {pkg} | {m.file_count} | {m.line_count} | {m.import_count} | {m.coupling_count} |"
            )
        return lines + [""]

    def _file_section(self, s: FileSummary) -> List[str]:
        risky = " (risky)" if s.is_risky else ""
        lines = [
            f"## {s.path} ({s.package}){risky}",
            "",
            "**Metrics**:",
            f"- Lines of Code: {s.lines}",
            f"- Number of Functions: {len(s.functions)}",
            f"- Largest Function: {s.largest_function_lines} lines",
            f"- Long Functions (>50 lines): {len(s.long_functions)}",
            f"- Comment-to-Code Ratio: {s.comment_ratio:.2f}%",
            f"- Average Function Complexity: {s.avg_complexity:.2f}",
            f"- Godoc Coverage: {s.doc_coverage:.2f}%",
            f"- Max Function Depth: {s.max_function_depth}",
            f"- Maintainability Index: {s.maintainability_index:.2f}",
            f"- Imports: {len(s.imports)}",
            "",
        ]

        if s.types:
            lines += ["### Types", ""]
            for t in s.types:
                if t.comment:
                    lines += [t.comment, ""]
                lines += ["```go", t.definition, "```", ""]

        if s.functions:
            lines += ["### Functions", ""]
            for fn in s.functions:
                if fn.comment:
                    lines += [fn.comment, ""]
                lines += ["```go", fn.signature, "```", ""]

        return lines
