"""HTML formatter: a single page with collapsible file sections.

Styling comes from the Tailwind CDN and the package chart from Chart.js;
both are loaded by the browser, nothing is bundled here.
"""

import json
from html import escape
from typing import List

from ..models import AnalysisResult, FileSummary, ProjectOverview
from .base import BaseFormatter
from .markdown_formatter import NO_FILES_MESSAGE

TAILWIND_CDN = "https://cdn.tailwindcss.com"
CHARTJS_CDN = "https://cdn.jsdelivr.net/npm/chart.js"


class HtmlFormatter(BaseFormatter):
    """Render the result as a standalone HTML page."""

    filename = "go_code_summary.html"

    def format(self, result: AnalysisResult) -> str:
        if result.is_empty:
            overview = f"<p>{NO_FILES_MESSAGE}</p>"
        else:
            overview = self._overview(result.overview)
        files = "\n".join(self._file_section(s) for s in result.files)
        return _PAGE.format(
            tailwind=TAILWIND_CDN,
            chartjs=CHARTJS_CDN,
            overview=overview,
            files=files,
        )

    def _overview(self, o: ProjectOverview) -> str:
        items = _list_items(
            [
                f"Files Processed: {o.total_files}",
                f"Total Lines of Code: {o.total_lines}",
                f"Total Functions: {o.total_functions}",
                f"Long Functions (&gt;50 lines): {o.total_long_functions}",
                f"Average Comment-to-Code Ratio: {o.avg_comment_ratio:.2f}%",
                f"Average Function Complexity: {o.avg_complexity:.2f}",
                f"Godoc Coverage: {o.doc_coverage:.2f}%",
                f"Packages: {o.package_count}",
                f"Dependencies: {o.dependency_count}",
                f"Project Health Score: {o.health_score:.2f}/100",
                f"Risky Files: {o.risky_files}",
                f"Estimated Refactoring Effort: {o.effort_hours:.2f} hours (rough heuristic)",
            ]
        )
        html = [
            f'<ul class="list-disc ml-6 mb-4">{items}</ul>',
            '<h3 class="text-lg font-medium mb-2">Package Breakdown</h3>',
        ]
        if not o.package_metrics:
            html.append("<p>No packages found.</p>")
            return "\n".join(html)

        packages = sorted(o.package_metrics.items())
        chart = {
            "labels": [pkg for pkg, _ in packages],
            "files": [m.file_count for _, m in packages],
            "lines": [m.line_count for _, m in packages],
        }
        rows = "".join(
            f"<tr><td>{escape(pkg)}</td><td>{m.file_count}</td><td>{m.line_count}</td>"
            f"<td>{m.import_count}</td><td>{m.coupling_count}</td></tr>"
            for pkg, m in packages
        )
        html += [
            '<canvas id="packageChart" class="mb-4"></canvas>',
            _CHART_SCRIPT.replace("__DATA__", _script_json(chart)),
            '<table class="table-auto mb-4"><thead><tr><th>Package</th><th>Files</th>'
            "<th>Lines</th><th>Imports</th><th>Coupling</th></tr></thead>"
            f"<tbody>{rows}</tbody></table>",
        ]
        return "\n".join(html)

    def _file_section(self, s: FileSummary) -> str:
        items = _list_items(
            [
                f"Lines of Code: {s.lines}",
                f"Number of Functions: {len(s.functions)}",
                f"Largest Function: {s.largest_function_lines} lines",
                f"Long Functions (&gt;50 lines): {len(s.long_functions)}",
                f"Comment-to-Code Ratio: {s.comment_ratio:.2f}%",
                f"Average Function Complexity: {s.avg_complexity:.2f}",
                f"Godoc Coverage: {s.doc_coverage:.2f}%",
                f"Max Function Depth: {s.max_function_depth}",
                f"Maintainability Index: {s.maintainability_index:.2f}",
                f"Imports: {len(s.imports)}",
            ]
        )
        parts = [
            '<details class="mb-4 bg-white rounded-lg shadow">',
            f'<summary class="p-4 text-xl font-semibold cursor-pointer">'
            f"{escape(s.path)} ({escape(s.package)}){' &mdash; risky' if s.is_risky else ''}"
            "</summary>",
            '<div class="p-4">',
            '<h3 class="text-lg font-medium">Metrics</h3>',
            f'<ul class="list-disc ml-6 mb-4">{items}</ul>',
        ]
        if s.types:
            parts.append('<h3 class="text-lg font-medium">Types</h3>')
            for t in s.types:
                parts += _declaration(t.comment, t.definition)
        if s.functions:
            parts.append('<h3 class="text-lg font-medium mt-4">Functions</h3>')
            for fn in s.functions:
                parts += _declaration(fn.comment, fn.signature)
        parts += ["</div>", "</details>"]
        return "\n".join(parts)


def _list_items(items: List[str]) -> str:
    return "".join(f"<li>{item}</li>" for item in items)


def _declaration(comment: str, code: str) -> List[str]:
    html = []
    if comment:
        html.append(f'<p class="mb-2">{escape(comment)}</p>')
    html.append(f"<pre><code>{escape(code)}</code></pre>")
    return html


def _script_json(data: dict) -> str:
    """JSON that is safe to inline inside a <script> element."""
    return json.dumps(data).replace("</", "<\\/")


_CHART_SCRIPT = """<script>
    const packageData = __DATA__;
    new Chart(document.getElementById('packageChart').getContext('2d'), {
        type: 'bar',
        data: {
            labels: packageData.labels,
            datasets: [
                { label: 'File Count', data: packageData.files, backgroundColor: '#3b82f6' },
                { label: 'Line Count', data: packageData.lines, backgroundColor: '#10b981' }
            ]
        },
        options: { scales: { y: { beginAtZero: true } } }
    });
</script>"""

_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Go Code Summary</title>
    <script src="{tailwind}"></script>
    <script src="{chartjs}"></script>
    <style>
        pre {{ background-color: #1f2937; color: #e5e7eb; padding: 1rem; border-radius: 0.5rem; }}
        code {{ font-family: monospace; }}
    </style>
</head>
<body class="bg-gray-100 font-sans">
    <div class="container mx-auto p-4">
        <h1 class="text-3xl font-bold mb-4">Go Code Summary</h1>
        <h2 class="text-2xl font-semibold mb-2">Project Overview</h2>
{overview}
{files}
    </div>
</body>
</html>
"""
