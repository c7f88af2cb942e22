"""JSON formatter: structured dump of the overview and every file."""

import json
from dataclasses import asdict
from typing import Any, Dict

from ..models import AnalysisResult, FileSummary, FunctionDeclaration, ProjectOverview
from .base import BaseFormatter


def overview_to_dict(overview: ProjectOverview) -> Dict[str, Any]:
    data = {k: v for k, v in asdict(overview).items() if k != "package_metrics"}
    data["package_metrics"] = {
        pkg: asdict(metric) for pkg, metric in sorted(overview.package_metrics.items())
    }
    return data


def function_to_dict(fn: FunctionDeclaration) -> Dict[str, Any]:
    data = asdict(fn)
    data["line_count"] = fn.line_count
    data["literal_complexities"] = list(fn.literal_complexities)
    return data


def file_to_dict(summary: FileSummary) -> Dict[str, Any]:
    return {
        "filename": summary.path,
        "package": summary.package,
        "types": [asdict(t) for t in summary.types],
        "functions": [function_to_dict(fn) for fn in summary.functions],
        "imports": list(summary.imports),
        "lines": summary.lines,
        "comment_lines": summary.comment_lines,
        "largest_function_lines": summary.largest_function_lines,
        "comment_ratio": summary.comment_ratio,
        "long_functions": [function_to_dict(fn) for fn in summary.long_functions],
        "avg_complexity": summary.avg_complexity,
        "doc_coverage": summary.doc_coverage,
        "max_function_depth": summary.max_function_depth,
        "maintainability_index": summary.maintainability_index,
        "risky": summary.is_risky,
    }


def result_to_dict(result: AnalysisResult) -> Dict[str, Any]:
    return {
        "overview": overview_to_dict(result.overview),
        "files": [file_to_dict(f) for f in result.files],
    }


class JsonFormatter(BaseFormatter):
    """Render the result as indented JSON."""

    filename = "go_code_summary.json"

    def format(self, result: AnalysisResult) -> str:
        return json.dumps(result_to_dict(result), indent=2)
