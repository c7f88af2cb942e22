"""Metrics engine: per-function and per-file measurements."""

from .complexity import FunctionMetrics, measure_function
from .file_metrics import (
    average_complexity,
    build_file_summary,
    count_lines,
    doc_coverage,
    maintainability_index,
)

__all__ = [
    "FunctionMetrics",
    "measure_function",
    "average_complexity",
    "build_file_summary",
    "count_lines",
    "doc_coverage",
    "maintainability_index",
]
