"""
go-summary - Go source tree quality summary

Extracts declarations from a Go source tree, measures complexity, nesting,
documentation and maintainability per file, and aggregates them into a
project overview rendered as Markdown, HTML and JSON.
"""

__version__ = "0.1.0"

from .api import analyze
from .models import (
    AnalysisResult,
    FileSummary,
    FunctionDeclaration,
    PackageMetric,
    ProjectOverview,
    TypeDeclaration,
)

__all__ = [
    "analyze",
    "AnalysisResult",
    "FileSummary",
    "FunctionDeclaration",
    "PackageMetric",
    "ProjectOverview",
    "TypeDeclaration",
]
