"""Project aggregation: totals, package coupling, health and effort.

Computes one ProjectOverview from the path-ordered file summaries:
- Totals: files, lines, functions, long functions
- Averages over files: comment ratio, complexity, doc coverage
- Package metrics: file/line/import counts and coupling
- Health score (0-100) and risky-file count
- Effort hours: an uncalibrated size/complexity heuristic
"""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Dict, List, Sequence, Set

from .models import FileSummary, PackageMetric, ProjectOverview


def compute_coupling(files: Sequence[FileSummary]) -> Dict[str, int]:
    """Count, per package, the distinct imports that name another analyzed file's package.

    Imports are compared to package names verbatim, so only imports whose
    path equals the package clause of some other analyzed file count.
    Standard-library and third-party imports never resolve. Two
    directories may declare the same package name, so an import of the
    importer's own package name counts when another file declares it.
    """
    files_per_package = Counter(f.package for f in files)
    targets: Dict[str, Set[str]] = defaultdict(set)

    for f in files:
        for imp in f.imports:
            # Files declaring ``imp``, not counting the importing file itself.
            declaring = files_per_package[imp] - (imp == f.package)
            if declaring > 0:
                targets[f.package].add(imp)

    return {pkg: len(targets.get(pkg, ())) for pkg in files_per_package}


def compute_package_metrics(files: Sequence[FileSummary]) -> Dict[str, PackageMetric]:
    """Additive file/line/import counts plus coupling, keyed by sorted package name."""
    counts: Dict[str, List[int]] = defaultdict(lambda: [0, 0, 0])
    for f in files:
        entry = counts[f.package]
        entry[0] += 1
        entry[1] += f.lines
        entry[2] += len(f.imports)

    coupling = compute_coupling(files)
    return {
        pkg: PackageMetric(
            file_count=file_count,
            line_count=line_count,
            import_count=import_count,
            coupling_count=coupling.get(pkg, 0),
        )
        for pkg, (file_count, line_count, import_count) in sorted(counts.items())
    }


def health_score(
    avg_comment_ratio: float,
    doc_coverage: float,
    total_long_functions: int,
    total_functions: int,
    avg_complexity: float,
) -> float:
    """Weighted 0-100 score: comments 30, docs 30, short functions 20, low complexity 20.

    The ``+ 1`` in the long-function term keeps a project without functions
    well defined.
    """
    score = (
        avg_comment_ratio / 100 * 30
        + doc_coverage / 100 * 30
        + (1 - total_long_functions / (total_functions + 1)) * 20
        + (10 - avg_complexity) / 10 * 20
    )
    return max(0.0, min(100.0, score))


def effort_hours(
    total_lines: int, avg_complexity: float, total_functions: int, total_long_functions: int
) -> float:
    """Rough refactoring effort in person-hours.

    Half an hour per 100 lines, 0.2 h per unit of average complexity per
    function, 5 h per long function. Not calibrated against real data.
    """
    return (
        total_lines / 100 * 0.5
        + avg_complexity * total_functions * 0.2
        + total_long_functions * 5
    )


def compute_project_overview(files: Sequence[FileSummary]) -> ProjectOverview:
    """Aggregate path-ordered file summaries into a ProjectOverview."""
    total_files = len(files)
    total_lines = sum(f.lines for f in files)
    total_functions = sum(len(f.functions) for f in files)
    total_long = sum(len(f.long_functions) for f in files)

    if total_files:
        avg_comment_ratio = sum(f.comment_ratio for f in files) / total_files
        avg_complexity = sum(f.avg_complexity for f in files) / total_files
        avg_doc_coverage = sum(f.doc_coverage for f in files) / total_files
        health = health_score(
            avg_comment_ratio, avg_doc_coverage, total_long, total_functions, avg_complexity
        )
    else:
        avg_comment_ratio = avg_complexity = avg_doc_coverage = health = 0.0

    package_metrics = compute_package_metrics(files)
    dependencies = {imp for f in files for imp in f.imports}

    return ProjectOverview(
        total_files=total_files,
        total_lines=total_lines,
        total_functions=total_functions,
        total_long_functions=total_long,
        avg_comment_ratio=avg_comment_ratio,
        avg_complexity=avg_complexity,
        doc_coverage=avg_doc_coverage,
        package_count=len(package_metrics),
        dependency_count=len(dependencies),
        health_score=health,
        risky_files=sum(1 for f in files if f.is_risky),
        effort_hours=effort_hours(total_lines, avg_complexity, total_functions, total_long),
        package_metrics=package_metrics,
    )
