"""Public API for go-summary.

Runs the whole pipeline for one directory: discovery, then extraction and
metrics per file, then aggregation over the files sorted by path.

Example:
    >>> from go_summary import analyze
    >>> result = analyze("/path/to/module")
    >>> result.overview.health_score
    72.4
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Optional, Union

from .aggregation import compute_project_overview
from .config import AnalysisConfig, load_config
from .exceptions import AnalysisError
from .logging_config import get_logger
from .metrics import build_file_summary
from .models import AnalysisResult, FileSummary, SkippedFile
from .scanning import SyntaxExtractor, discover_go_files

logger = get_logger(__name__)

# Smallest file count that is fanned out to the thread pool.
_MIN_PARALLEL_FILES = 10

_Outcome = Union[FileSummary, SkippedFile]


def analyze(
    path: Union[str, Path] = ".",
    config_file: Optional[Path] = None,
    config: Optional[AnalysisConfig] = None,
    **overrides,
) -> AnalysisResult:
    """Analyze the Go sources under ``path``.

    Args:
        path: Root directory to analyze
        config_file: Optional TOML config file
        config: Ready-made configuration; skips loading when given
        **overrides: Configuration overrides (e.g. ``workers=4``)

    Returns:
        AnalysisResult with the overview, path-sorted file summaries and
        the files that were skipped

    Raises:
        DiscoveryError: If the directory tree cannot be traversed
    """
    if config is None:
        config = load_config(config_file=config_file, **overrides)

    root = Path(path)
    paths = discover_go_files(
        root,
        exclude_patterns=config.exclude_patterns,
        follow_symlinks=config.follow_symlinks,
    )
    logger.info(f"Analyzing {len(paths)} Go files under {root}")

    summaries: list[FileSummary] = []
    skipped: list[SkippedFile] = []
    for outcome in _summarize_all(paths, config):
        if isinstance(outcome, SkippedFile):
            logger.warning(f"Skipping {outcome.path}: {outcome.reason}")
            skipped.append(outcome)
        else:
            summaries.append(outcome)

    summaries.sort(key=lambda s: s.path)
    skipped.sort(key=lambda s: s.path)

    return AnalysisResult(
        root=root,
        overview=compute_project_overview(summaries),
        files=tuple(summaries),
        skipped=tuple(skipped),
    )


def summarize_file(
    file_path: Path, extractor: SyntaxExtractor, nested_literals: str = "inline"
) -> FileSummary:
    """Extract and measure one file.

    Raises:
        ReadError: If the file cannot be read
        ParseError: If the file is not valid Go
    """
    syntax = extractor.extract(file_path)
    return build_file_summary(syntax, nested_literals)


def _summarize_all(paths: list[Path], config: AnalysisConfig) -> Iterable[_Outcome]:
    extractor = SyntaxExtractor()

    def _task(file_path: Path) -> _Outcome:
        try:
            return summarize_file(file_path, extractor, config.nested_literals)
        except AnalysisError as e:
            return SkippedFile(path=str(file_path), reason=str(e))

    if config.workers == 1 or len(paths) < _MIN_PARALLEL_FILES:
        return [_task(p) for p in paths]

    # Workers only build immutable summaries; the caller sorts and aggregates.
    with ThreadPoolExecutor(max_workers=config.workers) as executor:
        return list(executor.map(_task, paths))
