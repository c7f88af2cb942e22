"""File discovery: find the Go sources under a root directory."""

from __future__ import annotations

import fnmatch
import os
from pathlib import Path
from typing import Iterable, Sequence

from ..exceptions import DiscoveryError
from ..logging_config import get_logger

logger = get_logger(__name__)

GO_SUFFIX = ".go"
TEST_SUFFIX = "_test.go"


def is_go_source(name: str) -> bool:
    """True for ``*.go`` file names that are not ``*_test.go``."""
    return name.endswith(GO_SUFFIX) and not name.endswith(TEST_SUFFIX)


def discover_go_files(
    root: Path | str,
    exclude_patterns: Sequence[str] = (),
    follow_symlinks: bool = False,
) -> list[Path]:
    """Recursively collect Go source files under ``root``.

    Args:
        root: Directory to scan
        exclude_patterns: Glob patterns matched against the root-relative
            POSIX path and against the bare file name
        follow_symlinks: Descend into symlinked directories

    Returns:
        Matching file paths, sorted

    Raises:
        DiscoveryError: If ``root`` is not a directory or any directory in
            the tree cannot be listed
    """
    root = Path(root)
    if not root.is_dir():
        raise DiscoveryError(root, "not a directory")

    def _on_error(err: OSError) -> None:
        raise DiscoveryError(Path(err.filename or root), err.strerror or str(err))

    found: list[Path] = []
    for dirpath, _dirnames, filenames in os.walk(
        root, onerror=_on_error, followlinks=follow_symlinks
    ):
        for name in filenames:
            if not is_go_source(name):
                continue
            path = Path(dirpath) / name
            if not path.is_file():
                continue
            if _is_excluded(path, root, name, exclude_patterns):
                logger.debug(f"Excluded by pattern: {path}")
                continue
            found.append(path)

    found.sort()
    logger.debug(f"Discovered {len(found)} Go files under {root}")
    return found


def _is_excluded(path: Path, root: Path, name: str, patterns: Iterable[str]) -> bool:
    rel = path.relative_to(root).as_posix()
    return any(fnmatch.fnmatch(rel, p) or fnmatch.fnmatch(name, p) for p in patterns)
