"""Artifact renderers for go-summary."""

from pathlib import Path
from typing import List, Tuple

from ..exceptions import RenderError
from ..logging_config import get_logger
from ..models import AnalysisResult
from .base import BaseFormatter
from .html_formatter import HtmlFormatter
from .json_formatter import JsonFormatter, result_to_dict
from .markdown_formatter import MarkdownFormatter

logger = get_logger(__name__)

_FORMATTERS = {
    "markdown": MarkdownFormatter,
    "html": HtmlFormatter,
    "json": JsonFormatter,
}


def get_formatter(name: str) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "markdown", "html", "json"

    Raises:
        ValueError: If name is not recognized
    """
    cls = _FORMATTERS.get(name)
    if cls is None:
        raise ValueError(
            f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(_FORMATTERS))}"
        )
    return cls()


def write_artifacts(
    result: AnalysisResult, output_dir: Path
) -> Tuple[List[Path], List[RenderError]]:
    """Write all three artifacts.

    Every artifact is attempted even if an earlier one fails.

    Returns:
        (paths written, errors for the artifacts that failed)
    """
    written: List[Path] = []
    errors: List[RenderError] = []
    for name in ("markdown", "html", "json"):
        formatter = get_formatter(name)
        try:
            written.append(formatter.write(result, Path(output_dir)))
        except Exception as e:
            logger.debug(f"Rendering {formatter.filename} failed", exc_info=True)
            errors.append(RenderError(formatter.filename, str(e)))
    return written, errors


__all__ = [
    "BaseFormatter",
    "MarkdownFormatter",
    "HtmlFormatter",
    "JsonFormatter",
    "get_formatter",
    "result_to_dict",
    "write_artifacts",
]
