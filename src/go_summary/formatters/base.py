"""Base formatter interface for go-summary artifacts."""

from abc import ABC, abstractmethod
from pathlib import Path

from ..models import AnalysisResult


class BaseFormatter(ABC):
    """Abstract base class for artifact renderers.

    Renderers read the AnalysisResult and never compute metrics themselves.
    """

    #: File name of the artifact inside the output directory.
    filename: str = ""

    @abstractmethod
    def format(self, result: AnalysisResult) -> str:
        """Return the artifact's content."""

    def write(self, result: AnalysisResult, output_dir: Path) -> Path:
        """Render and write the artifact, returning its path."""
        path = Path(output_dir) / self.filename
        path.write_text(self.format(result), encoding="utf-8")
        return path
