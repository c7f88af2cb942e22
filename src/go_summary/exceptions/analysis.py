"""Analysis-related exceptions: discovery, file access, parsing, rendering."""

from pathlib import Path

from .base import GoSummaryError


class AnalysisError(GoSummaryError):
    """Base class for analysis-related errors."""

    pass


class DiscoveryError(AnalysisError):
    """Raised when the source tree cannot be traversed. Fatal for the run."""

    def __init__(self, root: Path, reason: str):
        super().__init__(
            f"Cannot scan directory: {root}",
            details={"root": str(root), "reason": reason},
        )
        self.root = root
        self.reason = reason


class ReadError(AnalysisError):
    """Raised when a source file cannot be read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot read file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ParseError(AnalysisError):
    """Raised when file content is not valid Go."""

    def __init__(self, filepath: Path, reason: str, line: int = 0):
        details = {"filepath": str(filepath), "reason": reason}
        if line:
            details["line"] = str(line)
        super().__init__(f"Failed to parse Go file: {filepath}", details=details)
        self.filepath = filepath
        self.reason = reason
        self.line = line


class RenderError(GoSummaryError):
    """Raised when an output artifact cannot be generated."""

    def __init__(self, artifact: str, reason: str):
        super().__init__(
            f"Failed to generate {artifact}",
            details={"artifact": artifact, "reason": reason},
        )
        self.artifact = artifact
        self.reason = reason
