"""Exception hierarchy for go-summary."""

from .analysis import (
    AnalysisError,
    DiscoveryError,
    ParseError,
    ReadError,
    RenderError,
)
from .base import GoSummaryError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)

__all__ = [
    "GoSummaryError",
    "AnalysisError",
    "DiscoveryError",
    "ReadError",
    "ParseError",
    "RenderError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
