"""Configuration exceptions: config files, env vars, option values, paths."""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from .base import GoSummaryError

Source = Union[str, Path, None]


class ConfigurationError(GoSummaryError):
    """A configuration layer could not be loaded or merged.

    ``source`` names the layer at fault: a TOML file path or an
    environment variable.
    """

    def __init__(
        self,
        message: str,
        source: Source = None,
        details: Optional[Dict[str, str]] = None,
    ):
        details = dict(details or {})
        if source is not None:
            details["source"] = str(source)
        super().__init__(message, details=details)
        self.source = source


class InvalidConfigError(ConfigurationError):
    """A configuration value failed validation."""

    def __init__(self, key: str, value: Any, reason: str, source: Source = None):
        super().__init__(
            f"Invalid value for {key}: {value!r}",
            source=source,
            details={"reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class InvalidPathError(ConfigurationError):
    """A path option points at something unusable, e.g. an output directory that is a file."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Invalid path: {path}", details={"reason": reason})
        self.path = path
        self.reason = reason
