"""Root of the go-summary exception hierarchy."""

from typing import Dict, Optional


class GoSummaryError(Exception):
    """Base exception for all go-summary errors.

    ``details`` are rendered after the message as ``key=value`` pairs.
    ``exit_code`` is what the CLI exits with when the error ends a run.
    """

    exit_code = 1

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})

    def __str__(self) -> str:
        if not self.details:
            return self.message
        pairs = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({pairs})"
