"""Tests for the go-summary exception hierarchy."""

from pathlib import Path

import pytest

from go_summary.exceptions import (
    AnalysisError,
    ConfigurationError,
    DiscoveryError,
    GoSummaryError,
    InvalidConfigError,
    InvalidPathError,
    ParseError,
    ReadError,
    RenderError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc",
        [
            DiscoveryError(Path("src"), "denied"),
            ReadError(Path("a.go"), "denied"),
            ParseError(Path("a.go"), "syntax error", line=3),
        ],
    )
    def test_analysis_errors(self, exc):
        assert isinstance(exc, AnalysisError)
        assert isinstance(exc, GoSummaryError)

    def test_render_error_is_not_analysis_error(self):
        exc = RenderError("go_code_summary.md", "disk full")
        assert not isinstance(exc, AnalysisError)
        assert isinstance(exc, GoSummaryError)

    def test_config_errors(self):
        assert isinstance(InvalidConfigError("workers", 0, "bad"), ConfigurationError)
        assert isinstance(InvalidPathError(Path("x"), "bad"), ConfigurationError)


class TestMessages:
    def test_details_appended(self):
        exc = ParseError(Path("a.go"), "syntax error", line=3)
        text = str(exc)
        assert text.startswith("Failed to parse Go file: a.go")
        assert "reason=syntax error" in text
        assert "line=3" in text

    def test_line_omitted_when_unknown(self):
        assert "line=" not in str(ParseError(Path("a.go"), "missing package clause"))

    def test_plain_message(self):
        assert str(GoSummaryError("plain")) == "plain"

    def test_render_error_fields(self):
        exc = RenderError("go_code_summary.html", "boom")
        assert exc.artifact == "go_code_summary.html"
        assert "boom" in str(exc)

    def test_config_source_in_details(self):
        exc = InvalidConfigError("workers", 0, "must be at least 1", source="GOSUMMARY_WORKERS")
        assert exc.source == "GOSUMMARY_WORKERS"
        assert "source=GOSUMMARY_WORKERS" in str(exc)
        assert "reason=must be at least 1" in str(exc)

    def test_exit_code(self):
        assert GoSummaryError("x").exit_code == 1
        assert DiscoveryError(Path("src"), "denied").exit_code == 1
