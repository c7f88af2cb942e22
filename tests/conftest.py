"""Shared test fixtures for go-summary."""

import os
import textwrap
from pathlib import Path

import pytest

from go_summary.scanning import SyntaxExtractor


@pytest.fixture
def write_go(tmp_path):
    """Write dedented Go source under tmp_path and return its path."""

    def _write(relpath: str, source: str) -> Path:
        path = tmp_path / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(source).lstrip("\n"), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def extractor():
    return SyntaxExtractor()


@pytest.fixture
def extract(extractor):
    """Extract FileSyntax from an inline Go snippet."""

    def _extract(source: str, path: str = "main.go"):
        code = textwrap.dedent(source).lstrip("\n").encode("utf-8")
        return extractor.extract_source(code, path)

    return _extract


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user/project config files and GOSUMMARY_* env vars out of tests."""
    home = tmp_path / "_home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
    for key in list(os.environ):
        if key.startswith("GOSUMMARY_"):
            monkeypatch.delenv(key)
