"""Tests for Go source discovery."""

import pytest

from go_summary.exceptions import DiscoveryError
from go_summary.scanning import discover_go_files, is_go_source


class TestIsGoSource:
    def test_plain_go_file(self):
        assert is_go_source("main.go")

    def test_test_files_excluded(self):
        assert not is_go_source("main_test.go")

    def test_other_suffixes_excluded(self):
        for name in ("main.py", "go.mod", "main.go.bak", "README"):
            assert not is_go_source(name)


class TestDiscoverGoFiles:
    def test_finds_nested_files_sorted(self, tmp_path):
        for rel in ("z.go", "a/b.go", "a/a.go", "cmd/tool/main.go"):
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("package x\n")

        found = discover_go_files(tmp_path)

        rels = [p.relative_to(tmp_path).as_posix() for p in found]
        assert rels == ["a/a.go", "a/b.go", "cmd/tool/main.go", "z.go"]

    def test_skips_tests_and_non_go(self, tmp_path):
        (tmp_path / "main.go").write_text("package main\n")
        (tmp_path / "main_test.go").write_text("package main\n")
        (tmp_path / "go.mod").write_text("module x\n")
        (tmp_path / "notes.txt").write_text("hi\n")

        found = discover_go_files(tmp_path)

        assert [p.name for p in found] == ["main.go"]

    def test_empty_directory(self, tmp_path):
        assert discover_go_files(tmp_path) == []

    def test_exclude_by_relative_path(self, tmp_path):
        (tmp_path / "vendor" / "lib").mkdir(parents=True)
        (tmp_path / "vendor" / "lib" / "lib.go").write_text("package lib\n")
        (tmp_path / "main.go").write_text("package main\n")

        found = discover_go_files(tmp_path, exclude_patterns=["vendor/*"])

        assert [p.name for p in found] == ["main.go"]

    def test_exclude_by_file_name(self, tmp_path):
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "zz_generated.go").write_text("package sub\n")
        (tmp_path / "sub" / "real.go").write_text("package sub\n")

        found = discover_go_files(tmp_path, exclude_patterns=["zz_*.go"])

        assert [p.name for p in found] == ["real.go"]

    def test_missing_root_raises(self, tmp_path):
        with pytest.raises(DiscoveryError) as exc_info:
            discover_go_files(tmp_path / "nope")
        assert exc_info.value.reason == "not a directory"

    def test_file_root_raises(self, tmp_path):
        path = tmp_path / "main.go"
        path.write_text("package main\n")
        with pytest.raises(DiscoveryError):
            discover_go_files(path)
