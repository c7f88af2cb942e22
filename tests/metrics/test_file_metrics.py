"""Tests for per-file metrics."""

import pytest

from go_summary.metrics import (
    average_complexity,
    build_file_summary,
    count_lines,
    doc_coverage,
    maintainability_index,
)
from go_summary.models import FunctionDeclaration, TypeDeclaration


def _func(name="F", comment="", complexity=1, start=1, end=3):
    return FunctionDeclaration(
        name=name,
        comment=comment,
        exported=name[:1].isupper(),
        signature=f"func {name}()",
        start_line=start,
        end_line=end,
        complexity=complexity,
    )


def _type(name="T", comment=""):
    return TypeDeclaration(
        name=name,
        comment=comment,
        exported=name[:1].isupper(),
        definition=f"type {name} struct {{\n}}",
    )


class TestCountLines:
    def test_counts_split_segments(self):
        assert count_lines("package p\n") == (2, 0)

    def test_comment_lines(self):
        text = "package p\n\n// doc\n  /* block */\nfunc F() {} // trailing\n"
        lines, comments = count_lines(text)
        assert lines == 6
        assert comments == 2

    def test_empty_text(self):
        assert count_lines("") == (1, 0)


class TestMaintainabilityIndex:
    def test_zero_lines_is_100(self):
        assert maintainability_index(0, 0, 50.0) == 100.0

    def test_formula(self):
        # 100 - (200/100 + 3*2 - 0.25*50) = 104.5 -> clamped
        assert maintainability_index(200, 50, 3.0) == 100.0
        # 100 - (1000/100 + 10*2 - 0) = 70
        assert maintainability_index(1000, 0, 10.0) == pytest.approx(70.0)

    def test_clamped_low(self):
        assert maintainability_index(100_000, 0, 40.0) == 0.0

    @pytest.mark.parametrize(
        "lines,comments,avg",
        [(1, 0, 0.0), (1, 1, 0.0), (50, 10, 2.5), (5000, 0, 30.0), (10, 10, 100.0)],
    )
    def test_always_in_range(self, lines, comments, avg):
        assert 0.0 <= maintainability_index(lines, comments, avg) <= 100.0


class TestDocCoverage:
    def test_no_exported_declarations_is_zero(self):
        assert doc_coverage([_type("t")], [_func("f")]) == 0.0
        assert doc_coverage([], []) == 0.0

    def test_counts_types_and_functions(self):
        types = [_type("A", "A doc."), _type("B")]
        functions = [_func("F", "F doc."), _func("G"), _func("hidden")]
        assert doc_coverage(types, functions) == pytest.approx(50.0)

    def test_unexported_doc_ignored(self):
        assert doc_coverage([], [_func("F", "doc"), _func("g", "doc")]) == 100.0


class TestAverageComplexity:
    def test_no_functions(self):
        assert average_complexity([]) == 0.0

    def test_mean(self):
        assert average_complexity([_func(complexity=1), _func(complexity=4)]) == 2.5


class TestLongFunctions:
    def test_51_lines_is_long(self):
        assert _func(start=1, end=51).is_long

    def test_50_lines_is_not_long(self):
        assert not _func(start=1, end=50).is_long


class TestBuildFileSummary:
    def test_summary(self, extract):
        source = """
        package p

        import "fmt"

        // Greet says hello.
        func Greet(name string) {
        	if name == "" {
        		return
        	}
        	fmt.Println(name)
        }

        func helper() {}
        """
        summary = build_file_summary(extract(source, path="p/greet.go"))

        assert summary.path == "p/greet.go"
        assert summary.package == "p"
        assert summary.imports == ("fmt",)
        assert [fn.name for fn in summary.functions] == ["Greet", "helper"]
        assert [fn.complexity for fn in summary.functions] == [2, 1]
        assert summary.avg_complexity == pytest.approx(1.5)
        assert summary.doc_coverage == 100.0
        assert summary.max_function_depth == 2
        assert summary.long_functions == ()
        assert summary.comment_lines == 1
        assert summary.largest_function_lines == 6
        assert not summary.is_risky

    def test_file_without_functions(self, extract):
        summary = build_file_summary(extract("package p\n\nvar X = 1\n"))
        assert summary.avg_complexity == 0.0
        assert summary.largest_function_lines == 0
        assert summary.max_function_depth == 0
        # X is a variable, not a type or function: nothing exported to document.
        assert summary.doc_coverage == 0.0

    def test_separate_literals_recorded(self, extract):
        source = "package p\n\nfunc F() {\n\tgo func() {\n\t\tfor {\n\t\t}\n\t}()\n}\n"
        inline = build_file_summary(extract(source), "inline")
        separate = build_file_summary(extract(source), "separate")
        assert inline.functions[0].complexity == 2
        assert separate.functions[0].complexity == 1
        assert separate.functions[0].literal_complexities == (2,)
