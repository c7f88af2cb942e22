"""Tests for per-function complexity and nesting depth."""

import pytest

from go_summary.metrics import measure_function


def _measure(extract, body: str, nested_literals: str = "inline"):
    syntax = extract(f"package p\n\nfunc f(x int, ch chan int) {{\n{body}\n}}\n")
    return measure_function(syntax.functions[0].body, nested_literals)


class TestComplexity:
    def test_empty_body_is_one(self, extract):
        metrics = _measure(extract, "")
        assert metrics.complexity == 1
        assert metrics.max_depth == 0

    def test_body_less_declaration(self):
        metrics = measure_function(None)
        assert metrics.complexity == 1
        assert metrics.max_depth == 0

    def test_sequential_ifs(self, extract):
        metrics = _measure(extract, "\tif x > 0 {\n\t}\n\tif x < 0 {\n\t}")
        assert metrics.complexity == 3

    def test_each_branch_kind_counts_once(self, extract):
        body = """
	for i := 0; i < x; i++ {
	}
	for range ch {
	}
	switch x {
	case 1:
	case 2:
	default:
	}
	var v interface{} = x
	switch v.(type) {
	case int:
	}
	select {
	case <-ch:
	default:
	}
"""
        metrics = _measure(extract, body)
        # for, range-for, switch, type switch, select
        assert metrics.complexity == 6

    def test_else_if_chain(self, extract):
        body = "\tif x > 0 {\n\t} else if x < 0 {\n\t} else {\n\t}"
        assert _measure(extract, body).complexity == 3

    def test_complexity_at_least_one(self, extract):
        metrics = _measure(extract, "\tx++\n\t_ = x")
        assert metrics.complexity >= 1


class TestNestingDepth:
    def test_single_if(self, extract):
        # The if itself plus its block.
        assert _measure(extract, "\tif x > 0 {\n\t\tx++\n\t}").max_depth == 2

    def test_sibling_ifs_do_not_accumulate(self, extract):
        body = "\tif x > 0 {\n\t}\n\tif x > 1 {\n\t}\n\tif x > 2 {\n\t}"
        assert _measure(extract, body).max_depth == 2

    def test_nested_ifs(self, extract):
        body = "\tif x > 0 {\n\t\tif x > 1 {\n\t\t\tx++\n\t\t}\n\t}"
        assert _measure(extract, body).max_depth == 4

    def test_depth_falls_after_nested_scope(self, extract):
        deep_then_shallow = (
            "\tif x > 0 {\n\t\tif x > 1 {\n\t\t}\n\t}\n"
            "\tif x > 2 {\n\t}\n\tif x > 3 {\n\t}"
        )
        shallow_only = "\tif x > 2 {\n\t}\n\tif x > 3 {\n\t}"
        assert _measure(extract, deep_then_shallow).max_depth == 4
        assert _measure(extract, shallow_only).max_depth == 2

    def test_switch_case_list_counts_as_block(self, extract):
        body = "\tswitch x {\n\tcase 1:\n\t\tx++\n\t}"
        assert _measure(extract, body).max_depth == 2

    def test_bare_block(self, extract):
        assert _measure(extract, "\t{\n\t\tx++\n\t}").max_depth == 1


class TestNestedLiterals:
    BODY = "\tg := func() {\n\t\tif x > 0 {\n\t\t}\n\t}\n\tg()"

    def test_inline_counts_toward_enclosing(self, extract):
        metrics = _measure(extract, self.BODY, "inline")
        assert metrics.complexity == 2
        # literal block, if, if block
        assert metrics.max_depth == 3
        assert metrics.literal_complexities == ()

    def test_separate_measures_literal_alone(self, extract):
        metrics = _measure(extract, self.BODY, "separate")
        assert metrics.complexity == 1
        assert metrics.max_depth == 0
        assert metrics.literal_complexities == (2,)

    @pytest.mark.parametrize("mode", ["inline", "separate"])
    def test_literal_free_body_same_in_both_modes(self, extract, mode):
        metrics = _measure(extract, "\tif x > 0 {\n\t}", mode)
        assert metrics.complexity == 2
        assert metrics.max_depth == 2
