"""Per-function cyclomatic complexity and nesting depth.

Both numbers come from one walk over the function body:

- complexity starts at 1 and gains one per ``if``, ``for`` (range loops
  included), expression switch, type switch and ``select``;
- depth rises when the walk enters a branching construct or a nested
  block and falls again when it leaves, so ``max_depth`` is the deepest
  simultaneous nesting. The function's own body block is level 0, and the
  case list of a switch/select counts as one block of its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

BRANCH_TYPES = frozenset(
    {
        "if_statement",
        "for_statement",
        "expression_switch_statement",
        "type_switch_statement",
        "select_statement",
    }
)

# Constructs whose case list forms a block scope without a ``block`` node.
IMPLICIT_BODY_TYPES = frozenset(
    {
        "expression_switch_statement",
        "type_switch_statement",
        "select_statement",
    }
)

BLOCK_TYPE = "block"
FUNC_LITERAL_TYPE = "func_literal"

INLINE = "inline"
SEPARATE = "separate"


@dataclass(frozen=True)
class FunctionMetrics:
    """Complexity numbers for one function body."""

    complexity: int = 1
    max_depth: int = 0
    literal_complexities: tuple[int, ...] = ()


def measure_function(body: Any, nested_literals: str = INLINE) -> FunctionMetrics:
    """Measure a function body.

    Args:
        body: tree-sitter ``block`` node, or None for a body-less declaration
        nested_literals: ``"inline"`` walks function literals as part of this
            function; ``"separate"`` skips them here and measures each one as
            its own unit

    Returns:
        FunctionMetrics with complexity >= 1 and max_depth >= 0
    """
    if body is None:
        return FunctionMetrics()

    separate = nested_literals == SEPARATE
    complexity = 1
    max_depth = 0
    literals: list[int] = []

    stack: list[tuple[Any, int]] = [(child, 0) for child in reversed(body.children)]
    while stack:
        node, depth = stack.pop()

        if separate and node.type == FUNC_LITERAL_TYPE:
            inner = measure_function(node.child_by_field_name("body"), nested_literals)
            literals.append(inner.complexity)
            literals.extend(inner.literal_complexities)
            continue

        if node.type in BRANCH_TYPES:
            complexity += 1
            depth += 1
            if node.type in IMPLICIT_BODY_TYPES:
                depth += 1
        elif node.type == BLOCK_TYPE:
            depth += 1

        if depth > max_depth:
            max_depth = depth

        stack.extend((child, depth) for child in reversed(node.children))

    return FunctionMetrics(
        complexity=complexity,
        max_depth=max_depth,
        literal_complexities=tuple(literals),
    )
