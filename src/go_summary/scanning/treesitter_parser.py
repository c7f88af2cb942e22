"""Tree-sitter parser wrapper for Go.

Usage:
    parser = GoParser()
    tree = parser.parse(code_bytes, path)
    captures = parser.query(tree.root_node, query_str)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterator

import tree_sitter
import tree_sitter_go

from ..exceptions import ParseError

GO_LANGUAGE = tree_sitter.Language(tree_sitter_go.language())

Capture = tuple[Any, str]


class GoParser:
    """Parses Go source into tree-sitter syntax trees.

    A fresh ``tree_sitter.Parser`` is created for every parse so one
    GoParser can be shared by extraction workers. Compiled queries are
    cached per query string.
    """

    def __init__(self) -> None:
        self._queries: dict[str, Any] = {}

    def parse(self, code: bytes, path: Path | str = "<memory>") -> Any:
        """Parse code and return the syntax tree.

        Raises:
            ParseError: If the source contains syntax errors
        """
        parser = tree_sitter.Parser(GO_LANGUAGE)
        tree = parser.parse(code)
        root = tree.root_node
        if root.has_error:
            bad = first_error_node(root)
            line = bad.start_point[0] + 1 if bad is not None else 0
            reason = "missing token" if bad is not None and bad.is_missing else "syntax error"
            raise ParseError(Path(path), reason, line=line)
        return tree

    def query(self, node: Any, query_str: str) -> list[Capture]:
        """Run a query under ``node``.

        Returns:
            List of (node, capture_name) tuples in source order
        """
        query = self._queries.get(query_str)
        if query is None:
            query = tree_sitter.Query(GO_LANGUAGE, query_str)
            self._queries[query_str] = query

        cursor = tree_sitter.QueryCursor(query)
        result: list[Capture] = []
        for _pattern_id, captures_dict in cursor.matches(node):
            for capture_name, nodes in captures_dict.items():
                for captured in nodes:
                    result.append((captured, capture_name))
        result.sort(key=lambda c: (c[0].start_byte, c[1]))
        return result


def first_error_node(node: Any) -> Any | None:
    """Depth-first search for the first ERROR or missing node."""
    for child in iter_tree(node):
        if child.type == "ERROR" or child.is_missing:
            return child
    return None


def iter_tree(node: Any) -> Iterator[Any]:
    """Yield ``node`` and all its descendants in pre-order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def node_text(node: Any) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")
