"""Tree-sitter query registry."""

from __future__ import annotations

from . import go


def get_query(query_name: str) -> str:
    """Get a Go query by name.

    Args:
        query_name: Query name ("package", "import", "type", "function")

    Raises:
        KeyError: If no query has that name
    """
    return go.get_all_queries()[query_name]


__all__ = ["get_query"]
