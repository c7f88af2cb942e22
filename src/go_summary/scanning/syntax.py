"""Syntax models for parsed Go files.

FileSyntax is what extraction hands to the metrics engine: the package
name, import paths, finished type declarations, and function declarations
that still carry their body node so complexity can be measured.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..models import TypeDeclaration


@dataclass(frozen=True)
class FunctionSyntax:
    """A function or method declaration before measurement.

    Attributes:
        name: Function or method name
        comment: Attached doc comment, empty if none
        exported: True if the name is exported
        signature: Normalized signature text
        start_line: First line (1-indexed)
        end_line: Last line (inclusive)
        body: tree-sitter ``block`` node, or None for body-less declarations
    """

    name: str
    comment: str
    exported: bool
    signature: str
    start_line: int
    end_line: int
    body: Any = None


@dataclass(frozen=True)
class FileSyntax:
    """Declarations extracted from one Go file.

    ``tree`` is kept so the body nodes of ``functions`` stay valid.
    """

    path: str
    package: str
    text: str
    imports: tuple[str, ...]
    types: tuple[TypeDeclaration, ...]
    functions: tuple[FunctionSyntax, ...]
    tree: Any = None
