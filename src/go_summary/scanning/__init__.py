"""Scanning layer: file discovery and tree-sitter syntax extraction."""

from .discovery import discover_go_files, is_go_source
from .extractor import SyntaxExtractor
from .syntax import FileSyntax, FunctionSyntax
from .treesitter_parser import GoParser

__all__ = [
    "discover_go_files",
    "is_go_source",
    "SyntaxExtractor",
    "FileSyntax",
    "FunctionSyntax",
    "GoParser",
]
