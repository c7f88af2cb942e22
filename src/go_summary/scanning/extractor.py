"""SyntaxExtractor: turns one Go file into a FileSyntax.

Parsing is delegated to tree-sitter; a file with syntax errors raises
ParseError and is dropped by the caller. Doc comments are attached by
walking the syntax tree: the comment group immediately above a declaration
(no blank line between) is its documentation, as in ``go/doc``.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Optional

from ..exceptions import ParseError, ReadError
from ..logging_config import get_logger
from ..models import TypeDeclaration
from .queries import get_query
from .syntax import FileSyntax, FunctionSyntax
from .treesitter_parser import GoParser, node_text

logger = get_logger(__name__)

_DIRECTIVE = re.compile(r"^(line |extern |export |[a-z0-9]+:[a-z0-9])")


def is_exported(name: str) -> bool:
    """Go's rule: an identifier is exported if it starts with an upper-case letter."""
    return name[:1].isupper()


def normalize(text: str) -> str:
    """Collapse all whitespace runs to single spaces."""
    return " ".join(text.split())


class SyntaxExtractor:
    """Extracts FileSyntax from Go source files."""

    def __init__(self, parser: Optional[GoParser] = None) -> None:
        self._parser = parser or GoParser()

    def extract(self, file_path: Path) -> FileSyntax:
        """Read and parse one file.

        Raises:
            ReadError: If the file cannot be read
            ParseError: If the file is not valid Go
        """
        try:
            code = file_path.read_bytes()
        except OSError as e:
            raise ReadError(file_path, e.strerror or str(e))
        return self.extract_source(code, str(file_path))

    def extract_source(self, code: bytes, path: str = "<memory>") -> FileSyntax:
        """Parse Go source that is already in memory."""
        tree = self._parser.parse(code, path)
        root = tree.root_node

        package = self._extract_package(root)
        if not package:
            raise ParseError(Path(path), "missing package clause")

        syntax = FileSyntax(
            path=path,
            package=package,
            text=code.decode("utf-8", errors="replace"),
            imports=self._extract_imports(root),
            types=self._extract_types(root),
            functions=self._extract_functions(root),
            tree=tree,
        )
        logger.debug(
            f"{path}: package {package}, {len(syntax.types)} types, "
            f"{len(syntax.functions)} functions, {len(syntax.imports)} imports"
        )
        return syntax

    # ── Package and imports ────────────────────────────────────

    def _extract_package(self, root: Any) -> str:
        for node, _name in self._parser.query(root, get_query("package")):
            return node_text(node)
        return ""

    def _extract_imports(self, root: Any) -> tuple[str, ...]:
        imports = []
        for node, _name in self._parser.query(root, get_query("import")):
            imports.append(node_text(node).strip('"`'))
        return tuple(imports)

    # ── Types ──────────────────────────────────────────────────

    def _extract_types(self, root: Any) -> tuple[TypeDeclaration, ...]:
        types = []
        for spec, _name in self._parser.query(root, get_query("type")):
            definition = render_type(spec)
            if definition is None:
                continue
            name = node_text(spec.child_by_field_name("name"))
            types.append(
                TypeDeclaration(
                    name=name,
                    comment=doc_comment(spec),
                    exported=is_exported(name),
                    definition=definition,
                )
            )
        return tuple(types)

    # ── Functions ──────────────────────────────────────────────

    def _extract_functions(self, root: Any) -> tuple[FunctionSyntax, ...]:
        functions = []
        for node, capture_name in self._parser.query(root, get_query("function")):
            if capture_name not in ("function", "method"):
                continue
            name = node_text(node.child_by_field_name("name"))
            functions.append(
                FunctionSyntax(
                    name=name,
                    comment=doc_comment(node),
                    exported=is_exported(name),
                    signature=render_signature(node),
                    start_line=node.start_point[0] + 1,
                    end_line=node.end_point[0] + 1,
                    body=node.child_by_field_name("body"),
                )
            )
        return tuple(functions)


# ── Rendering ──────────────────────────────────────────────────


def render_type(spec: Any) -> Optional[str]:
    """Render a struct or interface type spec; None for any other shape."""
    type_node = spec.child_by_field_name("type")
    if type_node is None:
        return None

    if type_node.type == "struct_type":
        kind, members = "struct", _struct_members(type_node)
    elif type_node.type == "interface_type":
        kind, members = "interface", _interface_members(type_node)
    else:
        return None

    name = node_text(spec.child_by_field_name("name"))
    type_params = normalize(node_text(spec.child_by_field_name("type_parameters")))
    body = "".join(f"\t{member}\n" for member in members)
    return f"type {name}{type_params} {kind} {{\n{body}}}"


def _struct_members(struct_node: Any) -> list[str]:
    members: list[str] = []
    for field_list in struct_node.named_children:
        if field_list.type != "field_declaration_list":
            continue
        for field_decl in field_list.named_children:
            if field_decl.type != "field_declaration":
                continue
            type_node = field_decl.child_by_field_name("type")
            names = field_decl.children_by_field_name("name")
            if names:
                type_text = normalize(node_text(type_node))
                members.extend(f"{node_text(n)} {type_text}" for n in names)
            elif type_node is not None:
                # Embedded field: keep a leading '*' but drop any tag.
                length = type_node.end_byte - field_decl.start_byte
                members.append(normalize(field_decl.text[:length].decode("utf-8", "replace")))
    return members


def _interface_members(iface_node: Any) -> list[str]:
    return [
        normalize(node_text(elem))
        for elem in iface_node.named_children
        if elem.type != "comment"
    ]


def render_signature(func_node: Any) -> str:
    """Render ``func [(recv) ]Name[T](params) results`` for a declaration."""
    parts = ["func "]

    receiver = func_node.child_by_field_name("receiver")
    if receiver is not None:
        recv = _render_params(receiver)
        if recv:
            parts.append(f"({recv[0]}) ")

    parts.append(node_text(func_node.child_by_field_name("name")))
    parts.append(normalize(node_text(func_node.child_by_field_name("type_parameters"))))

    params = func_node.child_by_field_name("parameters")
    parts.append(f"({', '.join(_render_params(params))})")

    results = _render_results(func_node.child_by_field_name("result"))
    if len(results) > 1:
        parts.append(f" ({', '.join(results)})")
    elif results:
        parts.append(f" {results[0]}")

    return "".join(parts)


def _param_declarations(param_list: Any) -> list[tuple[list[str], str]]:
    """(names, type text) for every declaration in a parameter list."""
    decls: list[tuple[list[str], str]] = []
    if param_list is None:
        return decls
    for decl in param_list.named_children:
        if decl.type not in ("parameter_declaration", "variadic_parameter_declaration"):
            continue
        type_text = normalize(node_text(decl.child_by_field_name("type")))
        if decl.type == "variadic_parameter_declaration":
            type_text = f"...{type_text}"
        names = [node_text(n) for n in decl.children_by_field_name("name")]
        decls.append((names, type_text))
    return decls


def _render_params(param_list: Any) -> list[str]:
    rendered: list[str] = []
    for names, type_text in _param_declarations(param_list):
        if names:
            rendered.extend(f"{name} {type_text}" for name in names)
        else:
            rendered.append(type_text)
    return rendered


def _render_results(result: Any) -> list[str]:
    if result is None:
        return []
    if result.type != "parameter_list":
        return [normalize(node_text(result))]
    rendered: list[str] = []
    for names, type_text in _param_declarations(result):
        rendered.extend([type_text] * max(len(names), 1))
    return rendered


# ── Doc comments ───────────────────────────────────────────────


def doc_comment(decl: Any) -> str:
    """Return the cleaned doc comment attached to a declaration node."""
    target = decl
    parent = decl.parent
    if decl.type in ("type_spec", "type_alias") and parent is not None:
        if parent.type == "type_declaration" and not _is_grouped(parent):
            target = parent

    group: list[Any] = []
    boundary = target.start_point[0]
    prev = target.prev_named_sibling
    while prev is not None and prev.type == "comment":
        if prev.end_point[0] < boundary - 1:
            break
        group.append(prev)
        boundary = prev.start_point[0]
        prev = prev.prev_named_sibling

    # A comment sharing a line with earlier code trails that code.
    if group and prev is not None and prev.type != "comment":
        if prev.end_point[0] == group[-1].start_point[0]:
            group.pop()

    group.reverse()
    return comment_text([node_text(c) for c in group])


def _is_grouped(type_decl: Any) -> bool:
    return any(child.type == "(" for child in type_decl.children)


def comment_text(comments: list[str]) -> str:
    """Strip comment markers the way ``go/ast.CommentGroup.Text`` does."""
    lines: list[str] = []
    for raw in comments:
        if raw.startswith("//"):
            body = raw[2:]
            if _DIRECTIVE.match(body):
                continue
            if body.startswith(" "):
                body = body[1:]
            lines.append(body)
        elif raw.startswith("/*"):
            lines.extend(raw[2:-2].split("\n"))
        else:
            lines.append(raw)

    cleaned: list[str] = []
    for line in (line.rstrip() for line in lines):
        if not line and (not cleaned or not cleaned[-1]):
            continue
        cleaned.append(line)

    return "\n".join(cleaned).strip()
