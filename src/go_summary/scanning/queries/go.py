"""Tree-sitter queries for Go.

Extracts:
    - The package clause
    - Import paths (single and grouped)
    - Top-level type declarations (struct, interface and any other shape)
    - Function and method declarations
"""

PACKAGE_QUERY = """
(package_clause
    (package_identifier) @package.name
)
"""

IMPORT_QUERY = """
(import_spec
    path: (_) @import.path
)
"""

# Only direct children of the source file: local types inside function
# bodies are not part of the file's declarations.
TYPE_QUERY = """
(source_file
    (type_declaration
        [(type_spec) (type_alias)] @type
    )
)
"""

FUNCTION_QUERY = """
(function_declaration
    name: (identifier) @function.name
) @function

(method_declaration
    name: (field_identifier) @method.name
) @method
"""


def get_all_queries() -> dict[str, str]:
    """Return all Go queries as a dict."""
    return {
        "package": PACKAGE_QUERY,
        "import": IMPORT_QUERY,
        "type": TYPE_QUERY,
        "function": FUNCTION_QUERY,
    }
