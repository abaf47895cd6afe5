"""Go source parsing via tree-sitter.

Parses Go source into a tree-sitter tree and snapshots it into immutable
:class:`~goexphash.models.SyntaxNode` trees. Function bodies of top-level
functions and methods are not snapshotted: nothing downstream renders them.
"""

from tree_sitter import Node, Parser
from tree_sitter_language_pack import get_parser

from goexphash.errors import ParseError
from goexphash.models import SyntaxNode
from goexphash.parse.base import ParsedFile, decode_source

__all__ = ["parse_source", "get_go_parser"]

# Nodes kept whole as a single token instead of being split into children
ATOMIC_TYPES = frozenset(
    {
        "interpreted_string_literal",
        "raw_string_literal",
        "rune_literal",
        "int_literal",
        "float_literal",
        "imaginary_literal",
        "comment",
    }
)

_FUNCTION_TYPES = frozenset({"function_declaration", "method_declaration"})

_parser: Parser | None = None


def get_go_parser() -> Parser:
    """Get the shared tree-sitter parser for Go.

    Returns
    -------
    Parser
        Cached parser instance.
    """
    global _parser
    if _parser is None:
        _parser = get_parser("go")
    return _parser


def parse_source(source: bytes | str, filename: str = "<source>") -> ParsedFile:
    """Parse one Go source file.

    Parameters
    ----------
    source : bytes | str
        File content.
    filename : str, optional
        Name used for reporting, by default "<source>".

    Returns
    -------
    ParsedFile
        Parsed file with its package name and syntax tree.

    Raises
    ------
    ParseError
        If the source is not valid UTF-8, contains syntax errors, or has no
        package clause.
    """
    if isinstance(source, str):
        source = source.encode("utf-8")
    source = decode_source(source, filename)

    tree = get_go_parser().parse(source)
    root = tree.root_node

    if root.has_error:
        line = _first_error_line(root)
        raise ParseError(f"{filename}:{line}: syntax error", file=filename, line=line)

    snapshot = _snapshot(root, source, field=None)
    package = _package_name(snapshot)
    if package is None:
        raise ParseError(f"{filename}: missing package clause", file=filename)

    return ParsedFile(filename=filename, package=package, root=snapshot)


def _snapshot(node: Node, source: bytes, field: str | None) -> SyntaxNode:
    start_line = node.start_point[0] + 1
    end_line = node.end_point[0] + 1

    if node.child_count == 0 or node.type in ATOMIC_TYPES:
        return SyntaxNode(
            type=node.type,
            text=source[node.start_byte : node.end_byte].decode("utf-8"),
            field=field,
            named=node.is_named,
            start_line=start_line,
            end_line=end_line,
        )

    children: list[SyntaxNode] = []
    cursor = node.walk()
    if cursor.goto_first_child():
        while True:
            child = cursor.node
            child_field = cursor.field_name
            if node.type in _FUNCTION_TYPES and child_field == "body":
                # Placeholder: keeps the field visible without its statements
                children.append(
                    SyntaxNode(
                        type=child.type,
                        field=child_field,
                        start_line=child.start_point[0] + 1,
                        end_line=child.end_point[0] + 1,
                    )
                )
            else:
                children.append(_snapshot(child, source, child_field))
            if not cursor.goto_next_sibling():
                break

    return SyntaxNode(
        type=node.type,
        field=field,
        named=node.is_named,
        children=tuple(children),
        start_line=start_line,
        end_line=end_line,
    )


def _first_error_line(root: Node) -> int:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node.start_point[0] + 1
        if node.has_error:
            stack.extend(reversed(node.children))
    return root.start_point[0] + 1


def _package_name(root: SyntaxNode) -> str | None:
    for clause in root.children_of_type("package_clause"):
        for child in clause.children:
            if child.type == "package_identifier":
                return child.text
    return None
