"""Top-level declaration discovery."""

from goexphash.models import Declaration, DeclarationKind, SyntaxNode
from goexphash.parse import ParsedFile

__all__ = ["collect_declarations", "is_grouped"]

_KIND_BY_NODE_TYPE: dict[str, DeclarationKind] = {
    "function_declaration": DeclarationKind.FUNCTION,
    "method_declaration": DeclarationKind.METHOD,
    "const_declaration": DeclarationKind.CONST,
    "var_declaration": DeclarationKind.VAR,
    "type_declaration": DeclarationKind.TYPE,
    "import_declaration": DeclarationKind.IMPORT,
}


def is_grouped(node: SyntaxNode) -> bool:
    """Check whether a declaration node is a parenthesized block.

    Parameters
    ----------
    node : SyntaxNode
        const/var/type/import declaration node.

    Returns
    -------
    bool
        True for ``const (...)`` style declarations.
    """
    for child in node.children:
        if child.type == "(":
            return True
        if child.type in ("var_spec_list", "import_spec_list"):
            return True
    return False


def collect_declarations(parsed: ParsedFile) -> list[Declaration]:
    """Collect the top-level declarations of a parsed file.

    Only direct children of the file are considered; declarations inside
    function bodies are not part of the package API.

    Parameters
    ----------
    parsed : ParsedFile
        Parsed Go file.

    Returns
    -------
    list[Declaration]
        Declarations in source order.
    """
    declarations: list[Declaration] = []
    for node in parsed.top_level:
        kind = _KIND_BY_NODE_TYPE.get(node.type)
        if kind is None:
            continue
        grouped = kind not in (DeclarationKind.FUNCTION, DeclarationKind.METHOD) and is_grouped(
            node
        )
        declarations.append(
            Declaration(kind=kind, node=node, grouped=grouped, source_file=parsed.filename)
        )
    return declarations
