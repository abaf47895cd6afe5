"""Whitespace normalization and function signature extraction."""

from goexphash.canonical.render import render_node
from goexphash.models import SyntaxNode

__all__ = ["normalize_whitespace", "function_signature"]


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single space and trim the ends.

    Parameters
    ----------
    text : str
        Rendered text, possibly spanning several lines.

    Returns
    -------
    str
        Single-line text without leading, trailing or doubled whitespace.

    Examples
    --------
        >>> normalize_whitespace("\\tA   =\\n 1 ")
        'A = 1'
    """
    return " ".join(text.split())


def function_signature(node: SyntaxNode) -> str:
    """Render a function or method declaration without its body.

    The body node is skipped structurally, so parameter and result lists
    spread over several lines are rendered in full, and declarations
    without a body (assembly-backed functions) work unchanged.

    Parameters
    ----------
    node : SyntaxNode
        ``function_declaration`` or ``method_declaration`` node.

    Returns
    -------
    str
        Normalized signature, e.g. ``"func (s *Server) Start(ctx context.Context) error"``.
    """
    return normalize_whitespace(render_node(node, skip_fields={"body"}))
