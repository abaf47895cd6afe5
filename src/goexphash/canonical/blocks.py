"""Grouped declaration rendering and splitting.

A grouped declaration (``const (...)``, ``var (...)``, ``type (...)``) is
rendered as a block: a header line, one line per member, and a closing
paren line. Blank lines are kept where the source separated member groups
with blank lines. :func:`split_block` turns such a block back into one
keyword-prefixed entry per member.
"""

from goexphash.canonical.render import render_node
from goexphash.canonical.text import normalize_whitespace
from goexphash.models import SyntaxNode, declaration_specs

__all__ = ["render_block", "split_block"]


def render_block(node: SyntaxNode) -> str:
    """Render a grouped declaration, one member per line.

    Parameters
    ----------
    node : SyntaxNode
        ``const_declaration``, ``var_declaration`` or ``type_declaration``
        node in grouped form.

    Returns
    -------
    str
        Block text such as ``"const (\\n\\tA = 1\\n\\tB = 2\\n)"``.
    """
    keyword = node.children[0].text
    lines = [f"{keyword} ("]
    previous: SyntaxNode | None = None
    for spec in declaration_specs(node):
        if previous is not None and spec.start_line - previous.end_line > 1:
            lines.append("")
        lines.append("\t" + render_node(spec))
        previous = spec
    lines.append(")")
    return "\n".join(lines)


def split_block(text: str, keyword: str) -> list[str]:
    """Split a rendered block into one canonical entry per member.

    The first line (``keyword (``) and the last line (``)``) are boundary
    lines and are dropped. Blank lines, including one right before the
    closing paren, belong to the boundary too and never become members.

    Parameters
    ----------
    text : str
        Rendered block.
    keyword : str
        Block keyword used as entry prefix ('const', 'var' or 'type').

    Returns
    -------
    list[str]
        Entries such as ``["const A = 1", "const B = 2"]``.

    Examples
    --------
        >>> split_block("const (\\n\\tA = 1\\n\\n\\tB = 2\\n\\n)", "const")
        ['const A = 1', 'const B = 2']
    """
    lines = text.split("\n")
    while lines and not lines[-1].strip():
        lines.pop()
    if len(lines) < 2:
        return []

    entries: list[str] = []
    for line in lines[1:-1]:
        member = normalize_whitespace(line)
        if member:
            entries.append(f"{keyword} {member}")
    return entries
