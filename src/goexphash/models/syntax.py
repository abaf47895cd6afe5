"""Immutable syntax tree snapshot.

The Go parser hands out tree-sitter nodes that are tied to a live tree and
cannot be edited. Every downstream stage works on :class:`SyntaxNode`
instead, so filtering can build new trees without touching the parse result.
"""

from collections.abc import Iterable
from dataclasses import dataclass, replace

__all__ = ["SyntaxNode", "leaf"]


@dataclass(frozen=True)
class SyntaxNode:
    """One node of a parsed Go source file.

    Attributes
    ----------
    type : str
        Grammar node type (e.g., 'function_declaration', 'identifier', '(').
    text : str
        Source text for leaf nodes; empty for interior nodes.
    field : str | None
        Field name of this node inside its parent (e.g., 'name', 'body').
    named : bool
        False for anonymous tokens such as keywords and punctuation.
    children : tuple[SyntaxNode, ...]
        Child nodes in source order.
    start_line : int
        1-based line where the node starts.
    end_line : int
        1-based line where the node ends.
    """

    type: str
    text: str = ""
    field: str | None = None
    named: bool = True
    children: tuple["SyntaxNode", ...] = ()
    start_line: int = 0
    end_line: int = 0

    @property
    def is_leaf(self) -> bool:
        """Whether the node has no children."""
        return not self.children

    @property
    def named_children(self) -> list["SyntaxNode"]:
        """Named children, excluding comments."""
        return [c for c in self.children if c.named and c.type != "comment"]

    def child_by_field(self, name: str) -> "SyntaxNode | None":
        """Return the first named child carrying field ``name``, if any."""
        for child in self.children:
            if child.field == name and child.named:
                return child
        return None

    def children_by_field(self, name: str) -> list["SyntaxNode"]:
        """Return every named child carrying field ``name``.

        Punctuation inside a field (the commas of a name list) is skipped.
        """
        return [c for c in self.children if c.field == name and c.named]

    def children_of_type(self, *types: str) -> list["SyntaxNode"]:
        """Return direct children whose type is one of ``types``."""
        return [c for c in self.children if c.type in types]

    def with_children(self, children: Iterable["SyntaxNode"]) -> "SyntaxNode":
        """Return a copy of this node with ``children`` replaced."""
        return replace(self, children=tuple(children))


def leaf(type_: str, text: str | None = None, *, named: bool = False) -> SyntaxNode:
    """Build a synthetic leaf node.

    Parameters
    ----------
    type_ : str
        Node type.
    text : str | None, optional
        Leaf text; defaults to ``type_`` (the convention for punctuation).
    named : bool, optional
        Whether the leaf is a named node, by default False.

    Returns
    -------
    SyntaxNode
        New leaf node.
    """
    return SyntaxNode(type=type_, text=type_ if text is None else text, named=named)
