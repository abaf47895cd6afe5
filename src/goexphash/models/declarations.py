"""Declaration and canonical entry models.

A :class:`Declaration` is one top-level syntactic unit of a Go file. The
classifier turns declarations into :class:`CanonicalEntry` lines, which are
the only input of the fingerprint.
"""

from dataclasses import dataclass
from enum import Enum

from goexphash.models.syntax import SyntaxNode

__all__ = [
    "DeclarationKind",
    "EntryKind",
    "Declaration",
    "CanonicalEntry",
    "SPEC_TYPES",
    "declaration_specs",
]

# Member node types of const/var/type/import declarations
SPEC_TYPES = frozenset({"const_spec", "var_spec", "type_spec", "type_alias", "import_spec"})

# Intermediate list nodes some grammar versions wrap grouped specs in
_SPEC_LIST_TYPES = frozenset({"var_spec_list", "import_spec_list"})


class DeclarationKind(str, Enum):
    """Syntactic category of a top-level declaration."""

    FUNCTION = "function"
    METHOD = "method"
    CONST = "const"
    VAR = "var"
    TYPE = "type"
    IMPORT = "import"

    @property
    def keyword(self) -> str:
        """Go keyword introducing the declaration."""
        if self in (DeclarationKind.FUNCTION, DeclarationKind.METHOD):
            return "func"
        return self.value


class EntryKind(str, Enum):
    """Category of a canonical entry."""

    FUNCTION = "function"
    CONST_BLOCK_MEMBER = "const-block-member"
    VAR_BLOCK_MEMBER = "var-block-member"
    TYPE_BLOCK_MEMBER = "type-block-member"
    SINGLE_CONST = "single-const"
    SINGLE_VAR = "single-var"
    SINGLE_TYPE = "single-type"
    IMPORT = "import"

    @classmethod
    def for_declaration(cls, kind: DeclarationKind, grouped: bool) -> "EntryKind":
        """Map a declaration kind and grouping to the entry kind it produces."""
        if kind in (DeclarationKind.FUNCTION, DeclarationKind.METHOD):
            return cls.FUNCTION
        if kind is DeclarationKind.IMPORT:
            return cls.IMPORT
        if grouped:
            return cls(f"{kind.value}-block-member")
        return cls(f"single-{kind.value}")


@dataclass(frozen=True)
class Declaration:
    """One top-level declaration of a Go source file.

    Attributes
    ----------
    kind : DeclarationKind
        Syntactic category.
    node : SyntaxNode
        Declaration node (possibly a filtered copy of the parsed node).
    grouped : bool
        Whether this is a parenthesized block declaration.
    source_file : str
        Name of the file the declaration came from.
    """

    kind: DeclarationKind
    node: SyntaxNode
    grouped: bool = False
    source_file: str = ""

    @property
    def specs(self) -> list[SyntaxNode]:
        """Member specs of a const/var/type/import declaration."""
        return declaration_specs(self.node)

    @property
    def names(self) -> tuple[str, ...]:
        """Identifiers declared by this declaration, in source order."""
        if self.kind in (DeclarationKind.FUNCTION, DeclarationKind.METHOD):
            name = self.node.child_by_field("name")
            return (name.text,) if name is not None else ()
        if self.kind is DeclarationKind.IMPORT:
            return ()
        return tuple(n.text for spec in self.specs for n in spec.children_by_field("name"))

    @property
    def raw_text(self) -> str:
        """Rendered text of the declaration before canonicalization."""
        from goexphash.canonical.blocks import render_block
        from goexphash.canonical.render import render_node

        if self.grouped:
            return render_block(self.node)
        return render_node(self.node)


@dataclass(frozen=True)
class CanonicalEntry:
    """A single-line, whitespace-normalized descriptor of one exported item.

    Attributes
    ----------
    kind : EntryKind
        Category of the entry.
    text : str
        Canonical text, e.g. ``"func Foo(x int) string"`` or ``"const Bar = 1"``.
    """

    kind: EntryKind
    text: str

    def __post_init__(self) -> None:
        """Validate the single-line, normalized-whitespace invariant."""
        if not self.text:
            raise ValueError("Canonical entry text must not be empty")
        if " ".join(self.text.split()) != self.text:
            raise ValueError(f"Canonical entry is not whitespace-normalized: {self.text!r}")


def declaration_specs(node: SyntaxNode) -> list[SyntaxNode]:
    """Collect member specs of a declaration node, unwrapping spec lists."""
    specs: list[SyntaxNode] = []
    for child in node.children:
        if child.type in SPEC_TYPES:
            specs.append(child)
        elif child.type in _SPEC_LIST_TYPES:
            specs.extend(c for c in child.children if c.type in SPEC_TYPES)
    return specs
