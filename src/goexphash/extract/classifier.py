"""Declaration classification into canonical entries.

Each exported declaration becomes one or more :class:`CanonicalEntry`
lines:

- functions and methods → their signature, without the body;
- grouped const/var/type blocks → one entry per member, via the block
  splitter, each prefixed with the block keyword;
- single const/var/type declarations → their normalized rendering, which
  already starts with the keyword;
- imports → an import path, collected separately and never hashed.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from goexphash.canonical import (
    function_signature,
    normalize_whitespace,
    render_block,
    render_node,
    split_block,
)
from goexphash.models import CanonicalEntry, Declaration, DeclarationKind, EntryKind

__all__ = ["Classification", "classify", "classify_declaration", "import_paths"]


@dataclass
class Classification:
    """Unordered output of the classifier.

    Attributes
    ----------
    entries : list[CanonicalEntry]
        Canonical entries in discovery order (not yet sorted).
    imports : set[str]
        Unique import paths, unquoted.
    """

    entries: list[CanonicalEntry] = field(default_factory=list)
    imports: set[str] = field(default_factory=set)

    def extend(self, other: "Classification") -> None:
        """Merge another classification into this one."""
        self.entries.extend(other.entries)
        self.imports.update(other.imports)


def classify(declarations: Iterable[Declaration]) -> Classification:
    """Classify filtered declarations.

    Parameters
    ----------
    declarations : Iterable[Declaration]
        Declarations that already went through the export filter.

    Returns
    -------
    Classification
        Entries and import paths.
    """
    result = Classification()
    for decl in declarations:
        if decl.kind is DeclarationKind.IMPORT:
            result.imports.update(import_paths(decl))
        else:
            result.entries.extend(classify_declaration(decl))
    return result


def classify_declaration(decl: Declaration) -> list[CanonicalEntry]:
    """Render one non-import declaration to canonical entries.

    Parameters
    ----------
    decl : Declaration
        Filtered declaration.

    Returns
    -------
    list[CanonicalEntry]
        One entry for functions and single declarations, one per member for
        grouped declarations.

    Raises
    ------
    ValueError
        If called with an import declaration.
    """
    if decl.kind is DeclarationKind.IMPORT:
        raise ValueError("Import declarations do not produce canonical entries")

    kind = EntryKind.for_declaration(decl.kind, decl.grouped)

    if decl.kind in (DeclarationKind.FUNCTION, DeclarationKind.METHOD):
        return [CanonicalEntry(kind=kind, text=function_signature(decl.node))]

    if decl.grouped:
        block = render_block(decl.node)
        return [CanonicalEntry(kind=kind, text=t) for t in split_block(block, decl.kind.keyword)]

    return [CanonicalEntry(kind=kind, text=normalize_whitespace(render_node(decl.node)))]


def import_paths(decl: Declaration) -> set[str]:
    """Extract the unquoted import paths of an import declaration."""
    paths: set[str] = set()
    for spec in decl.specs:
        path = spec.child_by_field("path")
        if path is not None:
            paths.add(path.text.strip("\"`"))
    return paths
