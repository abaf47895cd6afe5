"""Declaration extraction: discovery, export filtering and classification."""

from goexphash.extract.classifier import (
    Classification,
    classify,
    classify_declaration,
    import_paths,
)
from goexphash.extract.declarations import collect_declarations, is_grouped
from goexphash.extract.exports import filter_declaration, filter_exports, is_exported

__all__ = [
    "collect_declarations",
    "is_grouped",
    "is_exported",
    "filter_exports",
    "filter_declaration",
    "Classification",
    "classify",
    "classify_declaration",
    "import_paths",
]
