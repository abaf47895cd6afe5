"""Shared data types for goexphash.

This package contains the syntax tree snapshot and the declaration and
entry models consumed across the pipeline.

Domain-specific types live closer to their consumers:
- Audit types → goexphash.audit.models
- Ingestion reports → goexphash.parse.ingestion
- Run configuration and results → goexphash.engine.config
"""

from goexphash.models.declarations import (
    SPEC_TYPES,
    CanonicalEntry,
    Declaration,
    DeclarationKind,
    EntryKind,
    declaration_specs,
)
from goexphash.models.syntax import SyntaxNode, leaf

__all__ = [
    # Syntax tree
    "SyntaxNode",
    "leaf",
    # Declarations
    "SPEC_TYPES",
    "Declaration",
    "DeclarationKind",
    "declaration_specs",
    # Entries
    "CanonicalEntry",
    "EntryKind",
]
