"""Symbol tree and source file model."""

from asmnav.model.invariants import TreeInvariantError, check_tree_invariants
from asmnav.model.references import (
    NO_FILE_REFERENCE,
    FileReference,
    FileReferenceKind,
    IncludeReference,
)
from asmnav.model.source_file import (
    PendingTreeObject,
    SourceFile,
    build_source_file,
    definitions_of,
)
from asmnav.model.tree import TreeObject, TreeObjectKind

__all__ = [
    "NO_FILE_REFERENCE",
    "FileReference",
    "FileReferenceKind",
    "IncludeReference",
    "PendingTreeObject",
    "SourceFile",
    "TreeInvariantError",
    "TreeObject",
    "TreeObjectKind",
    "build_source_file",
    "check_tree_invariants",
    "definitions_of",
]
