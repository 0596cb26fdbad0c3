"""Document-store collaborators for the navigation engine.

This package contains non-engine store primitives:
- container/document node datatype
- the store protocol and its error types
- a filesystem-backed store for local vault directories
- an in-memory store for embedding hosts and tests
"""

from __future__ import annotations

from .types import NodeKind, StoreNode, join_path
from .base import DocumentExistsError, DocumentNotFoundError, DocumentStore, StoreError
from .fs import FilesystemStore
from .memory import MemoryStore, StoreWrite

__all__ = [
    "NodeKind",
    "StoreNode",
    "join_path",
    "DocumentStore",
    "StoreError",
    "DocumentExistsError",
    "DocumentNotFoundError",
    "FilesystemStore",
    "MemoryStore",
    "StoreWrite",
]
