"""Store contract consumed by the navigation engine.

The host owns the document tree; the engine only enumerates children, reads
documents, and creates or overwrites its own index documents through this
narrow protocol.
"""

from __future__ import annotations

from typing import Protocol

from .types import StoreNode


class StoreError(Exception):
    """Base class for store failures surfaced to the engine."""


class DocumentExistsError(StoreError):
    """Raised by ``create`` when something already exists at the path."""

    def __init__(self, path: str) -> None:
        super().__init__(f"document already exists: {path}")
        self.path = path


class DocumentNotFoundError(StoreError):
    """Raised by ``read``/``modify`` when no document exists at the path."""

    def __init__(self, path: str) -> None:
        super().__init__(f"document not found: {path}")
        self.path = path


class DocumentStore(Protocol):
    def root(self) -> StoreNode:
        """Return the root container."""
        ...

    def get(self, path: str) -> StoreNode | None:
        """Return the node at ``path`` or ``None`` when nothing exists there."""
        ...

    def children(self, container: StoreNode) -> list[StoreNode]:
        """Return direct children of ``container`` in store order."""
        ...

    def read(self, path: str) -> str:
        ...

    def create(self, path: str, content: str) -> StoreNode:
        """Create a new document; raise ``DocumentExistsError`` on collision."""
        ...

    def modify(self, path: str, content: str) -> None:
        """Replace the whole content of an existing document."""
        ...


__all__ = [
    "StoreError",
    "DocumentExistsError",
    "DocumentNotFoundError",
    "DocumentStore",
]
