"""In-process document store for embedding hosts and tests."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from pathlib import PurePosixPath

from .base import DocumentExistsError, DocumentNotFoundError, StoreError
from .types import StoreNode


@dataclass(frozen=True)
class StoreWrite:
    """One recorded create/modify call."""

    op: str
    path: str
    content: str


class MemoryStore:
    """Dictionary-backed store with a write log.

    Containers are tracked as a set of paths, documents as a path -> content
    mapping. Every ``create``/``modify`` is appended to ``writes``.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._containers: set[str] = {""}
        self._documents: dict[str, str] = {}
        self.writes: list[StoreWrite] = []

    def add_folder(self, path: str) -> StoreNode:
        """Create a container and any missing ancestors."""
        with self._lock:
            parts = PurePosixPath(path).parts
            for idx in range(1, len(parts) + 1):
                ancestor = "/".join(parts[:idx])
                if ancestor in self._documents:
                    raise StoreError(f"document in the way of folder: {ancestor}")
                self._containers.add(ancestor)
        return StoreNode.container(path)

    def add_document(self, path: str, content: str = "") -> StoreNode:
        """Place a document without recording it as an engine write."""
        with self._lock:
            parent = PurePosixPath(path).parent.as_posix()
            if parent != ".":
                self.add_folder(parent)
            self._documents[path] = content
        return StoreNode.document(path)

    def remove(self, path: str) -> None:
        """Delete a node and everything beneath it."""
        with self._lock:
            prefix = f"{path}/"
            self._documents = {
                key: value for key, value in self._documents.items() if key != path and not key.startswith(prefix)
            }
            self._containers = {key for key in self._containers if key != path and not key.startswith(prefix)}
            self._containers.add("")

    def root(self) -> StoreNode:
        return StoreNode.container("")

    def get(self, path: str) -> StoreNode | None:
        with self._lock:
            if path in self._containers:
                return StoreNode.container(path)
            if path in self._documents:
                return StoreNode.document(path)
        return None

    def children(self, container: StoreNode) -> list[StoreNode]:
        with self._lock:
            if container.path not in self._containers:
                raise StoreError(f"container not found: {container.path}")
            nodes: list[StoreNode] = []
            for path in self._containers:
                if path and StoreNode.container(path).parent_path == container.path:
                    nodes.append(StoreNode.container(path))
            for path in self._documents:
                node = StoreNode.document(path)
                if node.parent_path == container.path:
                    nodes.append(node)
            return nodes

    def read(self, path: str) -> str:
        with self._lock:
            try:
                return self._documents[path]
            except KeyError as exc:
                raise DocumentNotFoundError(path) from exc

    def create(self, path: str, content: str) -> StoreNode:
        with self._lock:
            if path in self._documents or path in self._containers:
                raise DocumentExistsError(path)
            node = self.add_document(path, content)
            self.writes.append(StoreWrite(op="create", path=path, content=content))
            return node

    def modify(self, path: str, content: str) -> None:
        with self._lock:
            if path not in self._documents:
                raise DocumentNotFoundError(path)
            self._documents[path] = content
            self.writes.append(StoreWrite(op="modify", path=path, content=content))

    def document_paths(self) -> list[str]:
        with self._lock:
            return sorted(self._documents)


__all__ = [
    "MemoryStore",
    "StoreWrite",
]
