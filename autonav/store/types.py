"""Domain datatypes for document-store nodes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath


class NodeKind(Enum):
    CONTAINER = "container"
    DOCUMENT = "document"


def join_path(parent: str, name: str) -> str:
    """Join a vault-relative parent path and a child name."""
    return f"{parent}/{name}" if parent else name


@dataclass(frozen=True)
class StoreNode:
    """One store node: a container (folder) or a document (file).

    ``path`` is vault-relative in POSIX form; the root container has path
    ``""``. ``extension`` is lower-case without the dot and empty for
    containers.
    """

    kind: NodeKind
    path: str
    name: str

    @classmethod
    def container(cls, path: str) -> StoreNode:
        return cls(kind=NodeKind.CONTAINER, path=path, name=PurePosixPath(path).name if path else "")

    @classmethod
    def document(cls, path: str) -> StoreNode:
        return cls(kind=NodeKind.DOCUMENT, path=path, name=PurePosixPath(path).name)

    @property
    def is_container(self) -> bool:
        return self.kind is NodeKind.CONTAINER

    @property
    def is_document(self) -> bool:
        return self.kind is NodeKind.DOCUMENT

    @property
    def is_root(self) -> bool:
        return self.is_container and self.path == ""

    @property
    def basename(self) -> str:
        if self.is_container:
            return self.name
        stem, dot, _suffix = self.name.rpartition(".")
        return stem if dot and stem else self.name

    @property
    def extension(self) -> str:
        if self.is_container:
            return ""
        stem, dot, suffix = self.name.rpartition(".")
        return suffix.lower() if dot and stem else ""

    @property
    def parent_path(self) -> str | None:
        """Path of the parent container, ``None`` for the root."""
        if self.is_root:
            return None
        parent = PurePosixPath(self.path).parent.as_posix()
        return "" if parent == "." else parent

    @property
    def depth(self) -> int:
        """Number of path segments; the root is depth 0."""
        return len(PurePosixPath(self.path).parts) if self.path else 0


__all__ = [
    "NodeKind",
    "StoreNode",
    "join_path",
]
