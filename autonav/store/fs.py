"""Filesystem-backed document store rooted at a local vault directory."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path, PurePosixPath

from .base import DocumentExistsError, DocumentNotFoundError, StoreError
from .types import NodeKind, StoreNode, join_path


class FilesystemStore:
    """Document store over a directory tree.

    Hidden entries (names starting with ``.``) are invisible unless
    ``show_hidden`` is set. Symlinks are not followed when classifying
    children, so a linked directory is never walked into.
    """

    def __init__(self, root: Path, show_hidden: bool = False) -> None:
        self.root_path = root.resolve()
        self.show_hidden = show_hidden
        if not self.root_path.is_dir():
            raise StoreError(f"vault root is not a directory: {self.root_path}")

    def _local(self, path: str) -> Path:
        relative = PurePosixPath(path)
        if relative.is_absolute() or ".." in relative.parts:
            raise StoreError(f"path escapes vault: {path}")
        return self.root_path.joinpath(*relative.parts)

    def root(self) -> StoreNode:
        return StoreNode.container("")

    def get(self, path: str) -> StoreNode | None:
        if path == "":
            return self.root()
        local = self._local(path)
        try:
            if local.is_dir():
                return StoreNode.container(path)
            if local.is_file():
                return StoreNode.document(path)
        except OSError:
            return None
        return None

    def children(self, container: StoreNode) -> list[StoreNode]:
        directory = self._local(container.path)
        nodes: list[StoreNode] = []
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if not self.show_hidden and name.startswith("."):
                    continue
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                kind = NodeKind.CONTAINER if is_dir else NodeKind.DOCUMENT
                nodes.append(StoreNode(kind=kind, path=join_path(container.path, name), name=name))
        return nodes

    def read(self, path: str) -> str:
        local = self._local(path)
        try:
            return local.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise DocumentNotFoundError(path) from exc

    def create(self, path: str, content: str) -> StoreNode:
        local = self._local(path)
        local.parent.mkdir(parents=True, exist_ok=True)
        try:
            with local.open("x", encoding="utf-8", newline="") as handle:
                handle.write(content)
        except FileExistsError as exc:
            raise DocumentExistsError(path) from exc
        return StoreNode.document(path)

    def modify(self, path: str, content: str) -> None:
        local = self._local(path)
        if not local.is_file():
            raise DocumentNotFoundError(path)
        fd, tmp_name = tempfile.mkstemp(prefix=".autonav-", suffix=".tmp", dir=local.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
                handle.write(content)
            os.replace(tmp_name, local)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            raise


__all__ = ["FilesystemStore"]
