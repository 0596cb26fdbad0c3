"""Nested outline of a folder subtree for deep navigation documents."""

from __future__ import annotations

import logging

from .config import NavigationSettings
from .scanner import scan
from .store import DocumentStore, StoreNode

logger = logging.getLogger(__name__)

INDENT = "  "


def folder_line(name: str, depth: int) -> str:
    return f"{INDENT * depth}- **{name}**"


def document_line(basename: str, depth: int) -> str:
    return f"{INDENT * depth}- [[{basename}]]"


def build_outline(
    store: DocumentStore,
    container: StoreNode,
    settings: NavigationSettings,
    self_exclude_name: str | None,
    depth: int = 0,
) -> list[str]:
    """Return outline lines for every folder and document under ``container``.

    Each subfolder contributes a bold heading followed by its own outline one
    level deeper; documents of a folder follow all of its subfolder blocks.
    ``self_exclude_name`` is skipped at every depth. An empty container
    yields no lines.

    Walks with an explicit stack so deep trees do not hit the recursion
    limit. A container reached twice is skipped.
    """
    lines: list[str] = []
    visited: set[str] = set()
    # Items are ("expand", node, depth) or ("line", text, 0).
    stack: list[tuple[str, object, int]] = [("expand", container, depth)]
    while stack:
        action, item, level = stack.pop()
        if action == "line":
            lines.append(item)
            continue

        node = item
        if node.path in visited:
            logger.warning("skipping already visited folder %r while building outline", node.path)
            continue
        visited.add(node.path)

        result = scan(store, node, settings, self_exclude_name)
        for document in reversed(result.documents):
            stack.append(("line", document_line(document.basename, level), 0))
        for subfolder in reversed(result.subfolders):
            stack.append(("expand", subfolder, level + 1))
            stack.append(("line", folder_line(subfolder.name, level), 0))
    return lines


__all__ = [
    "INDENT",
    "folder_line",
    "document_line",
    "build_outline",
]
