"""Direct-children scanning with exclusion and natural ordering."""

from __future__ import annotations

from dataclasses import dataclass

from .config import NavigationSettings
from .exclusion import is_excluded
from .sorting import natural_sort_key
from .store import DocumentStore, StoreNode

CONTENT_EXTENSIONS = frozenset({"md"})


@dataclass(frozen=True)
class ScanResult:
    """Sorted, filtered children of one container."""

    subfolders: tuple[StoreNode, ...] = ()
    documents: tuple[StoreNode, ...] = ()


def is_content_document(node: StoreNode, self_exclude_name: str | None = None) -> bool:
    """Return whether ``node`` is a listable document.

    Only markdown documents count, and the index document named
    ``self_exclude_name`` never lists itself.
    """
    if not node.is_document or node.extension not in CONTENT_EXTENSIONS:
        return False
    return self_exclude_name is None or node.basename != self_exclude_name


def scan(
    store: DocumentStore,
    container: StoreNode,
    settings: NavigationSettings,
    self_exclude_name: str | None = None,
) -> ScanResult:
    """Split ``container`` children into sorted subfolders and documents.

    Excluded folder names are dropped. Subfolders sort by ``name`` and
    documents by ``basename``, both with ``natural_sort_key``.
    """
    excluded = settings.excluded_names
    subfolders: list[StoreNode] = []
    documents: list[StoreNode] = []
    for child in store.children(container):
        if child.is_container:
            if not is_excluded(child.name, excluded):
                subfolders.append(child)
        elif is_content_document(child, self_exclude_name):
            documents.append(child)

    subfolders.sort(key=lambda node: natural_sort_key(node.name))
    documents.sort(key=lambda node: natural_sort_key(node.basename))
    return ScanResult(subfolders=tuple(subfolders), documents=tuple(documents))


__all__ = [
    "CONTENT_EXTENSIONS",
    "ScanResult",
    "is_content_document",
    "scan",
]
