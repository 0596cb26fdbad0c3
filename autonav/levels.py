"""Depth-dependent navigation document policies.

- root: one link per top-level folder, in ``<navigationFileName>.md``
- first level: flat links to nested folders plus direct documents
- nested (second level): full outline of the folder subtree

Every plan targets ``<folder>/<folder name>.md`` except the root, which uses
the configured navigation file name.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .config import NavigationSettings
from .exclusion import is_excluded
from .outline import build_outline
from .scanner import scan
from .store import DocumentStore, StoreNode, join_path

INDEX_EXTENSION = "md"


class NavigationLevel(Enum):
    ROOT = "root"
    FIRST_LEVEL = "first_level"
    NESTED = "nested"


@dataclass(frozen=True)
class IndexPlan:
    """Expected navigation document for one container."""

    container: StoreNode
    path: str
    content: str
    nested: tuple[StoreNode, ...] = ()


def level_for(node: StoreNode) -> NavigationLevel:
    if node.depth == 0:
        return NavigationLevel.ROOT
    if node.depth == 1:
        return NavigationLevel.FIRST_LEVEL
    return NavigationLevel.NESTED


def index_name_for(folder: StoreNode, settings: NavigationSettings) -> str:
    """Return the index document basename owned by ``folder``."""
    if folder.is_root:
        return settings.navigation_file_name
    return folder.name


def index_path_for(folder: StoreNode, settings: NavigationSettings) -> str:
    return join_path(folder.path, f"{index_name_for(folder, settings)}.{INDEX_EXTENSION}")


def folder_link(folder: StoreNode) -> str:
    """Cross-reference into a folder's own index document."""
    return f"- [[{folder.path}/{folder.name}|{folder.name}]]"


def _heading(title: str) -> str:
    return f"#{title}\n\n"


def plan_root_index(store: DocumentStore, settings: NavigationSettings) -> IndexPlan:
    root = store.root()
    result = scan(store, root, settings)
    content = _heading(settings.navigation_file_name)
    for folder in result.subfolders:
        content += folder_link(folder) + "\n"
    return IndexPlan(
        container=root,
        path=index_path_for(root, settings),
        content=content,
        nested=result.subfolders,
    )


def plan_first_level_index(
    store: DocumentStore,
    folder: StoreNode,
    settings: NavigationSettings,
) -> IndexPlan | None:
    """Plan a flat listing for a direct child of the root.

    Returns ``None`` for non-folders, folders not directly under the root, and
    excluded folders. ``nested`` lists the subfolders that get their own
    outline document.
    """
    if not folder.is_container or folder.parent_path != "":
        return None
    if is_excluded(folder.name, settings.excluded_names):
        return None

    index_name = index_name_for(folder, settings)
    result = scan(store, folder, settings, self_exclude_name=index_name)
    content = _heading(f"Navigation for {folder.name}")
    for subfolder in result.subfolders:
        content += folder_link(subfolder) + "\n"
    for document in result.documents:
        content += f"- [[{document.basename}]]\n"
    return IndexPlan(
        container=folder,
        path=index_path_for(folder, settings),
        content=content,
        nested=result.subfolders,
    )


def plan_nested_index(
    store: DocumentStore,
    folder: StoreNode,
    settings: NavigationSettings,
) -> IndexPlan | None:
    """Plan a full subtree outline; ``None`` for excluded folders."""
    if not folder.is_container or folder.is_root:
        return None
    if is_excluded(folder.name, settings.excluded_names):
        return None

    index_name = index_name_for(folder, settings)
    lines = build_outline(store, folder, settings, index_name)
    content = _heading(f"Navigation for {folder.name}") + "\n".join(lines) + "\n"
    return IndexPlan(
        container=folder,
        path=index_path_for(folder, settings),
        content=content,
    )


def plan_for(store: DocumentStore, node: StoreNode, settings: NavigationSettings) -> IndexPlan | None:
    """Dispatch to the policy matching ``node``'s depth."""
    level = level_for(node)
    if level is NavigationLevel.ROOT:
        return plan_root_index(store, settings)
    if level is NavigationLevel.FIRST_LEVEL:
        return plan_first_level_index(store, node, settings)
    return plan_nested_index(store, node, settings)


__all__ = [
    "INDEX_EXTENSION",
    "NavigationLevel",
    "IndexPlan",
    "level_for",
    "index_name_for",
    "index_path_for",
    "folder_link",
    "plan_root_index",
    "plan_first_level_index",
    "plan_nested_index",
    "plan_for",
]
