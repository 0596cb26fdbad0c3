"""Poll-based structural change notifications for filesystem vaults.

Captures the recursive set of visible paths (name and kind only) so content
edits, including overwrites of navigation documents, never look like a
structural change. Snapshots are compared between polls to classify changes
as created, deleted, or renamed.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL_SECONDS = 1.0


class ChangeKind(Enum):
    CREATED = "created"
    DELETED = "deleted"
    RENAMED = "renamed"


@dataclass(frozen=True)
class ChangeEvent:
    kind: ChangeKind
    paths: tuple[str, ...] = ()


def snapshot_structure(root: Path, show_hidden: bool = False) -> frozenset[tuple[str, bool]]:
    """Return ``(relative posix path, is_dir)`` for every visible entry.

    Unreadable directories contribute nothing below themselves.
    """
    entries: set[tuple[str, bool]] = set()
    pending: list[tuple[Path, str]] = [(root, "")]
    while pending:
        directory, prefix = pending.pop()
        try:
            with os.scandir(directory) as scanned:
                for child in scanned:
                    name = child.name
                    if not show_hidden and name.startswith("."):
                        continue
                    try:
                        is_dir = child.is_dir(follow_symlinks=False)
                    except OSError:
                        is_dir = False
                    relative = f"{prefix}/{name}" if prefix else name
                    entries.add((relative, is_dir))
                    if is_dir:
                        pending.append((Path(child.path), relative))
        except OSError:
            continue
    return frozenset(entries)


def diff_structure(
    before: frozenset[tuple[str, bool]],
    after: frozenset[tuple[str, bool]],
) -> ChangeEvent | None:
    """Classify the difference between two snapshots.

    Additions and removals within the same poll read as a rename.
    """
    created = sorted(path for path, _is_dir in after - before)
    deleted = sorted(path for path, _is_dir in before - after)
    if created and deleted:
        return ChangeEvent(ChangeKind.RENAMED, tuple(deleted + created))
    if created:
        return ChangeEvent(ChangeKind.CREATED, tuple(created))
    if deleted:
        return ChangeEvent(ChangeKind.DELETED, tuple(deleted))
    return None


class TreeWatcher:
    """Daemon thread polling a vault for create/delete/rename changes."""

    def __init__(
        self,
        root: Path,
        on_change: Callable[[ChangeEvent], None],
        poll_interval: float = DEFAULT_POLL_INTERVAL_SECONDS,
        show_hidden: bool = False,
    ) -> None:
        self.root = root.resolve()
        self._on_change = on_change
        self._poll_interval = poll_interval
        self._show_hidden = show_hidden
        self._snapshot = snapshot_structure(self.root, show_hidden)
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def poll_once(self) -> ChangeEvent | None:
        """Compare against the previous snapshot and notify on change."""
        current = snapshot_structure(self.root, self._show_hidden)
        event = diff_structure(self._snapshot, current)
        self._snapshot = current
        if event is not None:
            logger.debug("%s: %s", event.kind.value, ", ".join(event.paths))
            self._on_change(event)
        return event

    def _loop(self) -> None:
        while not self._stop.wait(self._poll_interval):
            try:
                self.poll_once()
            except Exception:
                logger.exception("watch poll failed")

    def start(self) -> None:
        if self._thread is not None:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._loop, name="autonav-watch", daemon=True)
        self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        self._stop.set()
        thread = self._thread
        self._thread = None
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)


__all__ = [
    "DEFAULT_POLL_INTERVAL_SECONDS",
    "ChangeKind",
    "ChangeEvent",
    "snapshot_structure",
    "diff_structure",
    "TreeWatcher",
]
