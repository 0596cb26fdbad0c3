"""Engine wiring: settings, initial pass, change subscription, scheduling."""

from __future__ import annotations

import dataclasses
import logging
import threading
from collections.abc import Callable
from pathlib import Path

from . import config
from .config import NavigationSettings
from .scheduler import DEFAULT_QUIET_SECONDS, SyncScheduler
from .store import DocumentStore
from .sync import SyncReport, run_sync_pass
from .watch import ChangeEvent

logger = logging.getLogger(__name__)


class AutoNavigator:
    """Keep navigation documents in sync with a store.

    ``start`` runs one pass immediately; afterwards every ``notify`` (wired
    to the host's create/delete/rename notifications) goes through the
    debounced scheduler. Settings are snapshotted per pass.
    """

    def __init__(
        self,
        store: DocumentStore,
        settings: NavigationSettings | None = None,
        *,
        config_path: Path | None = None,
        quiet_seconds: float = DEFAULT_QUIET_SECONDS,
        on_report: Callable[[SyncReport], None] | None = None,
    ) -> None:
        self.store = store
        self.config_path = config_path
        self._settings = settings if settings is not None else config.load_settings(config_path)
        self._settings_lock = threading.Lock()
        self._on_report = on_report
        self.scheduler = SyncScheduler(self.sync_once, quiet_seconds=quiet_seconds)

    @property
    def settings(self) -> NavigationSettings:
        with self._settings_lock:
            return self._settings

    def sync_once(self) -> SyncReport:
        report = run_sync_pass(self.store, self.settings)
        if self._on_report is not None:
            self._on_report(report)
        return report

    def start(self) -> SyncReport:
        """Run the unconditional startup pass."""
        logger.debug("startup sync pass")
        return self.scheduler.run_now()

    def notify(self, event: ChangeEvent | None = None) -> None:
        """Request a debounced pass; any change kind is treated the same."""
        self.scheduler.request()

    def update_settings(self, *, persist: bool = True, **changes: str) -> NavigationSettings:
        """Apply option changes, optionally persist them, and request a pass.

        Keyword names are ``NavigationSettings`` fields, e.g.
        ``excluded_folders="Templates, Archive"``.
        """
        with self._settings_lock:
            self._settings = dataclasses.replace(self._settings, **changes)
            settings = self._settings
        if persist:
            config.save_settings(settings, self.config_path)
        self.scheduler.request()
        return settings

    def close(self, timeout: float | None = None) -> None:
        self.scheduler.close(timeout)


__all__ = ["AutoNavigator"]
