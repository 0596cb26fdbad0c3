"""Tests for the long-running navigator wiring."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from autonav import config
from autonav.app import AutoNavigator
from autonav.config import NavigationSettings
from autonav.store import MemoryStore
from autonav.sync import SyncReport
from autonav.watch import ChangeEvent, ChangeKind


def _scenario() -> MemoryStore:
    store = MemoryStore()
    store.add_folder("Projects/Alpha")
    store.add_document("Projects/Notes.md")
    store.add_folder("Templates")
    return store


class AutoNavigatorTests(unittest.TestCase):
    def test_start_runs_a_pass_immediately(self) -> None:
        store = _scenario()
        navigator = AutoNavigator(store, NavigationSettings(), quiet_seconds=5.0)
        try:
            report = navigator.start()
        finally:
            navigator.close(timeout=1.0)

        self.assertEqual(report.writes, 3)
        self.assertIsNotNone(store.get("Projects/Alpha/Alpha.md"))

    def test_change_burst_triggers_one_pass(self) -> None:
        store = _scenario()
        reports: list[SyncReport] = []
        navigator = AutoNavigator(store, NavigationSettings(), quiet_seconds=0.05, on_report=reports.append)
        try:
            navigator.start()
            store.add_document("Projects/Later.md")
            navigator.notify(ChangeEvent(ChangeKind.CREATED, ("Projects/Later.md",)))
            navigator.notify(ChangeEvent(ChangeKind.RENAMED))
            navigator.notify()
            self.assertTrue(navigator.scheduler.wait_idle(timeout=2.0))
        finally:
            navigator.close(timeout=1.0)

        self.assertEqual(len(reports), 2)
        self.assertEqual(reports[1].written_paths(), ["Projects/Projects.md"])
        self.assertIn("- [[Later]]", store.read("Projects/Projects.md"))

    def test_update_settings_persists_and_resyncs(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            store = _scenario()
            store.add_folder("Journal")
            navigator = AutoNavigator(store, config_path=config_path, quiet_seconds=0.02)
            try:
                navigator.start()
                self.assertIn("Journal", store.read("Navigation.md"))

                settings = navigator.update_settings(excluded_folders="Templates, Journal")
                self.assertTrue(navigator.scheduler.wait_idle(timeout=2.0))
            finally:
                navigator.close(timeout=1.0)

            self.assertEqual(settings.excluded_names, {"Templates", "Journal"})
            self.assertNotIn("Journal", store.read("Navigation.md"))
            self.assertEqual(config.load_settings(config_path), settings)

    def test_settings_load_from_config_path_when_not_given(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config.save_settings(NavigationSettings(navigation_file_name="Home"), config_path)
            store = MemoryStore()

            navigator = AutoNavigator(store, config_path=config_path)
            try:
                navigator.start()
            finally:
                navigator.close(timeout=1.0)

            self.assertEqual(store.read("Home.md"), "#Home\n\n")


if __name__ == "__main__":
    unittest.main()
