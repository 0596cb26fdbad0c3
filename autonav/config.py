"""Navigation settings stored as JSON in the user config directory.

Only ``excludedFolders`` and ``navigationFileName`` are read; other keys in the
file are left untouched. Persisted values are used exactly as saved, so a
navigation name with surrounding spaces names the index file with them. A
missing, unreadable, or malformed file yields the defaults.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path

from platformdirs import user_config_dir

from .exclusion import parse_excluded_names

APP_NAME = "autonav"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

EXCLUDED_FOLDERS_KEY = "excludedFolders"
NAVIGATION_FILE_NAME_KEY = "navigationFileName"
DEFAULT_EXCLUDED_FOLDERS = "Templates, Attachments, .trash"
DEFAULT_NAVIGATION_FILE_NAME = "Navigation"


@dataclass(frozen=True)
class NavigationSettings:
    """User-editable options read once per synchronization pass."""

    excluded_folders: str = DEFAULT_EXCLUDED_FOLDERS
    navigation_file_name: str = DEFAULT_NAVIGATION_FILE_NAME

    @cached_property
    def excluded_names(self) -> frozenset[str]:
        return parse_excluded_names(self.excluded_folders)

    def to_config(self) -> dict[str, object]:
        return {
            EXCLUDED_FOLDERS_KEY: self.excluded_folders,
            NAVIGATION_FILE_NAME_KEY: self.navigation_file_name,
        }


def _resolve_path(path: Path | None) -> Path:
    return CONFIG_PATH if path is None else path


def load_config(path: Path | None = None) -> dict[str, object]:
    """Read the settings file as a dict, or ``{}`` if there is nothing usable."""
    config_path = _resolve_path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object], path: Path | None = None) -> None:
    """Persist config data as pretty-printed JSON; write errors propagate."""
    config_path = _resolve_path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def load_settings(path: Path | None = None) -> NavigationSettings:
    """Merge persisted options over defaults.

    Non-string values are ignored. A blank navigation file name falls back to
    the default; an empty exclusion list is kept as-is (nothing excluded).
    """
    data = load_config(path)
    excluded = data.get(EXCLUDED_FOLDERS_KEY)
    if not isinstance(excluded, str):
        excluded = DEFAULT_EXCLUDED_FOLDERS

    nav_name = data.get(NAVIGATION_FILE_NAME_KEY)
    if not isinstance(nav_name, str) or not nav_name.strip():
        nav_name = DEFAULT_NAVIGATION_FILE_NAME
    return NavigationSettings(excluded_folders=excluded, navigation_file_name=nav_name)


def save_settings(settings: NavigationSettings, path: Path | None = None) -> None:
    """Persist both options, keeping unrelated keys already in the file."""
    config = load_config(path)
    config.update(settings.to_config())
    save_config(config, path)


__all__ = [
    "CONFIG_PATH",
    "DEFAULT_EXCLUDED_FOLDERS",
    "DEFAULT_NAVIGATION_FILE_NAME",
    "NavigationSettings",
    "load_config",
    "save_config",
    "load_settings",
    "save_settings",
]
