"""
Helper utilities for the quicklaunch core.

Provides common functions used across services:
- Settings loading with defaults
- Directory listing that tolerates missing/unreadable paths
- Home directory resolution
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, NamedTuple, Optional

import toml
from loguru import logger


CONFIG_DIR = Path.home() / ".config" / "quicklaunch"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "search": {
        "max_apps": 5,
        "max_files": 3,
        "max_clipboard": 2,
        "max_results": 8,
        "title_length": 60,
    },
    "indexer": {
        "max_depth": 3,
        "exclude": ["uninstall", "readme", "help"],
        "hidden_prefix": ".",
    },
    "clipboard": {
        "capacity": 50,
        "poll_interval_ms": 1000,
    },
}


class DirEntry(NamedTuple):
    """One directory listing entry."""
    name: str
    path: str
    is_dir: bool


def home_dir() -> Path:
    """Resolve the current user's home directory."""
    return Path.home()


def list_directory(path) -> list[DirEntry]:
    """
    List the entries of a directory.

    Args:
        path: Directory to list

    Returns:
        Entries in directory order. Empty if the path is missing,
        unreadable, or not a directory.
    """
    entries = []
    try:
        with os.scandir(path) as it:
            for entry in it:
                try:
                    is_dir = entry.is_dir()
                except OSError:
                    is_dir = False
                entries.append(DirEntry(entry.name, entry.path, is_dir))
    except OSError as e:
        logger.debug(f"Could not list {path}: {e}")
        return []
    return entries


def load_settings(settings_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load core settings from a TOML file.

    Args:
        settings_path: File to read. Defaults to
            ~/.config/quicklaunch/settings.toml

    Returns:
        Dictionary containing settings with defaults applied

    Example settings.toml:
        [search]
        max_apps = 5

        [clipboard]
        capacity = 100
    """
    defaults = copy.deepcopy(DEFAULT_SETTINGS)

    if settings_path is None:
        settings_path = CONFIG_DIR / "settings.toml"
    settings_path = Path(settings_path)

    if not settings_path.exists():
        logger.info(f"Settings file not found at {settings_path}, using defaults")
        return defaults

    try:
        loaded = toml.load(settings_path)
    except (OSError, toml.TomlDecodeError):
        logger.exception(f"Could not load settings from {settings_path}, using defaults")
        return defaults

    return _deep_merge(defaults, loaded)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
