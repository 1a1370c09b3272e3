"""
Indexer - Build the app and file catalog once per process.

Apps come from three places, in order:
  1. Built-in system actions (always win name conflicts)
  2. User actions from commands.toml
  3. A bounded-depth scan of start-menu / desktop style directories

Files come from a flat (non-recursive) listing of Desktop, Documents
and Downloads.

A location that is missing or unreadable contributes nothing; the build
itself never raises for environmental problems.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Iterable, Optional

from loguru import logger

from quicklaunch.models import Catalog, IndexedApp, IndexedFile
from quicklaunch.services.commands import builtin_actions, load_user_actions
from quicklaunch.utils.helpers import CONFIG_DIR, DEFAULT_SETTINGS, DirEntry, home_dir, list_directory

WINDOWS_EXTENSIONS = (".lnk", ".exe")
POSIX_EXTENSIONS = (".desktop", ".appimage")

COMMON_FOLDERS = ("Desktop", "Documents", "Downloads")


def default_app_roots(home: Path, platform: str) -> list[Path]:
    """Well-known directories that hold launchable shortcuts."""
    if platform.startswith("win"):
        program_data = Path(os.environ.get("PROGRAMDATA", r"C:\ProgramData"))
        return [
            home / "AppData" / "Roaming" / "Microsoft" / "Windows" / "Start Menu" / "Programs",
            program_data / "Microsoft" / "Windows" / "Start Menu" / "Programs",
            home / "Desktop",
        ]

    data_home = Path(os.environ.get("XDG_DATA_HOME") or home / ".local" / "share")
    data_dirs = os.environ.get("XDG_DATA_DIRS") or "/usr/local/share:/usr/share"
    roots = [data_home / "applications"]
    roots += [Path(d) / "applications" for d in data_dirs.split(os.pathsep) if d]
    roots.append(home / "Desktop")
    return roots


def app_extensions(platform: str) -> tuple[str, ...]:
    return WINDOWS_EXTENSIONS if platform.startswith("win") else POSIX_EXTENSIONS


class Indexer:
    """
    One-shot catalog builder.

    Every filesystem touch goes through list_dir, so tests and hosts can
    substitute their own listing capability.
    """

    def __init__(
        self,
        settings: Optional[dict] = None,
        home: Optional[Path] = None,
        platform: Optional[str] = None,
        list_dir: Callable[[str], list[DirEntry]] = list_directory,
        app_roots: Optional[Iterable[Path]] = None,
        file_roots: Optional[Iterable[Path]] = None,
        commands_path: Optional[Path] = None,
    ):
        indexer_settings = (settings or DEFAULT_SETTINGS)["indexer"]
        self.max_depth = indexer_settings["max_depth"]
        self.exclude = tuple(word.lower() for word in indexer_settings["exclude"])
        self.hidden_prefix = indexer_settings["hidden_prefix"]

        self.home = Path(home) if home is not None else home_dir()
        self.platform = platform or sys.platform
        self.list_dir = list_dir
        self.extensions = app_extensions(self.platform)

        if app_roots is None:
            app_roots = default_app_roots(self.home, self.platform)
        self.app_roots = [Path(p) for p in app_roots]

        if file_roots is None:
            file_roots = [self.home / folder for folder in COMMON_FOLDERS]
        self.file_roots = [Path(p) for p in file_roots]

        self.commands_path = commands_path if commands_path is not None else CONFIG_DIR / "commands.toml"

    def build(self) -> Catalog:
        """
        Scan every configured location and return the catalog.

        Returns:
            Catalog with apps de-duplicated by case-insensitive name and
            files in listing order.
        """
        apps: dict[str, IndexedApp] = {}

        for app in builtin_actions(self.platform):
            apps.setdefault(app.key, app)
        for app in load_user_actions(self.commands_path):
            apps.setdefault(app.key, app)
        seeded = len(apps)

        for root in self.app_roots:
            self._scan_apps(root, apps, depth=0)

        files: list[IndexedFile] = []
        for root in self.file_roots:
            files.extend(self._scan_files(root))

        scanned = len(apps) - seeded
        logger.info(f"Indexed {len(apps)} apps ({scanned} scanned) and {len(files)} files")
        if scanned == 0 and not files:
            logger.warning("No apps or files found on disk; only built-in actions and clipboard are searchable")

        return Catalog(apps=tuple(apps.values()), files=tuple(files))

    def _scan_apps(self, directory: Path, apps: dict[str, IndexedApp], depth: int) -> None:
        """Recursively collect shortcut/executable entries up to max_depth."""
        if depth > self.max_depth:
            return

        for entry in self._list(directory):
            if entry.is_dir:
                self._scan_apps(Path(entry.path), apps, depth + 1)
                continue

            name = self._app_name(entry.name)
            if name is None:
                continue
            if any(word in name.lower() for word in self.exclude):
                logger.debug(f"Skipping excluded entry {entry.path}")
                continue
            apps.setdefault(name.lower(), IndexedApp(name=name, path=entry.path))

    def _list(self, directory: Path) -> list[DirEntry]:
        """List one directory; a failing listing contributes nothing."""
        try:
            return self.list_dir(str(directory))
        except Exception:
            logger.exception(f"Could not list {directory}")
            return []

    def _app_name(self, filename: str) -> Optional[str]:
        """Strip a launchable extension, or None if the file has none."""
        lowered = filename.lower()
        for ext in self.extensions:
            if lowered.endswith(ext) and len(filename) > len(ext):
                return filename[: -len(ext)]
        return None

    def _scan_files(self, directory: Path) -> list[IndexedFile]:
        """List visible entries of one common folder, non-recursively."""
        return [
            IndexedFile(
                name=entry.name,
                path=entry.path,
                kind="folder" if entry.is_dir else "file",
            )
            for entry in self._list(directory)
            if not (self.hidden_prefix and entry.name.startswith(self.hidden_prefix))
        ]
