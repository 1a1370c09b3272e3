"""
Launcher Core - The state one host process owns.

Holds the catalog, the clipboard history and the settings, and exposes
the boundary operations the host calls:

    core = LauncherCore()
    core.initialize()
    core.clipboard.detect_change(text)
    core.search("note")
"""

import threading
from pathlib import Path
from typing import Optional, Sequence

from loguru import logger

from quicklaunch.models import Catalog, ClipboardItem
from quicklaunch.search.handlers import AppSearchHandler, ClipboardSearchHandler, FileSearchHandler
from quicklaunch.search.router import SearchEngine, SearchResult
from quicklaunch.services.clipboard import ClipboardHistory, ClipboardWatcher
from quicklaunch.services.indexer import Indexer
from quicklaunch.utils.helpers import load_settings


class LauncherCore:
    """
    Catalog + clipboard history + search, for the lifetime of the host.

    The catalog starts empty and is replaced exactly once by initialize().
    Until then, searches only see the clipboard.
    """

    def __init__(
        self,
        settings: Optional[dict] = None,
        indexer: Optional[Indexer] = None,
        clipboard: Optional[ClipboardHistory] = None,
        settings_path: Optional[Path] = None,
    ):
        self.settings = settings if settings is not None else load_settings(settings_path)
        self.indexer = indexer or Indexer(settings=self.settings)
        self.clipboard = clipboard or ClipboardHistory(capacity=self.settings["clipboard"]["capacity"])

        self._ready = threading.Event()
        self._set_catalog(Catalog())

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def ready(self) -> bool:
        return self._ready.is_set()

    def initialize(self, background: bool = False) -> Optional[threading.Thread]:
        """
        Build the catalog.

        Args:
            background: Run the build on a daemon thread and return it

        Returns:
            The indexing thread when background is True, else None
        """
        if background:
            thread = threading.Thread(target=self._build, name="quicklaunch-indexer", daemon=True)
            thread.start()
            return thread
        self._build()
        return None

    def wait_ready(self, timeout: Optional[float] = None) -> bool:
        """Block until initialize() has finished. Returns False on timeout."""
        return self._ready.wait(timeout)

    def watch_clipboard(self, **kwargs) -> ClipboardWatcher:
        """
        Start polling the system clipboard into this core's history.

        Keyword arguments are passed to ClipboardWatcher (read_text,
        write_text). The interval comes from settings.
        """
        interval = self.settings["clipboard"]["poll_interval_ms"] / 1000
        watcher = ClipboardWatcher(self.clipboard, interval=interval, **kwargs)
        watcher.start()
        return watcher

    def search(self, query: str, clipboard: Optional[Sequence[ClipboardItem]] = None) -> list[SearchResult]:
        """
        Search the catalog and a clipboard snapshot.

        Args:
            query: Raw query text
            clipboard: Snapshot to search. Defaults to the current history.
        """
        if clipboard is None:
            clipboard = self.clipboard.snapshot()
        return self._engine.search(query, clipboard)

    def search_payload(self, query: str) -> list[dict]:
        """search() as plain dicts, ready for JSON transport."""
        return [result.to_dict() for result in self.search(query)]

    def _build(self) -> None:
        try:
            catalog = self.indexer.build()
        except Exception:
            logger.exception("Indexing failed, continuing with an empty catalog")
            catalog = Catalog()
        self._set_catalog(catalog)
        self._ready.set()

    def _set_catalog(self, catalog: Catalog) -> None:
        # Searches already holding the previous engine finish against the previous catalog.
        search_settings = self.settings["search"]
        engine = SearchEngine(max_results=search_settings["max_results"])
        engine.register(AppSearchHandler(catalog, search_settings["max_apps"]))
        engine.register(FileSearchHandler(catalog, search_settings["max_files"]))
        engine.register(ClipboardSearchHandler(
            search_settings["max_clipboard"],
            search_settings["title_length"],
        ))
        self._catalog = catalog
        self._engine = engine
