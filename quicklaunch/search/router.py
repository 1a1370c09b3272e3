"""
Search Engine - Merges results from priority-ordered sources.

Each handler declares a priority (lower = earlier in the result list)
and a per-source limit. Every handler sees every query; results are
concatenated in priority order and the combined list is truncated to
max_results. Sources are never re-ranked against each other.
"""

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from typing import Sequence

from quicklaunch.models import ClipboardItem


@dataclass(frozen=True)
class SearchResult:
    """A single search result from any source."""
    id: str  # source-prefixed: app-, file-, clipboard-
    title: str
    subtitle: str
    kind: str  # app, file, clipboard (command is reserved)
    path_or_payload: str

    def to_dict(self) -> dict:
        return asdict(self)


class SearchHandler(ABC):
    """Base class for all result sources."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Handler identifier."""
        ...

    @property
    @abstractmethod
    def priority(self) -> int:
        """Lower number = listed first."""
        ...

    @property
    @abstractmethod
    def limit(self) -> int:
        """Maximum results this source contributes."""
        ...

    @abstractmethod
    def get_results(self, query: str, clipboard: Sequence[ClipboardItem]) -> list[SearchResult]:
        """
        Return ranked results for an already lower-cased, trimmed query.

        Implementations may return more than limit; the engine truncates.
        """
        ...


class SearchEngine:
    """Runs a query against every registered handler and merges results."""

    def __init__(self, max_results: int = 8):
        self.max_results = max_results
        self._handlers: list[SearchHandler] = []

    def register(self, handler: SearchHandler) -> None:
        """Register a handler and re-sort by priority."""
        self._handlers.append(handler)
        self._handlers.sort(key=lambda h: h.priority)

    def search(self, query: str, clipboard: Sequence[ClipboardItem] = ()) -> list[SearchResult]:
        """
        Search every source and return the combined result list.

        Args:
            query: Raw query text from the host
            clipboard: Snapshot of clipboard history, newest first

        Returns:
            At most max_results results, grouped by source priority.
            Empty for an empty or whitespace-only query.
        """
        if not query or not query.strip():
            return []

        q = query.strip().lower()
        results: list[SearchResult] = []
        for handler in self._handlers:
            results.extend(handler.get_results(q, clipboard)[:handler.limit])

        return results[:self.max_results]
