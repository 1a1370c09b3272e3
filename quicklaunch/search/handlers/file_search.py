"""
File Search Handler - Substring search over common-folder entries.
"""

from quicklaunch.models import Catalog
from quicklaunch.search.ranking import name_matches, rank_by_name
from quicklaunch.search.router import SearchHandler, SearchResult


class FileSearchHandler(SearchHandler):
    """Search files and folders from Desktop, Documents and Downloads."""

    name = "file_search"
    priority = 200
    limit = 3

    def __init__(self, catalog: Catalog, max_results: int = 3):
        self.catalog = catalog
        self.limit = max_results

    def get_results(self, query, clipboard=()) -> list[SearchResult]:
        matched = [f for f in self.catalog.files if name_matches(f.name, query)]
        ranked = rank_by_name(matched, query, lambda f: f.name)

        return [
            SearchResult(
                id=f"file-{f.path}",
                title=f.name,
                subtitle="Folder" if f.kind == "folder" else "File",
                kind="file",
                path_or_payload=f.path,
            )
            for f in ranked[:self.limit]
        ]
