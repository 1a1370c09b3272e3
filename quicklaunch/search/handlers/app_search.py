"""
App Search Handler - Substring and word-prefix search over indexed apps.

"code" finds "Visual Studio Code" by substring; "stu" finds it because
the word "Studio" starts with it.
"""

from quicklaunch.models import Catalog
from quicklaunch.search.ranking import name_matches, rank_by_name
from quicklaunch.search.router import SearchHandler, SearchResult


class AppSearchHandler(SearchHandler):
    """Search installed applications and built-in actions."""

    name = "app_search"
    priority = 100
    limit = 5

    def __init__(self, catalog: Catalog, max_results: int = 5):
        self.catalog = catalog
        self.limit = max_results

    def get_results(self, query, clipboard=()) -> list[SearchResult]:
        matched = [app for app in self.catalog.apps if name_matches(app.name, query, by_word=True)]
        ranked = rank_by_name(matched, query, lambda app: app.name)

        return [
            SearchResult(
                id=f"app-{app.name}",
                title=app.name,
                subtitle="Application",
                kind="app",
                path_or_payload=app.path,
            )
            for app in ranked[:self.limit]
        ]
