"""
Search package - Multi-source query engine.

Queries run against every registered source (apps, files, clipboard);
each source ranks and caps its own matches and the engine concatenates
them in priority order.
"""

from .router import SearchEngine, SearchHandler, SearchResult

__all__ = ["SearchEngine", "SearchHandler", "SearchResult"]
