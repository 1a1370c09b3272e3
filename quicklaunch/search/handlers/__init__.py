"""
Search handlers - One per result source.

Each handler matches, ranks and caps its own results.
"""

from .app_search import AppSearchHandler
from .clipboard import ClipboardSearchHandler
from .file_search import FileSearchHandler

__all__ = [
    "AppSearchHandler",
    "FileSearchHandler",
    "ClipboardSearchHandler",
]
