# Quicklaunch Services Package
"""
Backend services for the quicklaunch core.

Services build the catalog and keep the clipboard history.
"""

from .clipboard import ClipboardHistory, ClipboardWatcher
from .indexer import Indexer

__all__ = ["ClipboardHistory", "ClipboardWatcher", "Indexer"]
