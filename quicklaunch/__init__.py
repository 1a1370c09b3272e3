# Quicklaunch Core Package
"""
Local search core for a desktop quick-launcher.

Components:
  - Indexer: one-shot catalog of apps and common-folder files
  - Search engine: ranked, bounded results from apps, files, clipboard
  - Clipboard history: bounded newest-first buffer fed by a poller
"""

from .core import LauncherCore

__version__ = "0.1.0"

__all__ = ["LauncherCore"]
