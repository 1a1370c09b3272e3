# Quicklaunch Utilities Package
"""
Shared utility functions: settings loading and filesystem access.
"""

from .helpers import DirEntry, home_dir, list_directory, load_settings

__all__ = ["DirEntry", "home_dir", "list_directory", "load_settings"]
