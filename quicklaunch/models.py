"""
Catalog and clipboard data types.

Everything here is plain data: frozen dataclasses holding strings,
numbers and tuples. Values are safe to share between threads and to
serialize for transport to a UI process.
"""

from dataclasses import asdict, dataclass, field


@dataclass(frozen=True)
class IndexedApp:
    """A launchable application or built-in system action."""
    name: str
    path: str  # executable, shortcut file, or URI scheme

    @property
    def key(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class IndexedFile:
    """A file or folder from one of the common user directories."""
    name: str
    path: str
    kind: str = "file"  # file, folder


@dataclass(frozen=True)
class Catalog:
    """
    Immutable result of one indexing run.

    Built once per process and shared read-only with every search.
    """
    apps: tuple[IndexedApp, ...] = ()
    files: tuple[IndexedFile, ...] = ()


@dataclass(frozen=True)
class ClipboardItem:
    """One snapshot of copied text."""
    id: str
    content: str
    created_at: float
    kind: str = field(default="text")

    def to_dict(self) -> dict:
        return asdict(self)
