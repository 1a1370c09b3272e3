"""
Clipboard History - Bounded, newest-first buffer of copied text.

Two writers feed the buffer:
  - ClipboardWatcher polls the system clipboard on a fixed interval and
    calls detect_change() with whatever text it reads
  - The host calls add() when it copies something on the user's behalf

Both go through one locked push-and-evict path. Readers get an
immutable tuple from snapshot(), so a search never sees a half-evicted
buffer.
"""

import itertools
import threading
import time
from typing import Callable, Optional

import pyperclip
from loguru import logger

from quicklaunch.models import ClipboardItem

DEFAULT_CAPACITY = 50


class ClipboardHistory:
    """
    Newest-first clipboard buffer with FIFO eviction.

    Methods:
        detect_change(text): Push text if it differs from the last seen text
        push_front(text) / add(text): Push text unconditionally
        snapshot(): Point-in-time copy, newest first
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, clock: Callable[[], float] = time.time):
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._clock = clock
        self._items: list[ClipboardItem] = []
        self._last_text: Optional[str] = None
        self._seq = itertools.count()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._items)

    def prime(self, text: Optional[str]) -> None:
        """
        Record text as already observed without storing it.

        Used at startup so whatever is on the clipboard before the
        process launched is not treated as a fresh copy.
        """
        with self._lock:
            self._last_text = text

    def detect_change(self, current_text: Optional[str]) -> Optional[ClipboardItem]:
        """
        Compare polled clipboard text against the last observed value.

        Args:
            current_text: Text currently on the system clipboard

        Returns:
            The new ClipboardItem, or None if the text is blank or unchanged
        """
        if not current_text or not current_text.strip():
            return None

        with self._lock:
            if current_text == self._last_text:
                return None
            return self._push(current_text)

    def push_front(self, content: str) -> ClipboardItem:
        """
        Insert content at the front without checking for duplicates.

        Returns:
            The stored ClipboardItem
        """
        with self._lock:
            return self._push(content)

    add = push_front

    def snapshot(self) -> tuple[ClipboardItem, ...]:
        """Return the buffer, newest first."""
        with self._lock:
            return tuple(self._items)

    def _push(self, content: str) -> ClipboardItem:
        """Build an item, insert it and evict. Caller holds the lock."""
        now = self._clock()
        item = ClipboardItem(
            id=f"{int(now * 1000)}-{next(self._seq)}",
            content=content,
            created_at=now,
        )
        self._items.insert(0, item)
        self._last_text = content

        if len(self._items) > self.capacity:
            dropped = len(self._items) - self.capacity
            del self._items[self.capacity:]
            logger.debug(f"Evicted {dropped} clipboard item(s)")

        return item


class ClipboardWatcher:
    """
    Fixed-interval poller for the system clipboard.

    One daemon thread runs poll_once() back to back with interval
    seconds in between, so polls never overlap.
    """

    def __init__(
        self,
        history: ClipboardHistory,
        read_text: Callable[[], str] = pyperclip.paste,
        write_text: Callable[[str], None] = pyperclip.copy,
        interval: float = 1.0,
    ):
        self.history = history
        self.read_text = read_text
        self.write_text = write_text
        self.interval = interval
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Prime the history with the current clipboard and start polling."""
        if self.running:
            return
        self.history.prime(self._read())
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="clipboard-watcher", daemon=True)
        self._thread.start()
        logger.debug(f"Clipboard watcher started (interval {self.interval}s)")

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        logger.debug("Clipboard watcher stopped")

    def poll_once(self) -> Optional[ClipboardItem]:
        """Read the clipboard once and record it if it changed."""
        text = self._read()
        if text is None:
            return None
        item = self.history.detect_change(text)
        if item is not None:
            logger.debug(f"Captured clipboard text: {item.content[:20]!r}")
        return item

    def copy(self, text: str) -> ClipboardItem:
        """Put text on the system clipboard and record it in history."""
        # Mark as observed first so a poll landing mid-copy does not record it too.
        self.history.prime(text)
        try:
            self.write_text(text)
        except pyperclip.PyperclipException:
            logger.exception("Failed to write system clipboard")
        return self.history.add(text)

    def _read(self) -> Optional[str]:
        try:
            return self.read_text()
        except (pyperclip.PyperclipException, UnicodeError) as e:
            logger.warning(f"Clipboard read failed, skipping poll: {e}")
            return None

    def _run(self) -> None:
        while not self._stop.wait(self.interval):
            try:
                self.poll_once()
            except Exception:
                logger.exception("Clipboard poll failed")
