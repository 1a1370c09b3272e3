"""
Clipboard Search Handler - Substring search over clipboard history.

Matches keep history order (newest first). Long entries are shown
truncated; the payload is always the full text.
"""

from quicklaunch.search.router import SearchHandler, SearchResult

ELLIPSIS = "..."


def clip_title(content: str, length: int = 60) -> str:
    """Truncate content to length characters, marking the cut."""
    if len(content) <= length:
        return content
    return content[:length] + ELLIPSIS


class ClipboardSearchHandler(SearchHandler):
    """Search the clipboard snapshot passed with each query."""

    name = "clipboard"
    priority = 300
    limit = 2

    def __init__(self, max_results: int = 2, title_length: int = 60):
        self.limit = max_results
        self.title_length = title_length

    def get_results(self, query, clipboard=()) -> list[SearchResult]:
        results = []
        for item in clipboard:
            if len(results) >= self.limit:
                break
            if query in item.content.lower():
                results.append(SearchResult(
                    id=f"clipboard-{item.id}",
                    title=clip_title(item.content, self.title_length),
                    subtitle="Clipboard",
                    kind="clipboard",
                    path_or_payload=item.content,
                ))
        return results
