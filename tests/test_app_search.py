"""
Tests for the app and file search handlers.

Handlers run against hand-built catalogs; no filesystem access.
"""

from quicklaunch.models import Catalog, IndexedApp, IndexedFile
from quicklaunch.search.handlers import AppSearchHandler, FileSearchHandler
from quicklaunch.search.ranking import name_matches, rank_by_name
from quicklaunch.search.router import SearchResult


def _catalog(app_names=(), files=()):
    apps = tuple(IndexedApp(name=n, path=f"/apps/{n}") for n in app_names)
    return Catalog(apps=apps, files=tuple(files))


class TestNameMatching:
    """Test the shared substring / word-prefix rule."""

    def test_substring(self):
        assert name_matches("Notepad", "tep") is True

    def test_no_match(self):
        assert name_matches("Notepad", "calc") is False

    def test_word_prefix(self):
        assert name_matches("Visual Studio Code", "stu", by_word=True) is True

    def test_delimiters_split_words(self):
        assert name_matches("git-bash", "bash", by_word=True) is True
        assert name_matches("my_tool", "tool", by_word=True) is True

    def test_prefix_ranks_before_substring(self):
        ranked = rank_by_name(["Sticky Notes", "Notepad"], "note", lambda n: n)
        assert ranked == ["Notepad", "Sticky Notes"]

    def test_ties_break_alphabetically_ignoring_case(self):
        ranked = rank_by_name(["beta", "Alpha", "alpine"], "al", lambda n: n)
        assert ranked == ["Alpha", "alpine", "beta"]


class TestAppSearchHandler:
    """Test app search results."""

    def test_results_are_search_results(self):
        handler = AppSearchHandler(_catalog(["Firefox"]))
        results = handler.get_results("fire")
        assert len(results) == 1
        assert isinstance(results[0], SearchResult)
        assert results[0].title == "Firefox"
        assert results[0].kind == "app"
        assert results[0].subtitle == "Application"
        assert results[0].path_or_payload == "/apps/Firefox"
        assert results[0].id == "app-Firefox"

    def test_finds_multi_word_names_by_word(self):
        handler = AppSearchHandler(_catalog(["Visual Studio Code", "Calculator"]))
        titles = [r.title for r in handler.get_results("stu")]
        assert titles == ["Visual Studio Code"]

    def test_prefix_match_sorts_first(self):
        handler = AppSearchHandler(_catalog(["Sticky Notes", "Notepad", "OneNote"]))
        titles = [r.title for r in handler.get_results("note")]
        assert titles == ["Notepad", "OneNote", "Sticky Notes"]

    def test_caps_results(self):
        handler = AppSearchHandler(_catalog([f"Tool {i}" for i in range(7)]), max_results=5)
        results = handler.get_results("tool")
        assert [r.title for r in results] == [f"Tool {i}" for i in range(5)]

    def test_no_match_returns_empty(self):
        handler = AppSearchHandler(_catalog(["Firefox"]))
        assert handler.get_results("zzz") == []


class TestFileSearchHandler:
    """Test file search results."""

    def _files(self):
        return [
            IndexedFile(name="Reports", path="/home/Documents/Reports", kind="folder"),
            IndexedFile(name="annual report.pdf", path="/home/Desktop/annual report.pdf"),
            IndexedFile(name="report.docx", path="/home/Documents/report.docx"),
            IndexedFile(name="photo.jpg", path="/home/Downloads/photo.jpg"),
        ]

    def test_substring_match_and_ranking(self):
        handler = FileSearchHandler(_catalog(files=self._files()))
        titles = [r.title for r in handler.get_results("report")]
        assert titles == ["report.docx", "Reports", "annual report.pdf"]

    def test_subtitle_names_kind(self):
        handler = FileSearchHandler(_catalog(files=self._files()))
        subtitles = {r.title: r.subtitle for r in handler.get_results("report")}
        assert subtitles["Reports"] == "Folder"
        assert subtitles["report.docx"] == "File"

    def test_folders_are_file_kind_results(self):
        handler = FileSearchHandler(_catalog(files=self._files()))
        assert {r.kind for r in handler.get_results("report")} == {"file"}

    def test_id_is_path_based(self):
        handler = FileSearchHandler(_catalog(files=self._files()))
        result = handler.get_results("photo")[0]
        assert result.id == "file-/home/Downloads/photo.jpg"

    def test_caps_results(self):
        files = [IndexedFile(name=f"notes{i}.txt", path=f"/d/notes{i}.txt") for i in range(6)]
        handler = FileSearchHandler(_catalog(files=files), max_results=3)
        assert len(handler.get_results("notes")) == 3
