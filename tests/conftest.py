"""
Shared test fixtures for the quicklaunch test suite.

Provides temporary home directories, start-menu trees, settings and
commands files that use real file I/O (no mocking of the filesystem).
"""

import copy

import pytest
import toml

from quicklaunch.utils.helpers import DEFAULT_SETTINGS


def _touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("")
    return path


@pytest.fixture
def settings():
    """A private copy of the default settings."""
    return copy.deepcopy(DEFAULT_SETTINGS)


@pytest.fixture
def tmp_home(tmp_path):
    """
    Create a home directory with the three common folders.

    Desktop/   TestApp.lnk  MyDoc.pdf  .hidden.txt  Projects/inner.txt
    Documents/ report.docx  Notes/
    Downloads/ archive.zip
    """
    home = tmp_path / "home"
    _touch(home / "Desktop" / "TestApp.lnk")
    _touch(home / "Desktop" / "MyDoc.pdf")
    _touch(home / "Desktop" / ".hidden.txt")
    _touch(home / "Desktop" / "Projects" / "inner.txt")
    _touch(home / "Documents" / "report.docx")
    (home / "Documents" / "Notes").mkdir()
    _touch(home / "Downloads" / "archive.zip")
    return home


@pytest.fixture
def tmp_start_menu(tmp_path):
    """
    Create a Windows-style start menu tree.

    Depth is counted from the root (0); a/b/c is depth 3, a/b/c/d depth 4.
    """
    root = tmp_path / "Programs"
    _touch(root / "Visual Studio Code.lnk")
    _touch(root / "notepad.lnk")
    _touch(root / "Uninstall Foo.lnk")
    _touch(root / "README.lnk")
    _touch(root / "Foo Help.exe")
    _touch(root / "image.png")
    _touch(root / "Accessories" / "Paint.LNK")
    _touch(root / "Tools" / "git-bash.exe")
    _touch(root / "a" / "b" / "c" / "Deep Three.lnk")
    _touch(root / "a" / "b" / "c" / "d" / "Deep Four.lnk")
    return root


@pytest.fixture
def tmp_settings(tmp_path):
    """Create a real settings TOML file overriding a few values."""
    settings_path = tmp_path / "settings.toml"
    data = {
        "search": {"max_apps": 3},
        "clipboard": {"capacity": 10},
    }
    settings_path.write_text(toml.dumps(data))
    return settings_path


@pytest.fixture
def tmp_commands(tmp_path):
    """Create a real commands TOML file with test entries."""
    commands_path = tmp_path / "commands.toml"
    data = {
        "commands": {
            "lock": {"exec": "loginctl lock-session"},
            "Work Notes": {"exec": "/home/me/notes/work.md"},
            "notepad": {"exec": "/opt/other-notepad"},
        }
    }
    commands_path.write_text(toml.dumps(data))
    return commands_path


@pytest.fixture
def no_commands(tmp_path):
    """Path of a commands file that does not exist."""
    return tmp_path / "missing-commands.toml"
