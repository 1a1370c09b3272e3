"""
Tests for built-in actions and commands.toml loading.

Uses real TOML files.
"""

import toml

from quicklaunch.models import IndexedApp
from quicklaunch.services.commands import builtin_actions, load_user_actions


class TestBuiltinActions:
    """Test per-platform built-in lists."""

    def test_windows_actions(self):
        actions = builtin_actions("win32")
        assert IndexedApp(name="Notepad", path="notepad.exe") in actions
        assert IndexedApp(name="Settings", path="ms-settings:") in actions
        assert len(actions) == 8

    def test_posix_actions(self):
        names = [a.name for a in builtin_actions("linux")]
        assert "Terminal" in names
        assert "Notepad" not in names

    def test_names_are_unique(self):
        for platform in ("win32", "linux", "darwin"):
            keys = [a.key for a in builtin_actions(platform)]
            assert len(keys) == len(set(keys))


class TestUserActions:
    """Test loading user actions from TOML files."""

    def test_loads_valid_commands(self, tmp_commands):
        actions = load_user_actions(tmp_commands)
        assert IndexedApp(name="lock", path="loginctl lock-session") in actions
        assert IndexedApp(name="Work Notes", path="/home/me/notes/work.md") in actions

    def test_keeps_file_order(self, tmp_commands):
        assert [a.name for a in load_user_actions(tmp_commands)] == ["lock", "Work Notes", "notepad"]

    def test_skips_malformed_commands(self, tmp_path):
        commands_path = tmp_path / "commands.toml"
        data = {
            "commands": {
                "good": {"exec": "echo ok"},
                "bad": {"description": "Missing exec field"},
                "also_bad": "not a table",
            }
        }
        commands_path.write_text(toml.dumps(data))

        assert [a.name for a in load_user_actions(commands_path)] == ["good"]

    def test_missing_file_returns_nothing(self, no_commands):
        assert load_user_actions(no_commands) == []

    def test_empty_file_returns_nothing(self, tmp_path):
        commands_path = tmp_path / "commands.toml"
        commands_path.write_text("")
        assert load_user_actions(commands_path) == []

    def test_invalid_toml_returns_nothing(self, tmp_path):
        commands_path = tmp_path / "commands.toml"
        commands_path.write_text("[commands.lock\nexec = ")
        assert load_user_actions(commands_path) == []
