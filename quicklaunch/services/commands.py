"""
Built-in system actions and user-defined action aliases.

Built-ins are a fixed per-platform list seeded into the app catalog
before any directory scan. Users can add their own launch targets in
commands.toml next to settings.toml.

Example commands.toml:
    [commands.lock]
    exec = "loginctl lock-session"

    [commands."Work Notes"]
    exec = "/home/me/notes/work.md"
"""

import sys
from pathlib import Path
from typing import Optional

import toml
from loguru import logger

from quicklaunch.models import IndexedApp

WINDOWS_ACTIONS = [
    ("Notepad", "notepad.exe"),
    ("Calculator", "calc.exe"),
    ("Command Prompt", "cmd.exe"),
    ("PowerShell", "powershell.exe"),
    ("Task Manager", "taskmgr.exe"),
    ("File Explorer", "explorer.exe"),
    ("Settings", "ms-settings:"),
    ("Control Panel", "control.exe"),
]

POSIX_ACTIONS = [
    ("Terminal", "x-terminal-emulator"),
    ("Files", "xdg-open ~"),
    ("Text Editor", "xdg-open text/plain"),
    ("Calculator", "gnome-calculator"),
    ("System Monitor", "gnome-system-monitor"),
    ("Settings", "gnome-control-center"),
]


def builtin_actions(platform: Optional[str] = None) -> list[IndexedApp]:
    """
    Return the built-in system actions for a platform.

    Args:
        platform: A sys.platform value. Defaults to the running platform.
    """
    platform = platform or sys.platform
    pairs = WINDOWS_ACTIONS if platform.startswith("win") else POSIX_ACTIONS
    return [IndexedApp(name=name, path=target) for name, target in pairs]


def load_user_actions(commands_path: Path) -> list[IndexedApp]:
    """
    Load user actions from a commands.toml file.

    Malformed entries are skipped with a warning. A missing or unreadable
    file yields no actions.
    """
    commands_path = Path(commands_path)
    if not commands_path.exists():
        return []

    try:
        data = toml.load(commands_path)
    except (OSError, toml.TomlDecodeError):
        logger.exception(f"Failed to load commands from {commands_path}")
        return []

    commands = data.get("commands", {})
    if not isinstance(commands, dict):
        logger.warning(f"Ignoring 'commands' in {commands_path}: expected a table")
        return []

    actions = []
    for name, cmd in commands.items():
        if not isinstance(cmd, dict) or not isinstance(cmd.get("exec"), str):
            logger.warning(f"Skipping malformed command '{name}': missing 'exec' field")
            continue
        actions.append(IndexedApp(name=str(name), path=cmd["exec"]))

    logger.debug(f"Loaded {len(actions)} user actions from {commands_path}")
    return actions
