"""Data models and constants for todolist."""

from dataclasses import dataclass
from pathlib import Path

CONFIG_SUBDIR = Path(".config") / "todo"
FILE_NAME = "todos.json"
TASK_KEY = "task"


def default_path(home: Path) -> Path:
    """Return the default store location: <home>/.config/todo/todos.json"""
    return home / CONFIG_SUBDIR / FILE_NAME


@dataclass
class Task:
    """A single todo item."""

    text: str

    def to_dict(self) -> dict:
        return {TASK_KEY: self.text}
