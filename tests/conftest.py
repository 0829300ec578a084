# tests/conftest.py

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from todolist.storage import TaskStore


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """The CLI reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TODO_FILE", raising=False)
    monkeypatch.delenv("TODO_LOG_LEVEL", raising=False)


@pytest.fixture()
def todo_file(tmp_path: Path) -> Path:
    """Path of a task file that does not exist yet."""
    return tmp_path / "todo" / "todos.json"


@pytest.fixture()
def store(todo_file: Path) -> TaskStore:
    return TaskStore(todo_file)


@pytest.fixture()
def write_json(todo_file: Path):
    """Write raw task texts to the task file in the on-disk format."""

    def _write(*texts: str) -> Path:
        todo_file.parent.mkdir(parents=True, exist_ok=True)
        todo_file.write_text(json.dumps([{"task": t} for t in texts], indent=2), encoding="utf-8")
        return todo_file

    return _write
