"""File I/O for todolist task files."""

import json
import logging
import os
import stat
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from .errors import FileError, ParseError
from .models import Task, TASK_KEY

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _parse_tasks(data: object, path: PathLike) -> List[Task]:
    if data is None:
        return []
    if not isinstance(data, list):
        raise ParseError(f"{path}: expected a JSON array, got {type(data).__name__}")

    tasks: List[Task] = []
    for pos, item in enumerate(data, start=1):
        if not isinstance(item, dict):
            raise ParseError(f"{path}: entry {pos} is not an object")
        text = item.get(TASK_KEY, "")
        if not isinstance(text, str):
            raise ParseError(f"{path}: entry {pos} has a non-string {TASK_KEY!r} value")
        tasks.append(Task(text=text))
    return tasks


def read_file(path: PathLike) -> List[Task]:
    """Load the task list stored at path.

    A missing file is an empty list. Content that is not a JSON array of
    {"task": ...} objects raises ParseError; other I/O failures raise
    FileError.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = f.read()
    except FileNotFoundError:
        logger.debug("No task file at %s; starting empty", path)
        return []
    except UnicodeDecodeError as exc:
        raise ParseError(f"{path}: not valid UTF-8: {exc.reason} at byte {exc.start}") from exc
    except OSError as exc:
        raise FileError(f"cannot read {path}: {exc.strerror or exc}") from exc

    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise ParseError(f"{path}: invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise ParseError(f"{path}: invalid JSON: nested too deeply") from exc

    tasks = _parse_tasks(data, path)
    logger.debug("Loaded %d task(s) from %s", len(tasks), path)
    return tasks


def _file_mode(path: PathLike) -> int:
    """Permission bits the saved file should carry.

    An existing file keeps its mode; a new one gets 0666 minus the umask,
    as a plain open() would give it.
    """
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_file(path: PathLike, tasks: List[Task]) -> None:
    """Rewrite the file from the in-memory list.

    The JSON goes to a temporary file next to the target which is then
    renamed into place, so the old content survives a failed write. The
    file's permission bits are carried over to the new copy.
    """
    payload = json.dumps([t.to_dict() for t in tasks], indent=2, ensure_ascii=False) + "\n"
    directory = os.path.dirname(os.path.abspath(path))

    tmp_name = None
    try:
        os.makedirs(directory, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=directory, prefix=".todos-", suffix=".tmp", delete=False
        ) as f:
            tmp_name = f.name
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_name, _file_mode(path))
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise FileError(f"cannot write {path}: {exc.strerror or exc}") from exc

    logger.debug("Wrote %d task(s) to %s", len(tasks), path)


@dataclass(frozen=True)
class TaskStore:
    """A task file at a fixed location."""

    path: Path

    def load(self) -> List[Task]:
        return read_file(self.path)

    def save(self, tasks: List[Task]) -> None:
        write_file(self.path, tasks)
