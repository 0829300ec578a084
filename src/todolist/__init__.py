"""todolist - a small ordered todo list kept in a JSON file."""

__version__ = "1.0.0"

from .models import Task, default_path
from .errors import FileError, HomeDirError, ParseError, TaskIndexError, TodoError
from .storage import TaskStore, read_file, write_file
from .core import move, remove, validate_index

__all__ = [
    "Task",
    "default_path",
    "TodoError",
    "FileError",
    "ParseError",
    "TaskIndexError",
    "HomeDirError",
    "TaskStore",
    "read_file",
    "write_file",
    "move",
    "remove",
    "validate_index",
]
