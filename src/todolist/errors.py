"""Exception hierarchy for todolist.

Every failure that should end a command with a non-zero exit status derives
from TodoError; the CLI catches it at the top level and prints the message.
"""


class TodoError(Exception):
    """Base class for all todolist errors."""


class FileError(TodoError):
    """Reading or writing the task file failed."""


class ParseError(FileError):
    """The task file exists but does not hold a valid task list."""


class TaskIndexError(TodoError, IndexError):
    """An index given for remove/move is outside the list."""


class HomeDirError(TodoError):
    """The user's home directory could not be determined."""
