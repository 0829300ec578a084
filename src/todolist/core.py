"""List reordering helpers (pure functions, no I/O).

Indices here are 0-based. The CLI converts from the 1-based numbers that
`list` shows before calling in.
"""

from typing import List, Tuple

from .errors import TaskIndexError
from .models import Task


def validate_index(tasks: List[Task], *indices: int) -> None:
    """Raise TaskIndexError if any index falls outside [0, len(tasks))."""
    n = len(tasks)
    for idx in indices:
        if idx < 0 or idx >= n:
            if n == 0:
                raise TaskIndexError(f"index {idx + 1} is out of bounds (list is empty)")
            raise TaskIndexError(f"index {idx + 1} is out of bounds (1 to {n})")


def remove(tasks: List[Task], index: int) -> Tuple[List[Task], Task]:
    """Return a copy of tasks without the item at index, plus that item."""
    validate_index(tasks, index)
    result = list(tasks)
    removed = result.pop(index)
    return result, removed


def move(tasks: List[Task], source: int, target: int) -> List[Task]:
    """Move the task at source to target, shifting the ones in between.

    Both indices must be valid for the list as given. After the task is
    taken out the list is one shorter, so the last original index is the
    new end and a task moved there lands last. The input list is left as
    it was.
    """
    validate_index(tasks, source, target)
    result, moving = remove(tasks, source)
    result.insert(target, moving)
    return result
