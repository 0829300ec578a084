# tests/test_core.py

from __future__ import annotations

from collections import Counter

import pytest

from todolist.core import move, remove, validate_index
from todolist.errors import TaskIndexError
from todolist.models import Task


def _tasks(*texts: str) -> list[Task]:
    return [Task(t) for t in texts]


def _texts(tasks: list[Task]) -> list[str]:
    return [t.text for t in tasks]


def test_move_first_to_last() -> None:
    assert _texts(move(_tasks("a", "b", "c"), 0, 2)) == ["b", "c", "a"]


def test_move_last_to_first() -> None:
    assert _texts(move(_tasks("a", "b", "c"), 2, 0)) == ["c", "a", "b"]


def test_move_into_middle() -> None:
    assert _texts(move(_tasks("a", "b", "c", "d"), 3, 1)) == ["a", "d", "b", "c"]
    assert _texts(move(_tasks("a", "b", "c", "d"), 0, 2)) == ["b", "c", "a", "d"]


def test_move_to_same_position_is_noop() -> None:
    tasks = _tasks("a", "b", "c")
    for i in range(len(tasks)):
        assert move(tasks, i, i) == tasks


def test_move_preserves_length_and_contents() -> None:
    tasks = _tasks("a", "b", "b", "c", "d")
    for s in range(len(tasks)):
        for t in range(len(tasks)):
            moved = move(tasks, s, t)
            assert len(moved) == len(tasks)
            assert Counter(_texts(moved)) == Counter(_texts(tasks))
            assert moved[t] == tasks[s]


def test_move_does_not_mutate_input() -> None:
    tasks = _tasks("a", "b", "c")
    move(tasks, 0, 2)
    assert _texts(tasks) == ["a", "b", "c"]


@pytest.mark.parametrize("source,target", [(3, 0), (0, 3), (-1, 0), (0, -1), (5, 5)])
def test_move_out_of_range_raises(source: int, target: int) -> None:
    tasks = _tasks("a", "b", "c")
    with pytest.raises(TaskIndexError):
        move(tasks, source, target)
    assert _texts(tasks) == ["a", "b", "c"]


def test_move_on_empty_list_raises() -> None:
    with pytest.raises(TaskIndexError, match="empty"):
        move([], 0, 0)


def test_remove_returns_new_list_and_item() -> None:
    tasks = _tasks("a", "b", "c")
    rest, removed = remove(tasks, 1)
    assert removed == Task("b")
    assert _texts(rest) == ["a", "c"]
    assert _texts(tasks) == ["a", "b", "c"]


def test_remove_out_of_range_leaves_input() -> None:
    tasks = _tasks("a", "b", "c")
    with pytest.raises(TaskIndexError):
        remove(tasks, 4)
    assert _texts(tasks) == ["a", "b", "c"]


def test_validate_index_reports_one_based() -> None:
    with pytest.raises(TaskIndexError, match=r"index 5 is out of bounds \(1 to 3\)"):
        validate_index(_tasks("a", "b", "c"), 0, 4)


def test_task_index_error_is_an_index_error() -> None:
    with pytest.raises(IndexError):
        remove([], 0)
