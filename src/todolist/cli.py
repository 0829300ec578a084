"""todo command-line interface."""

import argparse
import logging
import os
import sys
from contextlib import contextmanager
from typing import Iterator, List, Optional

from . import __version__
from .config import get_settings
from .core import move, remove
from .errors import TaskIndexError, TodoError
from .logging_setup import setup_logging
from .models import Task
from .storage import TaskStore

logger = logging.getLogger(__name__)


@contextmanager
def _failure(message: str) -> Iterator[None]:
    """Prefix any TodoError raised inside the block with message."""
    try:
        yield
    except TodoError as exc:
        raise type(exc)(f"{message}: {exc}") from exc


def print_list(tasks: List[Task]) -> None:
    """Print the list with the 1-based numbers the other commands take."""
    if not tasks:
        print("No todos found. Add some!")
        return
    print("Your Todos:")
    for i, t in enumerate(tasks, start=1):
        print(f"{i}. {t.text}")


def _load(store: TaskStore) -> List[Task]:
    with _failure("failed to load todos"):
        return store.load()


def _save(store: TaskStore, tasks: List[Task]) -> None:
    with _failure("failed to save todos"):
        store.save(tasks)


def cmd_list(args: argparse.Namespace) -> None:
    print_list(_load(args.store))


def cmd_add(args: argparse.Namespace) -> None:
    text = " ".join(args.text).strip()
    tasks = _load(args.store)
    tasks.append(Task(text=text))
    _save(args.store, tasks)
    logger.info("Added task %d", len(tasks))
    print(f"Added: {text}")
    print_list(tasks)


def cmd_remove(args: argparse.Namespace) -> None:
    tasks = _load(args.store)
    try:
        tasks, removed = remove(tasks, args.index - 1)
    except TaskIndexError as exc:
        raise TaskIndexError(f"invalid index: {args.index}") from exc
    _save(args.store, tasks)
    logger.info("Removed task %d", args.index)
    print(f"Removed: {removed.text}")
    print_list(tasks)


def cmd_move(args: argparse.Namespace) -> None:
    current = _load(args.store)
    with _failure("failed to move todos"):
        tasks = move(current, args.start - 1, args.target - 1)
    _save(args.store, tasks)
    logger.info("Moved task %d to %d", args.start, args.target)
    print(f"Moved {current[args.start - 1].text} from {args.start} to {args.target}")
    print_list(tasks)


def cmd_path(args: argparse.Namespace) -> None:
    print(os.path.abspath(args.store.path))


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    p = argparse.ArgumentParser(prog="todo", description="Keep a short ordered list of todos.")
    p.add_argument(
        "-f",
        "--file",
        default=None,
        help="Path to the todo file (default: $TODO_FILE or ~/.config/todo/todos.json)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = p.add_subparsers(dest="cmd")

    s_list = sub.add_parser("list", aliases=["l", "ls"], help="List all todos")
    s_list.set_defaults(func=cmd_list)

    s_add = sub.add_parser("add", aliases=["a"], help="Add a new todo")
    s_add.add_argument("text", nargs="+", help="Task to add to the todo list")
    s_add.set_defaults(func=cmd_add)

    s_rm = sub.add_parser("rm", aliases=["remove"], help="Remove a todo by its index")
    s_rm.add_argument("index", type=int, help="Index of the todo to remove, as shown by `list`")
    s_rm.set_defaults(func=cmd_remove)

    s_mv = sub.add_parser(
        "mv",
        aliases=["move"],
        help="Move a todo to a different spot; `mv 3 1` puts todo 3 first and shifts the rest down",
    )
    s_mv.add_argument("start", type=int, help="Index of the todo to move")
    s_mv.add_argument("target", type=int, help="Index it should end up at")
    s_mv.set_defaults(func=cmd_move)

    s_path = sub.add_parser("path", help="Show the absolute path to the todo file")
    s_path.set_defaults(func=cmd_path)

    return p


def _log_level(name: str) -> int:
    """Map a level name like "DEBUG" to its number; unknown names mean WARNING."""
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Runs `list` if no subcommand is given."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.cmd is None:
        args.func = cmd_list

    try:
        settings = get_settings(args.file)
        level_name = "DEBUG" if args.verbose else settings.log_level
        setup_logging(console_level=_log_level(level_name))
        logger.debug("Using todo file %s", settings.todo_file)

        args.store = TaskStore(settings.todo_file)
        args.func(args)
    except TodoError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
