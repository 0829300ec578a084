"""Logging configuration for the todo CLI."""

import logging
import sys


class _ConsoleNoiseFilter(logging.Filter):
    """Keep todolist logs at the configured level; anything else only on ERROR."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "todolist" or record.name.startswith("todolist."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(console_level: int = logging.WARNING) -> None:
    """Configure the root logger with a single stderr handler.

    Call this once, before the first log call.
    """
    root = logging.getLogger()
    root.setLevel(console_level)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    logging.captureWarnings(True)
