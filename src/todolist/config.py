"""Settings loaded from environment variables.

One Settings object per invocation; the CLI builds it once and passes the
resolved file path into the store.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import HomeDirError
from .models import default_path

ENV_PREFIX = "TODO"
DEFAULT_LOG_LEVEL = "WARNING"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw.strip()).expanduser()


def home_dir() -> Path:
    """Return the user's home directory or raise HomeDirError."""
    try:
        return Path.home()
    except (RuntimeError, KeyError, OSError) as exc:
        raise HomeDirError(f"could not determine home directory: {exc}") from exc


@dataclass(frozen=True)
class Settings:
    todo_file: Path
    log_level: str


def get_settings(file_override: Optional[str] = None) -> Settings:
    """Resolve settings; an explicit file path wins over TODO_FILE."""
    if file_override:
        todo_file = Path(file_override).expanduser()
    else:
        todo_file = _env_path(_k("FILE")) or default_path(home_dir())

    return Settings(
        todo_file=todo_file,
        log_level=_env(_k("LOG_LEVEL"), DEFAULT_LOG_LEVEL).upper(),
    )
