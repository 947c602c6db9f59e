from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

DEFAULT_LOG_LEVEL = logging.WARNING


def parse_log_level(name: Optional[str], default: int = DEFAULT_LOG_LEVEL) -> int:
    """Map "debug"/"INFO"/... to a logging level; unknown names give `default`."""
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def default_log_level() -> int:
    """
    Console log level for the CLI.

    Override with TASKMANAGER_LOG_LEVEL env var or --log-level CLI option.
    """
    return parse_log_level(os.getenv("TASKMANAGER_LOG_LEVEL"))


def default_log_file() -> Optional[Path]:
    """
    Optional file that receives the full DEBUG log.

    Unset by default; enable with TASKMANAGER_LOG_FILE or --log-file.
    """
    env = os.getenv("TASKMANAGER_LOG_FILE")
    if env:
        return Path(env).expanduser().resolve()
    return None
