"""
Centralized logging configuration for the salary service.
Console plus a rotating file (logs/app.log by default, LOG_DIR to move it).
The per-query log ("staff.queries") can be tuned separately with QUERY_LOG_LEVEL.
"""
import logging
import os
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

DEFAULT_LOG_DIR = Path(__file__).resolve().parent.parent.parent / "logs"
LOG_FILE_NAME = "app.log"
MAX_BYTES = 5 * 1024 * 1024  # 5 MB
BACKUP_COUNT = 5

FORMAT_CONSOLE = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
FORMAT_FILE = "%(asctime)s | %(levelname)-7s | %(name)s | %(filename)s:%(lineno)d | %(message)s"
DATE_FMT = "%Y-%m-%d %H:%M:%S"


def _level(name: Optional[str], fallback: int = logging.INFO) -> int:
    if not name:
        return fallback
    return getattr(logging, name.upper(), fallback)


def setup_logging(
    level: str = "INFO",
    log_dir: Union[str, Path, None] = None,
    root: Optional[logging.Logger] = None,
) -> None:
    """Configure the root logger (or `root`) with console and rotating file handlers."""
    level_value = _level(level)
    root = root or logging.getLogger()
    root.setLevel(level_value)
    logging.getLogger("staff.queries").setLevel(_level(os.getenv("QUERY_LOG_LEVEL"), level_value))

    # Already configured (reload, or a test runner owns the handlers)
    if root.handlers:
        return

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level_value)
    console.setFormatter(logging.Formatter(FORMAT_CONSOLE, datefmt=DATE_FMT))
    root.addHandler(console)

    log_file = Path(log_dir or os.getenv("LOG_DIR") or DEFAULT_LOG_DIR) / LOG_FILE_NAME
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=MAX_BYTES,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(level_value)
        file_handler.setFormatter(logging.Formatter(FORMAT_FILE, datefmt=DATE_FMT))
        root.addHandler(file_handler)
    except OSError:
        root.warning("Could not create log file %s; file logging disabled", log_file)

    # uvicorn's access log duplicates the request-timing middleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
