from __future__ import annotations

import logging
import os
from contextlib import suppress
from logging.handlers import RotatingFileHandler
from pathlib import Path

from comment_divider.env import env_truthy

_MARKER = "_comment_divider_file_log"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _existing_log_file(root: logging.Logger, log_file: Path) -> Path | None:
    for h in root.handlers:
        base = getattr(h, "baseFilename", None)
        if getattr(h, _MARKER, False):
            return Path(str(base)).resolve() if base else log_file
        if base and Path(str(base)).resolve() == log_file:
            return log_file
    return None


def _file_handler(log_file: Path) -> RotatingFileHandler:
    handler = RotatingFileHandler(log_file, maxBytes=1024 * 1024, backupCount=2, encoding="utf-8")
    setattr(handler, _MARKER, True)
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def ensure_file_logging(*, log_dir: Path, filename: str = "comment-divider.log") -> Path:
    """Attach a rotating file handler to the root logger once per process.

    uvicorn keeps its own handlers; this only adds one more. Set
    COMMENT_DIVIDER_DISABLE_FILE_LOG to skip it and COMMENT_DIVIDER_LOG_LEVEL
    to change the root level.
    """

    if env_truthy("COMMENT_DIVIDER_DISABLE_FILE_LOG"):
        return log_dir / filename

    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = (log_dir / filename).resolve()

    root = logging.getLogger()
    existing = _existing_log_file(root, log_file)
    if existing is not None:
        return existing

    root.addHandler(_file_handler(log_file))

    lvl = str(os.getenv("COMMENT_DIVIDER_LOG_LEVEL", "") or "").strip()
    if lvl:
        with suppress(Exception):
            root.setLevel(lvl.upper())

    return log_file
