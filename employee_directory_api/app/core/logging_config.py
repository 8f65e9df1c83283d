"""
Logging setup for the Employee Directory API.

``setup_logging`` attaches a console handler, and a file handler when
``LOG_FILE`` is configured, to the root logger.  Uvicorn's own loggers
are aligned to the same level so request logs and application logs
read alike.  Calling it again is a no-op, which keeps handlers from
piling up when tests or tools create the app several times.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    ``level`` is a level name such as ``"debug"`` or ``"INFO"``;
    unknown names fall back to INFO.  ``logfile`` is an optional path,
    relative to the working directory, that receives a copy of every
    record.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _handlers(logfile):
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(numeric_level)

    for name in _UVICORN_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level)
