"""
Logging configuration for the guestbook.

Inside the container everything goes to stdout, where the platform's
log driver picks it up.  ``setup_logging`` attaches a stdout handler
(and optionally a file handler) to the root logger and makes the
uvicorn loggers propagate to it, so server and application records
share one format.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> bool:
    """Configure the root logger (or ``logger``) once.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Extra file to write records to.  Resolved against the current
        working directory.
    logger : Optional[logging.Logger]
        Logger to configure instead of the root logger.

    Returns
    -------
    bool
        ``False`` if the logger already had handlers and nothing
        was changed.
    """
    target = logger if logger is not None else logging.getLogger()
    if target.handlers:
        return False

    target.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(formatter)
    target.addHandler(stdout_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        target.addHandler(file_handler)

    for name in UVICORN_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
    return True
