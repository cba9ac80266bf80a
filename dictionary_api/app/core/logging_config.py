"""
Logging setup for the dictionary service.

``setup_logging`` attaches a console handler to the root logger and,
when ``LOG_FILE`` is configured, a size‑rotated file handler.  Every
handler uses the format ``time [LEVEL] logger: message``.  Per request
access lines from uvicorn are lowered to WARNING unless the service
runs in debug mode, so lookups and suggest keystrokes do not flood the
log.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Iterable, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers that emit one line per HTTP request.
NOISY_LOGGERS = ("uvicorn.access",)


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    *,
    debug: bool = False,
    noisy: Iterable[str] = NOISY_LOGGERS,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
    target: Optional[logging.Logger] = None,
) -> None:
    """Configure the root logger once per process.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to INFO.
    logfile : Optional[str]
        Path of a log file.  The file is rotated after ``max_bytes``
        keeping ``backup_count`` old copies.
    debug : bool
        Keep the per request loggers listed in ``noisy`` at ``level``.
    target : Optional[logging.Logger]
        Logger to configure instead of the root logger.
    """
    root = target if target is not None else logging.getLogger()
    if root.handlers:
        # Already configured by the test runner or an earlier create_app().
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = RotatingFileHandler(
            Path(logfile).resolve(),
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    if not debug:
        for name in noisy:
            logging.getLogger(name).setLevel(logging.WARNING)
