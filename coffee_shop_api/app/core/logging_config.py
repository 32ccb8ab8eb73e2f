"""
Logging configuration for the Coffee Shop API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger the first time it is called.  In debug mode
records also carry the module and line number that emitted them.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEBUG_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(module)s:%(lineno)d): %(message)s"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, debug: bool = False) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file that should receive a copy of every record.
        Empty or ``None`` disables the file handler.
    debug : bool
        Use the verbose format and force the ``DEBUG`` level.
    """
    root = logging.getLogger()
    if root.handlers:
        # create_app runs once per test case; keep the first configuration.
        return

    numeric_level = logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt=DEBUG_LOG_FORMAT if debug else LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
