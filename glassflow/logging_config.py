"""Console and file handlers for the ``glassflow`` logger.

Library modules only call ``logging.getLogger(__name__)``; scripts such as
``figures.py`` call :func:`setup_logging` once to decide where records go.
"""
from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import Final, Union

ROOT: Final[str] = "glassflow"
_FORMAT: Final[str] = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
_DATEFMT: Final[str] = "%H:%M:%S"


def _level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        value = logging.getLevelName(level.upper())
        if not isinstance(value, int):
            raise ValueError(f"unknown log level {level!r}")
        return value
    return int(level)


def setup_logging(level: Union[int, str] = logging.INFO,
                  log_file: Union[str, Path, None] = None) -> logging.Logger:
    """Route ``glassflow.*`` records to stderr and, optionally, ``log_file``.

    ``level`` is a number or a name such as ``"debug"``. Calling again
    replaces the handlers from the previous call.
    """
    lvl = _level(level)
    root = logging.getLogger(ROOT)
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    root.setLevel(lvl)

    fmt = logging.Formatter(_FORMAT, datefmt=_DATEFMT)
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(logging.FileHandler(Path(log_file), mode="w", encoding="utf-8"))
    for h in handlers:
        h.setFormatter(fmt)
        root.addHandler(h)

    root.debug("logging to %s at %s", [type(h).__name__ for h in handlers],
               logging.getLevelName(lvl))
    return root
