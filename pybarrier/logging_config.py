"""Console and file logging for simulation runs.

Library modules only create ``logging.getLogger(__name__)`` loggers
under the ``pybarrier`` namespace.  Scripts and notebooks call
:func:`setup_logging` once to see their output.

Example::

    import logging
    from pybarrier.logging_config import setup_logging

    setup_logging(level=logging.DEBUG, log_file="run.log")
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

PACKAGE_LOGGER = "pybarrier"

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"


def setup_logging(
    level: int = logging.INFO,
    log_file: str | Path | None = None,
) -> logging.Logger:
    """Attach a stdout handler, and optionally a file handler, to the package logger.

    Handlers installed by an earlier call are closed and replaced, so
    calling this again in the same session changes the level without
    duplicating records.

    Args:
        level: Threshold for the package logger and its handlers.
        log_file: File receiving the same records; overwritten per run.

    Returns:
        The ``pybarrier`` logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    formatter = logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to %s", ", ".join(type(h).__name__ for h in handlers))
    return logger
