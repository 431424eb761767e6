"""Logging utilities for category health runs.

Engine modules only emit through :func:`get_logger`. :func:`configure_logging`
is for the host application (a CLI or report renderer) to call once at startup.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "cathealth"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the cathealth hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, quiet: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Attach console output (and an optional file sink) to the cathealth logger.

    ``quiet`` wins over ``verbose`` and limits console output to warnings, which
    suits collaborators that only care about exhausted runs.
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if log_file is not None else level)
    logger.propagate = False

    # Reset handlers so repeated configuration does not duplicate output.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter("[cathealth] %(levelname)s %(message)s"))
    logger.addHandler(stream_handler)

    if log_file is not None:
        # The file sink keeps the full iteration trail regardless of console level.
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
