"""Logger setup shared by the CLI and the HTTP service."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT_LOGGER = "dcgen"
CONSOLE_FORMAT = "[dcgen] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Child of the ``dcgen`` logger, e.g. ``dcgen.orchestrator``."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def _attach(logger: logging.Logger, handler: logging.Handler, fmt: str) -> None:
    handler.setLevel(logger.level)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send dcgen records to stderr and, when ``log_file`` is given, to that file.

    Reports go to stdout, so diagnostics stay on stderr. Calling this again
    replaces the handlers installed by the previous call.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _attach(logger, logging.StreamHandler(sys.stderr), CONSOLE_FORMAT)
    if log_file is not None:
        _attach(logger, logging.FileHandler(log_file, encoding="utf-8"), FILE_FORMAT)
    return logger


__all__ = ["configure_logging", "get_logger"]
