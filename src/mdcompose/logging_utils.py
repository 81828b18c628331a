#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Logging setup for the mdcompose command-line entry point.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are attached here, to the ``mdcompose`` package logger, when the CLI
starts. Handlers installed by earlier calls are replaced, handlers installed
by the host application are left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "mdcompose"

# Marks handlers owned by configure_logging
_OWNED_HANDLER_ATTR = "_mdcompose_handler"

TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
DEFAULT_FORMAT = "%(levelname)s: %(message)s"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.WARNING


def _own(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    setattr(handler, _OWNED_HANDLER_ATTR, True)
    return handler


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Attach console (and optionally file) handlers to the package logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "INFO"). Unknown names
        fall back to WARNING.
    log_file : str, optional
        Also append log records to this file.
    trace_mode : bool, default False
        Include timestamps and logger names, for following a conversion
        through the parser, binding table and renderer.

    Returns
    -------
    logging.Logger
        The ``mdcompose`` package logger.

    """
    level = _resolve_level(log_level)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        if getattr(handler, _OWNED_HANDLER_ATTR, False):
            package_logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(
        TRACE_FORMAT if trace_mode else DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S" if trace_mode else None
    )
    package_logger.addHandler(_own(logging.StreamHandler(sys.stderr), level, formatter))

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not open log file %s: %s", log_file, exc)
        else:
            package_logger.addHandler(_own(file_handler, level, formatter))
            package_logger.debug("Logging to file: %s", log_file)

    return package_logger
