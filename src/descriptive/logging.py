"""
Package logger for ``descriptive``.

Module loggers come from ``get_logger(__name__)`` and hand their records to
the package logger, which writes ``[LEVEL] name: message`` to stderr at
WARNING unless ``set_log_level`` says otherwise.
"""

import logging
import sys

PACKAGE = "descriptive"

_package_logger = logging.getLogger(PACKAGE)
if not _package_logger.handlers:
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    _package_logger.addHandler(_handler)
    _package_logger.setLevel(logging.WARNING)
    _package_logger.propagate = False


def get_logger(name: str | None = None) -> logging.Logger:
    if name is None or name == PACKAGE:
        return _package_logger
    if not name.startswith(f"{PACKAGE}."):
        name = f"{PACKAGE}.{name}"
    return logging.getLogger(name)


def set_log_level(level: int | str) -> None:
    """Accepts ``logging.DEBUG`` style ints or names such as ``"debug"``."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    _package_logger.setLevel(level)
