# File: src/mstair/i18n/xlogging/logger_factory.py
"""
Logger factory for CoreLogger instances.

Loggers are created through logging.getLogger() so they join the standard
hierarchy (parents, propagation, pytest's caplog). Names default to the
caller's module when none is given.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from mstair.i18n.xlogging.core_logger import CoreLogger


__all__ = ["create_logger", "get_caller_logger_name"]


def create_logger(
    name: str | None,
    *,
    level: int | str | None = None,
    stacklevel: int = 1,
) -> CoreLogger:
    """
    Return a CoreLogger with a consistent, context-aware name.

    :param name: Logger name; ``None`` or ``""`` uses the caller's module,
        ``"__main__"`` uses the script stem.
    :param level: Optional explicit level, overriding the environment.
    :param stacklevel: Frames above the caller when inferring the name.
    :raises TypeError: If a plain logging.Logger already owns the name.
    """
    logger_name: str = name or ""
    if logger_name == "__main__":
        logger_name = _script_stem()
    if not logger_name:
        logger_name = get_caller_logger_name(stacklevel=stacklevel + 1)

    existing = logging.Logger.manager.loggerDict.get(logger_name)
    logger = existing if isinstance(existing, CoreLogger) else _get_core_logger(logger_name)
    if level is not None:
        logger.setLevel(level)
    return logger


def get_caller_logger_name(*, stacklevel: int = 1) -> str:
    """Resolve a logger name from ``__name__`` of the module ``stacklevel`` frames up."""
    try:
        frame = sys._getframe(stacklevel)
    except ValueError:
        return _script_stem()
    try:
        name = frame.f_globals.get("__name__", "")
    finally:
        del frame
    if not name or name == "__main__":
        return _script_stem()
    return name


def _get_core_logger(name: str) -> CoreLogger:
    """
    Create or retrieve a CoreLogger through logging.getLogger().

    Temporarily sets CoreLogger as the logger class; loggers constructed
    directly would have no parent and break caplog.
    """
    logging_class = logging.getLoggerClass()
    if logging_class is not CoreLogger:
        logging.setLoggerClass(CoreLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        if logging_class is not CoreLogger:
            logging.setLoggerClass(logging_class)
    if not isinstance(logger, CoreLogger):
        raise TypeError(f"Failed to create CoreLogger: {logger!r}")
    return logger


def _script_stem() -> str:
    arg0 = Path(sys.argv[0]) if sys.argv and sys.argv[0] else None
    if arg0 is not None and arg0.stem:
        return arg0.stem
    # Embedded interpreter or python -c
    return Path(sys.executable or "").stem or "embedded_main"


# End of file: src/mstair/i18n/xlogging/logger_factory.py
