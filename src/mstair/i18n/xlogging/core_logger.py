# File: src/mstair/i18n/xlogging/core_logger.py
"""
Structured logging with environment-driven configuration.

Example:
    >>> from mstair.i18n.xlogging.logger_factory import create_logger
    >>> logger = create_logger(__name__)
    >>> logger.trace("Placeholder %r not found", "__name__")
    >>>
    >>> with logger.prefix_with("[catalog]"):
    ...     logger.debug("Loading messages")

Features:
- Custom levels: TRACE, SUPPRESS
- Per-logger levels from LOG_LEVEL* environment variables
- Caller class name recorded for the formatter
- Thread-safe prefix context manager
- Non-primitive args rendered with reprlib so large values stay short

Design:
- Only the root logger owns handlers; CoreLogger instances propagate.
- initialize_root() is the only entry point for root setup, and it is idempotent.
"""

from __future__ import annotations

import contextvars
import logging
import reprlib
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from types import FrameType
from typing import Any, ClassVar, TextIO

from mstair.i18n.base.types import PRIMITIVE_TYPES
from mstair.i18n.xlogging.logger_constants import (
    K_KLASS_NAME,
    TRACE,
    initialize_logger_constants,
)
from mstair.i18n.xlogging.logger_formatter import CoreFormatter
from mstair.i18n.xlogging.logger_util import LogLevelConfig


__all__: list[str] = [
    "CoreLogger",
    "initialize_root",
]

_LOG_KWARGS_FORBIDDEN: set[str] = {"filename", "lineno", "msg", "args", "levelname", "levelno"}
_LOG_KWARGS_STANDARD: set[str] = {"exc_info", "stack_info", "stacklevel", "extra"}
_LOG_ROOT_ATTR_NAME = "_mstair_i18n_corelogger_initialized"

_log_prefix: contextvars.ContextVar[str] = contextvars.ContextVar("log_prefix", default="")
_arg_repr = reprlib.Repr()
_arg_repr.maxstring = 120
_arg_repr.maxother = 120


class CoreLogger(logging.Logger):
    """
    Application logger that extends logging.Logger with:

    - TRACE level via .trace().
    - Environment-driven initial level (see LogLevelConfig).
    - Class name of the caller stored on the record for CoreFormatter.
    - Prefix context manager for scoped message prefixes.
    """

    # _emit() + the public wrapper (debug/info/log/...)
    _INTERNAL_FRAME_OFFSET: ClassVar[int] = 2

    def __init__(
        self,
        name: str,
        level: int | str = logging.NOTSET,
    ) -> None:
        """
        Initialize the CoreLogger with a name and log level.

        :param name: The name of the logger, typically the module name.
        :param level: The initial level; NOTSET means "resolve from the environment".
        """
        initialize_logger_constants()
        if level in {logging.NOTSET, "NOTSET", ""}:
            level = LogLevelConfig.get_instance().get_effective_level(name)
        super().__init__(name, level)

        root_level = logging.getLogger().getEffectiveLevel()
        if self.level < root_level:
            self.setLevel(root_level)

    def __repr__(self) -> str:
        level = self.getEffectiveLevel()
        return f"<{self.__class__.__name__} '{self.name}' {logging.getLevelName(level)}={level}>"

    def _emit(self, level: int, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        """Shared body of every public logging method."""
        initialize_root()
        if not self.isEnabledFor(level):
            return

        _move_kwargs_to_extra(kwargs)
        stacklevel: int = kwargs.pop("stacklevel", 1) + self._INTERNAL_FRAME_OFFSET
        extra: dict[str, Any] = kwargs.pop("extra", {})
        klass_name = _caller_class_name(stacklevel)
        if klass_name:
            extra.setdefault(K_KLASS_NAME, klass_name)

        msg: Any = args[0] if args else ""
        log_args = tuple(
            arg if isinstance(arg, PRIMITIVE_TYPES) else _arg_repr.repr(arg) for arg in args[1:]
        )
        if prefix := _log_prefix.get():
            msg = f"{prefix}{msg}"

        super().log(level, msg, *log_args, stacklevel=stacklevel, extra=extra, **kwargs)

    def log(self, level: int, *args: Any, **kwargs: Any) -> None:  # type: ignore[override]
        self._emit(level, args, kwargs)

    def trace(self, *args: Any, **kwargs: Any) -> None:
        """Log a message at TRACE level (below DEBUG)."""
        self._emit(TRACE, args, kwargs)

    def debug(self, *args: Any, **kwargs: Any) -> None:
        self._emit(logging.DEBUG, args, kwargs)

    def info(self, *args: Any, **kwargs: Any) -> None:
        self._emit(logging.INFO, args, kwargs)

    def warning(self, *args: Any, **kwargs: Any) -> None:
        self._emit(logging.WARNING, args, kwargs)

    def error(self, *args: Any, **kwargs: Any) -> None:
        self._emit(logging.ERROR, args, kwargs)

    def critical(self, *args: Any, **kwargs: Any) -> None:
        """Log a message at CRITICAL level with a stack trace."""
        kwargs.setdefault("stack_info", True)
        self._emit(logging.CRITICAL, args, kwargs)

    def exception(self, *args: Any, **kwargs: Any) -> None:
        """Log a message at ERROR level with exception info."""
        kwargs.setdefault("exc_info", True)
        self._emit(logging.ERROR, args, kwargs)

    @contextmanager
    def prefix_with(self, prefix: str) -> Iterator[None]:
        """
        Context manager to prefix all log messages within the current context.

        Uses contextvars, so it is thread-safe and nests: inner prefixes are
        appended to outer ones.

        :param prefix: The prefix string to prepend to all log messages.
        """
        token = _log_prefix.set(_log_prefix.get() + prefix + " > ")
        try:
            yield
        finally:
            _log_prefix.reset(token)


def initialize_root(
    fmt: str | None = None,
    datefmt: str | None = None,
    level: int | str | None = None,
    force: bool = False,
) -> None:
    """
    Idempotently give the root logger one stderr handler using CoreFormatter.

    State is tracked as an attribute on the root logger, never in a module global.
    Handlers that do not write to stderr belong to the host application and are
    left alone.

    :param fmt: Format string for CoreFormatter.
    :param datefmt: Date format for CoreFormatter.
    :param level: Root logger level (int or name). If None and root is NOTSET, WARNING is used.
    :param force: Reinitialize even if already initialized (replaces the stderr handler).
    """
    root: logging.Logger = logging.getLogger()
    if getattr(root, _LOG_ROOT_ATTR_NAME, False) and not force:
        return
    setattr(root, _LOG_ROOT_ATTR_NAME, True)
    initialize_logger_constants()

    stderr_handlers: list[logging.StreamHandler[TextIO]] = [
        h for h in root.handlers if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr
    ]
    if force:
        for h in stderr_handlers:
            root.removeHandler(h)
        stderr_handlers = []
    if not stderr_handlers:
        handler: logging.StreamHandler[TextIO] = logging.StreamHandler(sys.stderr)
        handler.setFormatter(CoreFormatter(fmt, datefmt))
        root.addHandler(handler)
    elif not any(isinstance(h.formatter, CoreFormatter) for h in stderr_handlers):
        stderr_handlers[0].setFormatter(CoreFormatter(fmt, datefmt))

    if level is not None:
        if isinstance(level, str):
            level = logging.getLevelNamesMapping().get(level.upper(), logging.WARNING)
        root.setLevel(level)
    elif root.getEffectiveLevel() == logging.NOTSET:
        root.setLevel(logging.WARNING)


def _caller_class_name(stacklevel: int) -> str:
    """Return the class of ``self``/``cls`` in the caller's frame, or ""."""
    try:
        frame: FrameType = sys._getframe(stacklevel)
    except ValueError:
        return ""
    try:
        locals_ = frame.f_locals
        if (zelf := locals_.get("self")) is not None:
            return type(zelf).__name__
        if isinstance(cls := locals_.get("cls"), type):
            return cls.__name__
        return ""
    finally:
        # Break reference cycle: frame -> f_locals -> frame
        del frame


def _move_kwargs_to_extra(kwargs: dict[str, Any]) -> None:
    """
    Move non-standard keyword arguments into ``extra``.

    :raises ValueError: If a keyword would overwrite a LogRecord attribute.
    """
    for key in list(kwargs):
        if key in _LOG_KWARGS_FORBIDDEN:
            raise ValueError(f"Invalid keyword argument '{key}={kwargs[key]!r}'")
        if key not in _LOG_KWARGS_STANDARD:
            kwargs.setdefault("extra", {})[key] = kwargs.pop(key)


# End of file: src/mstair/i18n/xlogging/core_logger.py
