import logging
import sys
from pathlib import Path
from typing import Any, Literal

from colorama import Fore, Style

import mstair.i18n.base.config as cfg

from .logger_constants import K_KLASS_NAME


__all__ = ["CoreFormatter", "get_color_code"]


FormatStyle = Literal["%", "{", "$"]

DEFAULT_FORMAT = "%(levelName)s %(fileAndLine)s %(klassAndMethod)s %(message)s"

COLOR_MAP: dict[str | None, str] = {
    # Code location colors
    "fileAndLine": Fore.CYAN,
    "klassAndMethod": Fore.BLUE,
    # Log level colors
    "TRACE": Fore.MAGENTA,
    "DEBUG": Style.DIM,
    "INFO": Fore.WHITE,
    "WARNING": Fore.YELLOW,
    "ERROR": Fore.LIGHTRED_EX,
    "CRITICAL": Fore.RED + Style.BRIGHT,
    "SUPPRESS": Fore.BLUE,
    None: Style.RESET_ALL,
}


def get_color_code(key: Any = None) -> str:
    """
    Return the ANSI code for key, or "" when color output is disabled.

    Unknown keys fall back to a Fore attribute of the same name, then to reset.
    """
    if not cfg.color_output_enabled():
        return ""
    if key in {"", "RESET"} or key is None:
        return Style.RESET_ALL
    if key in COLOR_MAP:
        return COLOR_MAP[key]
    return getattr(Fore, str(key).upper(), Style.RESET_ALL)


class CoreFormatter(logging.Formatter):
    """
    Formatter adding ``levelName``, ``fileAndLine`` and ``klassAndMethod`` fields,
    color-coded when color output is enabled.
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: FormatStyle = "%",
        validate: bool = True,
    ) -> None:
        super().__init__(fmt=fmt or DEFAULT_FORMAT, datefmt=datefmt, style=style, validate=validate)

    def format(self, record: logging.LogRecord) -> str:
        record.fileAndLine = self.format_fileAndLine(record.pathname, record.lineno)
        record.klassAndMethod = self.format_klassAndMethod(record)
        record.levelName = get_color_code(record.levelname) + record.levelname + get_color_code()
        return super().format(record)

    @staticmethod
    def format_file(file: str) -> str:
        """Return file relative to the working directory or script directory when possible."""
        if not file:
            return "<unknown file>"
        path = Path(file)
        for base in (Path.cwd(), Path(sys.path[0]) if sys.path and sys.path[0] else None):
            if base is None:
                continue
            try:
                return path.relative_to(base).as_posix()
            except ValueError:
                continue
        return path.as_posix()

    def format_fileAndLine(self, file: str, lineno: int) -> str:
        fileAndLine = f"{self.format_file(file)}:{lineno}"
        return get_color_code("fileAndLine") + fileAndLine + get_color_code()

    @staticmethod
    def format_klassAndMethod(record: logging.LogRecord) -> str:
        klass_name: str = getattr(record, K_KLASS_NAME, "")
        if record.funcName == "<module>":
            klassAndMethod = record.funcName
        elif klass_name:
            klassAndMethod = f"{klass_name}.{record.funcName}()"
        else:
            klassAndMethod = f"{record.funcName}()"
        return get_color_code("klassAndMethod") + klassAndMethod + get_color_code()
