"""
Environment variable-driven log level configuration.

Recognized variables (a ``.env`` file is loaded first, without overriding):

- ``LOG_LEVEL`` / ``LOG_LEVELS``: a DSL of ``pattern:LEVEL`` fragments separated
  by ``;``, ``,`` or spaces. A bare ``LEVEL`` (or ``root:LEVEL``) sets the default.
  Patterns are logger names or globs, e.g. ``mstair.i18n.*:TRACE``.
- ``LOG_LEVEL_<MODULE>``: level for one logger, where ``_`` separates name
  components and ``__`` stands for a literal underscore, e.g.
  ``LOG_LEVEL_MSTAIR_I18N_TEMPLATE=TRACE``.

Resolution precedence: exact > ancestor > best glob > default > fallback.
"""

from __future__ import annotations

import fnmatch
import logging
import os
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Final, NamedTuple

import dotenv

from mstair.i18n.xlogging.logger_constants import initialize_logger_constants


__all__ = ["LogLevelConfig", "load_dotenv"]

_FRAGMENT_SEPARATOR_RX: Final[re.Pattern[str]] = re.compile(r"[;, ]+")
_ASSIGNMENT_OPERATOR_RX: Final[re.Pattern[str]] = re.compile(r"[:=]+")
_VAR_NAME_RX: Final[re.Pattern[str]] = re.compile(
    r"^LOG_LEVELS?(?P<SUFFIX>(?:_[A-Z][A-Z0-9_]*)*)$"
)

_log_level_config_instance: LogLevelConfig | None = None


def load_dotenv() -> bool:
    """Load a ``.env`` file found from the working directory; existing variables win."""
    return dotenv.load_dotenv(dotenv.find_dotenv(usecwd=True), override=False)


def _module_from_suffix(suffix: str) -> str:
    """Convert ``MSTAIR_I18N__X`` into ``mstair.i18n_x``; ``ROOT`` or empty is the default."""
    suffix = suffix.lstrip("_")
    if not suffix or suffix.upper() == "ROOT":
        return ""
    return suffix.replace("__", "\0").replace("_", ".").replace("\0", "_").lower()


class LogPatternLevel(NamedTuple):
    """Mapping from a logger name pattern to an integer log level."""

    pattern: str
    level: int


@dataclass(slots=True)
class LogLevelConfig:
    """
    Resolve log levels for logger names from the environment.

    Precedence: exact > ancestor > glob > default > fallback.
    """

    pattern_to_level: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.pattern_to_level:
            self.update_from_environment()

    def update_from_environment(self) -> None:
        """Rebuild the pattern->level mapping from the current environment."""
        load_dotenv()
        initialize_logger_constants()
        self.pattern_to_level.clear()
        for name, value in sorted(os.environ.items(), reverse=True):
            match = _VAR_NAME_RX.match(name)
            if match is None:
                continue
            module = _module_from_suffix(match["SUFFIX"])
            for entry in self.parse_dsl(value, module=module):
                self.pattern_to_level[entry.pattern] = entry.level

    @staticmethod
    def parse_dsl(value: str, *, module: str = "") -> Iterator[LogPatternLevel]:
        """
        Parse one variable value into pattern->level entries.

        :param value: e.g. ``"DEBUG; mstair.i18n.*:TRACE"``.
        :param module: Prefix for patterns, from a ``LOG_LEVEL_<MODULE>`` name.
        """
        level_map = logging.getLevelNamesMapping()
        for fragment in _FRAGMENT_SEPARATOR_RX.split(value):
            if not fragment.strip():
                continue
            parts = _ASSIGNMENT_OPERATOR_RX.split(fragment.strip(), maxsplit=1)
            pattern = parts[0].strip("'\" ") if len(parts) == 2 else ""
            level_name = parts[-1].strip("'\" ").upper()

            if pattern.lower() == "root":
                pattern = ""
            if module:
                pattern = f"{module}.{pattern}" if pattern else module

            level = level_map.get(level_name, logging.NOTSET)
            if level != logging.NOTSET:
                yield LogPatternLevel(pattern, level)

    def get_effective_level(self, logger_name: str, *, default: int = logging.WARNING) -> int:
        """Return the configured level for logger_name, or ``default``."""
        name_lc = logger_name.lower()
        named: dict[str, int] = {k.lower(): v for k, v in self.pattern_to_level.items() if k}

        # Exact, then nearest ancestor
        candidates = [name_lc, *self._ancestors(name_lc)]
        for candidate in candidates:
            if candidate in named:
                return named[candidate]

        best: tuple[int, int] | None = None
        for pattern, level in named.items():
            if any(ch in pattern for ch in "*?[") and fnmatch.fnmatch(name_lc, pattern):
                score = self._glob_specificity(pattern)
                if best is None or score > best[0]:
                    best = (score, level)
        if best is not None:
            return best[1]

        return self.pattern_to_level.get("", default)

    @classmethod
    def get_instance(cls) -> LogLevelConfig:
        """Return the process-wide instance, creating it on first use."""
        global _log_level_config_instance
        if _log_level_config_instance is None:
            _log_level_config_instance = cls()
        return _log_level_config_instance

    @staticmethod
    def _ancestors(logger_name: str) -> list[str]:
        """Return ancestor names of a dotted logger path, most specific first."""
        parts = logger_name.split(".")
        return [".".join(parts[:i]) for i in range(len(parts) - 1, 0, -1)]

    @staticmethod
    def _glob_specificity(pattern: str) -> int:
        """Length of the fixed prefix before the first wildcard."""
        return min((i for i, ch in enumerate(pattern) if ch in "*?["), default=len(pattern))
