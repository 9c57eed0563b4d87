# File: src/mstair/i18n/base/config.py
"""
Output context detection for diagnostics.

The interpolators themselves take all their options explicitly; this module
only decides how log output is presented. Overrides are thread-local so tests
and embedding applications can change them without affecting other threads.

Exports:
- in_test_mode(): check or override whether code runs under a test runner.
- color_output_enabled(): check or override whether log output is colorized.
- plain_output_context(): context manager disabling color temporarily.
"""

from __future__ import annotations

import os
import sys
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass


_tls = threading.local()


@dataclass
class TLSAttrs:
    """Thread-local overrides for the output context."""

    in_test_mode_override: bool | None = None
    color_output_override: bool | None = None


def _get_tls() -> TLSAttrs:
    """Return the current thread's TLSAttrs instance, initializing if needed."""
    try:
        return _tls.state
    except AttributeError:
        _tls.state = TLSAttrs()
        return _tls.state


def in_test_mode(
    *,
    unset_override: bool = False,
    override: bool | None = None,
) -> bool:
    """
    Check if running under pytest or unittest, with optional override.

    :param unset_override: If True, clears any prior override for this thread.
    :param override: If True or False, sets the override for this thread.
    :return: True if test mode is active, False otherwise.
    """
    tls = _get_tls()
    if unset_override:
        tls.in_test_mode_override = None
    if override is not None:
        tls.in_test_mode_override = override
        return override
    if tls.in_test_mode_override is not None:
        return tls.in_test_mode_override
    if "pytest" in sys.modules or "unittest" in sys.modules:
        return True
    return bool(os.environ.get("PYTEST_CURRENT_TEST"))


def color_output_enabled(
    *,
    unset_override: bool = False,
    override: bool | None = None,
) -> bool:
    """
    Determine if log output should carry ANSI color codes.

    Rules:
      - Explicit override wins.
      - NO_COLOR (any value) disables, FORCE_COLOR (any value) enables.
      - Disabled in test mode so captured records stay plain.
      - Otherwise enabled when stderr is a terminal.

    :param unset_override: If True, clears any prior override for this thread.
    :param override: If True or False, sets the override for this thread.
    :return: True if colors should be emitted.
    """
    tls = _get_tls()
    if unset_override:
        tls.color_output_override = None
    if override is not None:
        tls.color_output_override = override
        return override
    if tls.color_output_override is not None:
        return tls.color_output_override

    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    if in_test_mode():
        return False
    isatty = getattr(sys.stderr, "isatty", None)
    return bool(isatty and isatty())


@contextmanager
def plain_output_context() -> Iterator[None]:
    """
    Context manager disabling colored output on this thread.

    Restores the previous override on exit. Nested contexts are supported.
    """
    tls = _get_tls()
    previous = tls.color_output_override
    tls.color_output_override = False
    try:
        yield
    finally:
        tls.color_output_override = previous


# End of file: src/mstair/i18n/base/config.py
