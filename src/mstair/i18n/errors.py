# File: src/mstair/i18n/errors.py
"""
Exceptions raised by the interpolators.

Every exception derives from a builtin so callers may catch either the specific
type or the builtin one (``ValueError`` / ``TypeError``).
"""

from __future__ import annotations


__all__ = [
    "CollisionError",
    "FragmentCountError",
    "InterpolationError",
    "PluralFormError",
    "TokenError",
    "TranslatorInstanceError",
]


class InterpolationError(ValueError):
    """Base class for errors detected while interpolating a template."""


class TokenError(InterpolationError):
    """A substitution could not be turned into a usable placeholder."""


class CollisionError(InterpolationError):
    """The same placeholder name is bound to different values within one call."""


class FragmentCountError(InterpolationError):
    """The call does not supply exactly one more fragment than substitutions."""


class PluralFormError(InterpolationError):
    """The number of delimited plural forms is not what was expected."""


class TranslatorInstanceError(InterpolationError, TypeError):
    """The translation collaborator lacks the required callable member."""


# End of file: src/mstair/i18n/errors.py
