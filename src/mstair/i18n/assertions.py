# File: src/mstair/i18n/assertions.py
"""
Strict-mode checks for the interpolators.

Each assertion takes a ``message`` title, normally the reconstructed call such
as ``"Error in gettext(foo __x__)"``, and raises with that title prepended.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from mstair.i18n.delimited import is_form_index
from mstair.i18n.errors import (
    CollisionError,
    FragmentCountError,
    PluralFormError,
    TokenError,
    TranslatorInstanceError,
)
from mstair.i18n.token import Token, validate_tokens


__all__ = [
    "assert_form_index",
    "assert_forms_preserved",
    "assert_fragment_count",
    "assert_plural_forms",
    "assert_tokens",
    "assert_translator_instance",
]


def assert_translator_instance(obj: Any, fieldname: str, message: str) -> None:
    """
    Raise unless ``obj.<fieldname>`` is callable.

    :param obj: An object that should expose a translation method, e.g. gettext.NullTranslations.
    :param fieldname: Name of the required method, "gettext" or "ngettext".
    :param message: A title for the error.
    :raises TranslatorInstanceError: If the member is missing or not callable.
    """
    if obj is None or not callable(getattr(obj, fieldname, None)):
        raise TranslatorInstanceError(
            f"{message}: Gettext instance is missing {fieldname}() member"
        )


def assert_fragment_count(fragment_count: int, substitution_count: int, message: str) -> None:
    """
    Raise unless there is exactly one more fragment than there are substitutions.

    :param fragment_count: Number of literal fragments in the call.
    :param substitution_count: Number of substitution values in the call.
    :param message: A title for the error.
    :raises FragmentCountError: If the counts do not interleave.
    """
    if fragment_count != substitution_count + 1:
        raise FragmentCountError(
            f"{message}: expected {substitution_count + 1} fragments for "
            f"{substitution_count} substitutions, saw {fragment_count}"
        )


def assert_tokens(tokens: Sequence[Token], message: str) -> None:
    """
    Raise on token errors, then on name collisions.

    :param tokens: Tokens in call order.
    :param message: A title for the error.
    :raises TokenError: If any token carries an error.
    :raises CollisionError: If a name is bound to differing values.
    """
    report = validate_tokens(tokens)
    if report.errors:
        raise TokenError(f"{message}: {', '.join(report.errors)}")
    if report.collisions:
        raise CollisionError(
            f"{message}: substitution with the same name must have the same value: "
            + ", ".join(report.collisions)
        )


def assert_plural_forms(expected: int | None, actual: int, message: str) -> None:
    """
    Raise on an unexpected number of plural forms.

    :param expected: Expected number of forms; None or <= 0 disables the check.
    :param actual: Number of forms found.
    :param message: A title for the error.
    :raises PluralFormError: If the counts differ.
    """
    if expected is not None and expected > 0 and actual != expected:
        raise PluralFormError(f"{message}: expected {expected} plural forms, saw {actual}")


def assert_forms_preserved(source: int, translated: int, message: str) -> None:
    """Raise when a translation adds or removes plural-form delimiters."""
    if source != translated:
        raise PluralFormError(
            f"{message}: translation must preserve all delimiters, "
            f"expected {source} plural forms, saw {translated}"
        )


def assert_form_index(index: Any, count: int, message: str) -> None:
    """Raise unless ``index`` is an int selecting one of ``count`` forms."""
    if not is_form_index(index, count):
        raise PluralFormError(
            f"{message}: condition must evaluate to an integer within template bounds, "
            f"saw {index!r} for {count} plural forms"
        )


# End of file: src/mstair/i18n/assertions.py
