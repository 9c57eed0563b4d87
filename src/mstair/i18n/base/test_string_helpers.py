# File: src/mstair/i18n/base/test_string_helpers.py
"""
Tests for string helpers and substitution type tests.
"""

from __future__ import annotations

import math
import numbers
from collections import OrderedDict
from decimal import Decimal
from fractions import Fraction
from typing import Any

import pytest

from mstair.i18n.base.string_helpers import (
    collapse_whitespace,
    is_alphanumeric_key,
    split_first,
    to_text,
)
from mstair.i18n.base.types import is_nan, is_primitive, is_real_number, single_entry
from mstair.i18n.opaque import Opaque


class RegisteredReal:
    """Scalar registered as numbers.Real without subclassing it, like numpy.int64."""

    def __init__(self, value: float) -> None:
        self.value = value

    def __eq__(self, other: object) -> bool:
        other_value = other.value if isinstance(other, RegisteredReal) else other
        return bool(self.value == other_value)

    __hash__ = None  # type: ignore[assignment]


numbers.Real.register(RegisteredReal)


# ---------- string_helpers ----------


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("a  b", "a b"),
        ("a\n\tb", "a b"),
        (" a ", " a "),
        ("a\nb", "a\nb"),
        ("\n    indented\n", " indented\n"),
    ],
)
def test_collapse_whitespace(text: str, expected: str) -> None:
    assert collapse_whitespace(text) == expected


@pytest.mark.parametrize(
    ("key", "expected"),
    [("abc", True), ("A-b_9", True), ("", False), ("a b", False), ("a.b", False), ("ä", False)],
)
def test_is_alphanumeric_key(key: str, expected: bool) -> None:
    assert is_alphanumeric_key(key) is expected


def test_to_text() -> None:
    element = Opaque("x")
    assert to_text(12) == "12"
    assert to_text(None) == "None"
    assert to_text(False) == "False"
    assert to_text("x") == "x"
    assert to_text(element) is element


def test_split_first() -> None:
    assert split_first("a-b-c", "-") == ("a", "b-c")
    assert split_first("-", "-") == ("", "")
    assert split_first("abc", "-") is None


# ---------- types ----------


@pytest.mark.parametrize(
    "value", [None, "", "x", 0, 1.5, 1j, True, Decimal("2"), Fraction(1, 3), math.nan]
)
def test_is_primitive(value: Any) -> None:
    assert is_primitive(value)


@pytest.mark.parametrize("value", [[], {}, (), object(), Opaque(1), print])
def test_is_not_primitive(value: Any) -> None:
    assert not is_primitive(value)


def test_is_nan() -> None:
    assert is_nan(math.nan)
    assert is_nan(Decimal("NaN"))
    assert not is_nan(1.0)
    assert not is_nan("nan")
    assert is_nan(RegisteredReal(math.nan))
    assert not is_nan(RegisteredReal(2))


def test_is_real_number() -> None:
    assert is_real_number(3)
    assert is_real_number(math.inf)
    assert is_real_number(Fraction(1, 2))
    assert not is_real_number(True)
    assert not is_real_number(1j)
    assert not is_real_number("3")


def test_registered_real_is_real_number() -> None:
    assert is_real_number(RegisteredReal(2))
    assert is_real_number(Decimal("2.5"))


def test_single_entry() -> None:
    assert single_entry({"a": 1}) == ("a", 1)
    assert single_entry(OrderedDict(b=[])) == ("b", [])
    assert single_entry({}) is None
    assert single_entry({"a": 1, "b": 2}) is None
    assert single_entry([("a", 1)]) is None


# End of file: src/mstair/i18n/base/test_string_helpers.py
