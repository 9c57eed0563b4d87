# File: src/mstair/i18n/test_delimited.py
"""
Tests for plural form splitting and the default plural policy.
"""

from __future__ import annotations

import math
import sys
from decimal import Decimal
from fractions import Fraction
from typing import Any

import pytest

from mstair.i18n.base.test_string_helpers import RegisteredReal
from mstair.i18n.delimited import (
    PluralFormGroup,
    default_ngettext,
    default_plural_index,
    delimiter_positions,
    form_text,
    is_form_index,
    split_plural_forms,
    tokens_for_form,
)
from mstair.i18n.token import Token, derive_token


def _tokens(*substitutions: Any) -> list[Token]:
    return [derive_token(value, i) for i, value in enumerate(substitutions)]


# ---------- split_plural_forms ----------


class TestSplitPluralForms:
    def test_delimiter_positions_count_every_occurrence(self) -> None:
        assert delimiter_positions("|", ["a|b|", "c", "|d"]) == [0, 0, 2]
        assert delimiter_positions("|", ["abc"]) == []

    def test_token_after_delimiter_belongs_to_next_form(self) -> None:
        tokens = _tokens({"n": 3})
        split = split_plural_forms("|", ("one file|", " files"), "one file|__n__ files", tokens)
        assert split.forms_in_source == 2
        assert split.forms_in_translated == 2
        assert split.texts == ("one file", "__n__ files")
        assert split.groups[0].tokens == ()
        assert split.groups[1].tokens == (tokens[0],)

    def test_tokens_grouped_by_fragment(self) -> None:
        tokens = _tokens({"a": 1}, {"b": 2}, {"c": 3})
        fragments = ("", " x|", " y ", " z")
        split = split_plural_forms("|", fragments, "__a__ x|__b__ y __c__ z", tokens)
        assert split.groups[0].tokens == (tokens[0],)
        assert split.groups[1].tokens == (tokens[1], tokens[2])

    def test_translated_key_with_fewer_forms(self) -> None:
        tokens = _tokens({"n": 3})
        split = split_plural_forms("|", ("one file|", " files"), "__n__ Dateien", tokens)
        assert split.forms_in_source == 2
        assert split.forms_in_translated == 1
        assert split.texts == ("__n__ Dateien",)

    def test_translated_key_with_more_forms(self) -> None:
        split = split_plural_forms("|", ("a|b",), "a|b|c", [])
        assert split.forms_in_source == 2
        assert split.forms_in_translated == 3
        assert split.texts == ("a", "b", "c")

    def test_substitution_containing_delimiter_is_visible(self) -> None:
        split = split_plural_forms("|", ("a ", "|b"), "a x|y|b", _tokens("x|y"))
        assert split.forms_in_source == 2
        assert split.forms_in_translated == 3

    def test_multi_character_delimiter(self) -> None:
        split = split_plural_forms("||", ("one||many",), "one||many", [])
        assert split.texts == ("one", "many")


# ---------- form selection ----------


class TestFormSelection:
    @pytest.mark.parametrize(
        ("index", "count", "expected"),
        [
            (0, 2, True),
            (1, 2, True),
            (2, 2, False),
            (-1, 2, False),
            (True, 2, False),
            (None, 2, False),
        ],
    )
    def test_is_form_index(self, index: Any, count: int, expected: bool) -> None:
        assert is_form_index(index, count) is expected

    def test_form_text_out_of_range_is_empty(self) -> None:
        groups = (PluralFormGroup("one"), PluralFormGroup("many"))
        assert form_text(groups, 1) == "many"
        assert form_text(groups, 2) == ""
        assert form_text(groups, "1") == ""

    def test_tokens_for_form_borrows_new_names(self) -> None:
        a, b, c = _tokens({"a": 1}, {"b": 2}, {"a": 1})
        groups = (PluralFormGroup("__a__", (a,)), PluralFormGroup("__b__ __a__", (b, c)))
        assert tokens_for_form(groups, 0) == (a, b)
        assert tokens_for_form(groups, 1) == (b, c)

    def test_tokens_for_invalid_form(self) -> None:
        a, b = _tokens({"a": 1}, {"b": 2})
        groups = (PluralFormGroup("__a__", (a,)), PluralFormGroup("__b__", (b,)))
        assert tokens_for_form(groups, 5) == (a, b)


# ---------- default policy ----------


class TestDefaultPolicy:
    @pytest.mark.parametrize("quantity", [0, 2, 3, -1, sys.maxsize, math.inf, 2.5, Decimal(2)])
    def test_plural(self, quantity: Any) -> None:
        assert default_plural_index(quantity) == 1
        assert default_ngettext("singular", "plural", quantity) == "plural"

    @pytest.mark.parametrize(
        "quantity", [1, 1.0, Fraction(1), math.nan, True, False, None, "", "bar", {}, object()]
    )
    def test_singular(self, quantity: Any) -> None:
        assert default_plural_index(quantity) == 0
        assert default_ngettext("singular", "plural", quantity) == "singular"

    def test_missing_or_extra_quantity_is_singular(self) -> None:
        assert default_plural_index() == 0
        assert default_plural_index(2, 3) == 0
        assert default_ngettext("singular", "plural") == "singular"

    def test_registered_real_quantity(self) -> None:
        assert default_plural_index(RegisteredReal(2)) == 1
        assert default_plural_index(RegisteredReal(1)) == 0
        assert default_plural_index(RegisteredReal(math.nan)) == 0


# End of file: src/mstair/i18n/test_delimited.py
