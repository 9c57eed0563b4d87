# File: src/mstair/i18n/test_assertions.py
"""
Tests for strict-mode assertions and their messages.
"""

from __future__ import annotations

import gettext
from typing import Any

import pytest

from mstair.i18n.assertions import (
    assert_form_index,
    assert_forms_preserved,
    assert_fragment_count,
    assert_plural_forms,
    assert_tokens,
    assert_translator_instance,
)
from mstair.i18n.errors import (
    CollisionError,
    FragmentCountError,
    InterpolationError,
    PluralFormError,
    TokenError,
    TranslatorInstanceError,
)
from mstair.i18n.token import Token, derive_token


def _tokens(*substitutions: Any) -> list[Token]:
    return [derive_token(value, i) for i, value in enumerate(substitutions)]


class TestAssertTranslatorInstance:
    @pytest.mark.parametrize("obj", [None, {}, object(), type("NoCall", (), {"ngettext": 1})()])
    def test_missing_member(self, obj: Any) -> None:
        with pytest.raises(TranslatorInstanceError, match=r"^title: .*missing ngettext\(\)"):
            assert_translator_instance(obj, "ngettext", "title")

    def test_error_is_type_and_value_error(self) -> None:
        with pytest.raises(TypeError):
            assert_translator_instance(None, "gettext", "title")
        with pytest.raises(ValueError):
            assert_translator_instance(None, "gettext", "title")

    def test_translations_instance_passes(self) -> None:
        assert_translator_instance(gettext.NullTranslations(), "gettext", "title")
        assert_translator_instance(gettext.NullTranslations(), "ngettext", "title")


class TestAssertTokens:
    def test_valid(self) -> None:
        assert_tokens(_tokens("x", {"a": 1}, {"a": 1}), "title")

    def test_token_errors_first(self) -> None:
        with pytest.raises(TokenError, match=r"^title: Keys must be alphanumeric$"):
            assert_tokens(_tokens({"a b": 1}, {"c": 1}, {"c": 2}), "title")

    def test_unkeyed_complex(self) -> None:
        with pytest.raises(TokenError, match="must be keyed"):
            assert_tokens(_tokens([]), "title")

    def test_collision_message(self) -> None:
        expected = (
            r"^title: substitution with the same name must have the same value: "
            r'0:"a" vs 1:"a"$'
        )
        with pytest.raises(CollisionError, match=expected):
            assert_tokens(_tokens({"a": 10}, {"a": 11}), "title")


class TestAssertFragmentCount:
    def test_interleaving_counts_pass(self) -> None:
        assert_fragment_count(1, 0, "title")
        assert_fragment_count(3, 2, "title")

    @pytest.mark.parametrize(("fragments", "substitutions"), [(1, 1), (3, 1), (0, 0)])
    def test_mismatch(self, fragments: int, substitutions: int) -> None:
        with pytest.raises(FragmentCountError, match=r"^title: expected \d+ fragments"):
            assert_fragment_count(fragments, substitutions, "title")

    def test_is_interpolation_error(self) -> None:
        with pytest.raises(InterpolationError):
            assert_fragment_count(1, 1, "title")


class TestAssertPluralForms:
    @pytest.mark.parametrize("expected", [None, 0, -1])
    def test_disabled(self, expected: int | None) -> None:
        assert_plural_forms(expected, 7, "title")

    def test_mismatch(self) -> None:
        with pytest.raises(PluralFormError, match=r"^title: expected 3 plural forms, saw 2$"):
            assert_plural_forms(3, 2, "title")

    def test_forms_preserved(self) -> None:
        assert_forms_preserved(2, 2, "title")
        with pytest.raises(
            PluralFormError, match=r"preserve all delimiters, expected 2 plural forms, saw 3$"
        ):
            assert_forms_preserved(2, 3, "title")

    def test_form_index(self) -> None:
        assert_form_index(1, 2, "title")
        with pytest.raises(PluralFormError, match="within template bounds"):
            assert_form_index(2, 2, "title")

    def test_all_errors_share_base(self) -> None:
        with pytest.raises(InterpolationError):
            assert_form_index("0", 2, "title")


# End of file: src/mstair/i18n/test_assertions.py
