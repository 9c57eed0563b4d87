# File: src/mstair/i18n/delimited.py
"""
Plural forms delimited within a single template.

One template holds every plural form, separated by a delimiter (``|`` by
default): ``("one file|", " files")``. The msgid is split into forms and the
tokens are partitioned by where the delimiters sit among the original
fragments, so each form owns the substitutions written inside it.

This module only partitions and selects; it never validates counts.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from mstair.i18n.base.types import is_nan, is_real_number
from mstair.i18n.token import Token


__all__ = [
    "PluralFormGroup",
    "PluralSplit",
    "default_ngettext",
    "default_plural_index",
    "delimiter_positions",
    "form_text",
    "is_form_index",
    "split_plural_forms",
    "tokens_for_form",
]


@dataclass(frozen=True, slots=True)
class PluralFormGroup:
    """The text of one plural form and the tokens written inside it."""

    text: str
    tokens: tuple[Token, ...] = ()


@dataclass(frozen=True, slots=True)
class PluralSplit:
    """Result of split_plural_forms()."""

    forms_in_source: int
    forms_in_translated: int
    groups: tuple[PluralFormGroup, ...]

    @property
    def texts(self) -> tuple[str, ...]:
        return tuple(group.text for group in self.groups)


def delimiter_positions(delimiter: str, fragments: Sequence[str]) -> list[int]:
    """
    Return the fragment index of every delimiter occurrence, in order.

    A fragment containing the delimiter twice contributes its index twice.
    """
    return [i for i, fragment in enumerate(fragments) for _ in range(fragment.count(delimiter))]


def split_plural_forms(
    delimiter: str,
    fragments: Sequence[str],
    key: str,
    tokens: Sequence[Token],
) -> PluralSplit:
    """
    Split a msgid (or its translation) into plural forms and group the tokens.

    Token ``i`` follows fragment ``i``, so a delimiter in fragment ``i`` closes
    the form holding tokens before ``i``. Grouping follows the source fragments,
    not the positions of names in ``key``.

    :param delimiter: Non-empty form separator.
    :param fragments: Literal template fragments of the call.
    :param key: The msgid or a translated msgid.
    :param tokens: Tokens in call order.
    :return: Form counts of source and key, plus one group per form in key.
    """
    positions = delimiter_positions(delimiter, fragments)
    segments = key.split(delimiter)

    groups: list[PluralFormGroup] = []
    for i, segment in enumerate(segments):
        start = positions[i - 1] if 0 < i <= len(positions) else 0
        end = positions[i] if i < len(positions) else len(tokens)
        groups.append(PluralFormGroup(text=segment, tokens=tuple(tokens[start:end])))

    return PluralSplit(
        forms_in_source=len(positions) + 1,
        forms_in_translated=len(segments),
        groups=tuple(groups),
    )


def is_form_index(index: Any, count: int) -> bool:
    """Return True if index is an int (not bool) selecting one of count forms."""
    return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < count


def form_text(groups: Sequence[PluralFormGroup], index: Any) -> str:
    """Return the text of form ``index``, or "" when there is no such form."""
    return groups[index].text if is_form_index(index, len(groups)) else ""


def tokens_for_form(groups: Sequence[PluralFormGroup], index: Any) -> tuple[Token, ...]:
    """
    Return the tokens of form ``index`` followed by tokens of other forms with new names.

    A translated form may use placeholders that the source wrote in a sibling
    form (e.g. a catalog with more plural forms than the source). Names are
    unique per value once validated, so borrowing them is unambiguous.
    """
    own: tuple[Token, ...] = groups[index].tokens if is_form_index(index, len(groups)) else ()
    names = {token.name for token in own}
    borrowed: list[Token] = []
    for group in groups:
        for token in group.tokens:
            if token.name not in names:
                names.add(token.name)
                borrowed.append(token)
    return (*own, *borrowed)


def _is_singular(*quantity_args: Any) -> bool:
    if len(quantity_args) != 1:
        return True
    quantity = quantity_args[0]
    return not is_real_number(quantity) or is_nan(quantity) or quantity == 1


def default_plural_index(*quantity_args: Any) -> int:
    """
    Return the form index for a two-form template: 0 for singular, 1 for plural.

    Singular unless a single real-number quantity other than 1 is given; NaN,
    booleans, missing and non-numeric quantities are all singular.
    """
    return 0 if _is_singular(*quantity_args) else 1


def default_ngettext(singular: str, plural: str, *quantity_args: Any) -> str:
    """
    Ngettext implementation that performs no translation.

    :param singular: The msgid for a quantity of 1.
    :param plural: The msgid for any other quantity.
    :param quantity_args: Normally a single number.
    :return: Either singular or plural.
    """
    return singular if _is_singular(*quantity_args) else plural


# End of file: src/mstair/i18n/delimited.py
