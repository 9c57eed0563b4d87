# File: src/mstair/i18n/template.py
"""
Build msgids from template parts and put substitution values back into translations.

The msgid is the literal text of the template with each substitution replaced
by its token name. After translation the names are located again, left to right
and in token order, and swapped for the finalized substitution values.

Reinsertion runs in two passes:
  1. locate_placeholders() slices the text into an ordered list of markers,
     each either literal text or the index of a token.
  2. collapse_markers() finalizes token values, stringifies primitives and
     merges neighbouring text.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from itertools import zip_longest
from typing import Any, TypeAlias

from mstair.i18n.base.string_helpers import collapse_whitespace, split_first, to_text
from mstair.i18n.base.types import Fragments, SubstitutionResult
from mstair.i18n.token import Token, finalize_token
from mstair.i18n.xlogging.core_logger import CoreLogger
from mstair.i18n.xlogging.logger_factory import create_logger


__all__ = [
    "Marker",
    "as_fragments",
    "assemble_template",
    "collapse_markers",
    "locate_placeholders",
    "reinsert_substitutions",
]

Marker: TypeAlias = str | int
"""Literal text (str) or the index of a token (int)."""

Finalizer: TypeAlias = Callable[[Token, int], Any]

_LOG: CoreLogger = create_logger(__name__)


def as_fragments(fragments: Fragments) -> tuple[str, ...]:
    """Return fragments as a tuple; a bare string is a template without substitutions."""
    if isinstance(fragments, str):
        return (fragments,)
    return tuple(fragments)


def assemble_template(fragments: Sequence[str], tokens: Sequence[Token]) -> str:
    """
    Combine literal fragments and token names into a msgid.

    Fragments and names alternate, starting and ending with a fragment. Runs of
    whitespace in the literal text are collapsed so that template indentation
    and line breaks do not leak into the msgid. Names are copied verbatim: an
    unkeyed value is its own name and must be found again after translation.

    :param fragments: Literal text parts, one more than there are tokens.
    :param tokens: Tokens whose names stand in for the substitutions.
    :return: The msgid.
    """
    names = (token.name for token in tokens)
    parts: list[str] = []
    literal = ""
    for fragment, name in zip_longest(fragments, names, fillvalue=""):
        literal += fragment
        # An empty name joins its neighbouring fragments into one literal run.
        if name:
            parts.extend((collapse_whitespace(literal), name))
            literal = ""
    parts.append(collapse_whitespace(literal))
    return "".join(parts)


def locate_placeholders(text: str, tokens: Sequence[Token]) -> list[Marker]:
    """
    Slice text around the first remaining occurrence of each token name.

    Tokens are searched in order, each in the text left over after the previous
    match. A token whose name is empty or absent contributes nothing.

    :param text: Translated text containing token names.
    :param tokens: Tokens in call order.
    :return: Non-empty text markers interleaved with token indices.
    """
    markers: list[Marker] = []
    remaining = text
    for index, token in enumerate(tokens):
        if not token.name:
            continue
        split = split_first(remaining, token.name)
        if split is None:
            _LOG.trace(
                "Placeholder %r not found in %r, substitution %s dropped",
                token.name,
                remaining,
                token.label,
            )
            continue
        prefix, remaining = split
        markers.extend((prefix, index))
    markers.append(remaining)
    return [marker for marker in markers if not (isinstance(marker, str) and not marker)]


def collapse_markers(
    markers: Sequence[Marker],
    tokens: Sequence[Token],
    finalize: Finalizer = finalize_token,
) -> list[Any]:
    """
    Resolve token markers to values and merge adjacent text.

    :param markers: Output of locate_placeholders().
    :param tokens: The tokens the markers index into.
    :param finalize: Transform of (token, emit position) to the emitted value.
    :return: Elements where no two neighbours are both str and no str is empty.
    """
    elements: list[Any] = []
    for marker in markers:
        if isinstance(marker, str):
            pending = marker
        else:
            pending = to_text(finalize(tokens[marker], len(elements)))
        if isinstance(pending, str):
            if not pending:
                continue
            if elements and isinstance(elements[-1], str):
                elements[-1] += pending
                continue
        elements.append(pending)
    return elements


def reinsert_substitutions(
    text: str,
    tokens: Sequence[Token],
    finalize: Finalizer = finalize_token,
) -> SubstitutionResult:
    """
    Replace token names in translated text with their substitution values.

    :param text: Translated text.
    :param tokens: Tokens in call order.
    :param finalize: Transform of (token, emit position) to the emitted value.
    :return: A str when every element is text, otherwise the list of elements.
    """
    elements = collapse_markers(locate_placeholders(text, tokens), tokens, finalize)
    if all(isinstance(element, str) for element in elements):
        return "".join(elements)
    return elements


# End of file: src/mstair/i18n/template.py
