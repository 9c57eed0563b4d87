# File: src/mstair/i18n/token.py
"""
Substitution tokens: derivation, finalization and validation.

A token records everything the interpolators need to know about one
substitution value:

- ``label``: human readable position (and key), used in error messages,
- ``name``: the placeholder embedded in the msgid,
- ``key``: the explicit identity supplied by a ``{name: value}`` mapping,
- ``value``: the untouched substitution value,
- ``error``: a complaint about this token, reported rather than raised.

Exports:
- derive_token(): substitution value -> Token.
- finalize_token(): Token -> value emitted in the result.
- values_equal(): equality rule used for collision detection.
- calculate_collisions(): messages for names bound to differing values.
- validate_tokens(): token errors plus collisions, as a ValidationReport.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Final

from mstair.i18n.base.string_helpers import is_alphanumeric_key
from mstair.i18n.base.types import is_nan, is_primitive, single_entry
from mstair.i18n.opaque import is_opaque


__all__ = [
    "ERROR_KEYS_ALPHANUMERIC",
    "ERROR_UNKEYED_COMPLEX",
    "Token",
    "ValidationReport",
    "calculate_collisions",
    "derive_token",
    "finalize_token",
    "validate_tokens",
    "values_equal",
]

ERROR_KEYS_ALPHANUMERIC: Final[str] = "Keys must be alphanumeric"
ERROR_UNKEYED_COMPLEX: Final[str] = "All non-primitive substitutions must be keyed"


@dataclass(frozen=True, slots=True)
class Token:
    """One substitution value prepared for templating."""

    label: str
    name: str
    key: str | None = None
    value: Any = None
    error: str | None = None


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Problems found in a token list; both tuples are empty when the tokens are valid."""

    errors: tuple[str, ...] = ()
    collisions: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.errors or self.collisions)


def derive_token(substitution: Any, index: int) -> Token:
    """
    Convert a substitution value into a Token.

    A mapping with exactly one entry supplies an explicit key: ``{"n": 3}``
    yields name ``__n__`` and value ``3``. Anything else is named by its string
    form and has no key.

    :param substitution: The raw substitution value.
    :param index: Position of the substitution in the call.
    :return: The token; problems are reported in ``Token.error``, never raised.
    """
    entry = single_entry(substitution)
    if entry is not None:
        key = str(entry[0])
        return Token(
            label=f'{index}:"{key}"',
            name=f"__{key}__",
            key=key,
            value=entry[1],
            error=None if is_alphanumeric_key(key) else ERROR_KEYS_ALPHANUMERIC,
        )

    return Token(
        label=str(index),
        name=str(substitution),
        value=substitution,
        error=None if is_primitive(substitution) else ERROR_UNKEYED_COMPLEX,
    )


def finalize_token(token: Token, index: int) -> Any:
    """
    Convert a token into the value emitted in the result.

    Opaque values reused under an explicit key receive a call-stable identity
    ``"<key>-<index>"``. An identity already present is never overwritten.

    :param token: The token being emitted.
    :param index: Position the value will take in the result, after string consolidation.
    :return: The value to emit.
    """
    value = token.value
    if is_opaque(value) and value.key is None and token.key is not None:
        return value.with_key(f"{token.key}-{index}")
    return value


def values_equal(a: Any, b: Any) -> bool:
    """
    Return True if two substitution values count as the same value.

    Primitives compare by type and value, with NaN equal to NaN. Everything
    else compares by identity.
    """
    if a is b:
        return True
    if not (is_primitive(a) and is_primitive(b)) or type(a) is not type(b):
        return False
    if is_nan(a) and is_nan(b):
        return True
    return bool(a == b)


def calculate_collisions(tokens: Sequence[Token]) -> list[str]:
    """
    Describe every group of tokens sharing a name but not a value.

    Each token opens a group with the later tokens it collides with. A group
    whose members were all reported together already is not repeated.

    :param tokens: Tokens in call order.
    :return: Messages like ``'0:"a" vs 1:"a"'``, possibly empty but never None.
    """
    reported_groups: list[set[int]] = []
    messages: list[str] = []
    for i, token in enumerate(tokens):
        members = [i] + [
            j
            for j in range(i + 1, len(tokens))
            if tokens[j].name == token.name and not values_equal(tokens[j].value, token.value)
        ]
        if len(members) < 2:
            continue
        if any(set(members) <= group for group in reported_groups):
            continue
        reported_groups.append(set(members))
        message = " vs ".join(tokens[j].label for j in members)
        if message not in messages:
            messages.append(message)
    return messages


def collect_token_errors(tokens: Iterable[Token]) -> list[str]:
    """Return distinct token errors in first-seen order."""
    return list(dict.fromkeys(token.error for token in tokens if token.error))


def validate_tokens(tokens: Sequence[Token]) -> ValidationReport:
    """
    Scan tokens for per-token errors and name collisions.

    :param tokens: Tokens in call order.
    :return: A ValidationReport, falsy when nothing is wrong.
    """
    return ValidationReport(
        errors=tuple(collect_token_errors(tokens)),
        collisions=tuple(calculate_collisions(tokens)),
    )


# End of file: src/mstair/i18n/token.py
