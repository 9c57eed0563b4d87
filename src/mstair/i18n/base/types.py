# File: src/mstair/i18n/base/types.py
"""
Type aliases and runtime type tests for substitution values.
"""

import numbers
from collections.abc import Callable, Mapping, Sequence
from decimal import Decimal
from fractions import Fraction
from typing import Any, Final, TypeAlias


# ---------- Static typing aliases (for annotations) ----------

PrimitiveNonStringTypes: TypeAlias = int | float | complex | bool | Decimal | Fraction | None
PrimitiveTypes: TypeAlias = PrimitiveNonStringTypes | str
RealNumberTypes: TypeAlias = int | float | Decimal | Fraction
Fragments: TypeAlias = Sequence[str] | str
SubstitutionResult: TypeAlias = str | list[Any]
Translator: TypeAlias = Callable[..., str]

# ---------- Runtime tuples (for isinstance/issubclass) ----------

PRIMITIVE_NON_STRING_TYPES: Final[tuple[type, ...]] = (
    int,
    float,
    complex,
    bool,
    Decimal,
    Fraction,
    type(None),
)
PRIMITIVE_TYPES: Final[tuple[type, ...]] = (*PRIMITIVE_NON_STRING_TYPES, str)
# numbers.Real covers int, float, Fraction and registered types such as numpy scalars.
REAL_NUMBER_TYPES: Final[tuple[type, ...]] = (numbers.Real, Decimal)


def is_primitive(value: Any) -> bool:
    """Return True for values that are rendered as text via str()."""
    return isinstance(value, PRIMITIVE_TYPES)


def is_nan(value: Any) -> bool:
    """Return True for a real-number or Decimal NaN (the only values unequal to themselves)."""
    if isinstance(value, Decimal):
        return value.is_nan()
    return isinstance(value, numbers.Real) and bool(value != value)


def is_real_number(value: Any) -> bool:
    """
    Return True for real numbers usable as a plural quantity.

    bool is excluded even though it subclasses int: True is a flag, not a count.
    """
    return isinstance(value, REAL_NUMBER_TYPES) and not isinstance(value, bool)


def single_entry(value: Any) -> tuple[Any, Any] | None:
    """
    Return the only (key, value) pair of a single-entry mapping, else None.

    :param value: Any substitution value.
    :return: The pair, or None when value is not a mapping with exactly one entry.
    """
    if isinstance(value, Mapping) and len(value) == 1:
        return next(iter(value.items()))
    return None


# End of file: src/mstair/i18n/base/types.py
