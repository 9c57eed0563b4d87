import re
from typing import Any, Final

from mstair.i18n.base.types import is_primitive


_WHITESPACE_RUN_RE: Final[re.Pattern[str]] = re.compile(r"\s{2,}")
_KEY_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9_-]+")


def collapse_whitespace(text: str) -> str:
    """Replace every run of two or more whitespace characters with a single space."""
    return _WHITESPACE_RUN_RE.sub(" ", text)


def is_alphanumeric_key(key: str) -> bool:
    """Return True if key is non-empty and made of letters, digits, '_' and '-' only."""
    return _KEY_RE.fullmatch(key) is not None


def to_text(value: Any) -> Any:
    """
    Stringify primitive values, leaving everything else untouched.

    :param value: A finalized substitution value or a text fragment.
    :return: ``str(value)`` for primitives, otherwise ``value`` itself.
    """
    return str(value) if is_primitive(value) else value


def split_first(text: str, separator: str) -> tuple[str, str] | None:
    """
    Split text around the first occurrence of separator.

    Examples:
        split_first("a-b-c", "-")  -> ("a", "b-c")
        split_first("abc", "-")    -> None

    :param text: Text to search.
    :param separator: Non-empty separator.
    :return: (prefix, suffix), or None when the separator does not occur.
    """
    prefix, found, suffix = text.partition(separator)
    return (prefix, suffix) if found else None
