# File: src/mstair/i18n/opaque.py
"""
Opaque substitution payloads.

An ``Opaque`` wraps a value the interpolators must keep as a distinct element of
the result (a widget, a markup node, a callback) together with an optional
identity ``key``. The payload itself is never inspected.

Example:
    >>> link = Opaque(("a", {"href": "/help"}, "help"))
    >>> gettext(("Click ", " for more."), {"link": link})
    ['Click ', Opaque(payload=('a', {'href': '/help'}, 'help'), key='link-1'), ' for more.']
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Generic, TypeVar


__all__ = ["Opaque"]

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Opaque(Generic[T]):
    """Opaque payload with an optional identity key."""

    payload: T
    key: str | None = None

    def with_key(self, key: str) -> Opaque[T]:
        """
        Return a copy carrying ``key``, unless this instance already has one.

        :param key: Identity to assign.
        :return: A new Opaque with the key, or ``self`` when a key is already present.
        """
        if self.key is not None:
            return self
        return dataclasses.replace(self, key=key)


def is_opaque(value: Any) -> bool:
    return isinstance(value, Opaque)


# End of file: src/mstair/i18n/opaque.py
