"""
package: mstair.i18n

Gettext and ngettext interpolation for tagged-template style calls.
"""

# <AUTOGEN_INIT>
from mstair.i18n import (
    assertions,
    base,
    delimited,
    errors,
    interpolator,
    opaque,
    template,
    token,
    xlogging,
)


__all__ = [
    "assertions",
    "base",
    "delimited",
    "errors",
    "interpolator",
    "opaque",
    "template",
    "token",
    "xlogging",
]
# </AUTOGEN_INIT>

from mstair.i18n.delimited import default_ngettext, default_plural_index
from mstair.i18n.errors import (
    CollisionError,
    FragmentCountError,
    InterpolationError,
    PluralFormError,
    TokenError,
    TranslatorInstanceError,
)
from mstair.i18n.interpolator import (
    GettextConfig,
    I18n,
    NgettextConfig,
    gettext_default,
    i18n,
    make_gettext,
    make_ngettext,
    ngettext_default,
)
from mstair.i18n.opaque import Opaque
from mstair.i18n.token import Token, derive_token, finalize_token


__all__ += [
    "CollisionError",
    "FragmentCountError",
    "GettextConfig",
    "I18n",
    "InterpolationError",
    "NgettextConfig",
    "Opaque",
    "PluralFormError",
    "Token",
    "TokenError",
    "TranslatorInstanceError",
    "default_ngettext",
    "default_plural_index",
    "derive_token",
    "finalize_token",
    "gettext_default",
    "i18n",
    "make_gettext",
    "make_ngettext",
    "ngettext_default",
]

__version__ = "0.1.0"
