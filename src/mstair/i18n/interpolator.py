# File: src/mstair/i18n/interpolator.py
"""
Gettext and ngettext as tagged-template style interpolators.

Example:
    >>> gettext = make_gettext(translate=catalog.gettext)
    >>> gettext(("Hello ", ", you have mail"), {"name": "Ada"})
    'Hallo Ada, du hast Post'
    >>>
    >>> ngettext = make_ngettext(translate=catalog.ngettext)
    >>> ngettext(3)(("one file|", " files"), {"count": 3})
    '3 Dateien'

An interpolator is called like a tagged template literal: the literal
fragments first, then one positional argument per substitution. A mapping with
a single entry names its substitution, so ``{"count": 3}`` appears as
``__count__`` in the msgid handed to the translator.

Where every substitution ends up as text a ``str`` is returned. Otherwise a
``list`` mixing text and the opaque values is returned, so elements such as
links or widgets survive translation intact.

In strict mode (the default) the call is validated before the translator is
invoked and violations raise InterpolationError subclasses. With
``strict_mode=False`` validation is skipped and the result is best effort.

Exports:
- make_gettext(): singular interpolator factory.
- make_ngettext(): plural interpolator factory, closed over the quantity.
- i18n(): both interpolators over one translation collaborator.
- gettext_default / ngettext_default: interpolators that do not translate.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, NamedTuple, Protocol

from mstair.i18n.assertions import (
    assert_form_index,
    assert_forms_preserved,
    assert_fragment_count,
    assert_plural_forms,
    assert_tokens,
    assert_translator_instance,
)
from mstair.i18n.base.types import Fragments, SubstitutionResult, Translator
from mstair.i18n.delimited import (
    default_plural_index,
    form_text,
    split_plural_forms,
    tokens_for_form,
)
from mstair.i18n.template import as_fragments, assemble_template, reinsert_substitutions
from mstair.i18n.token import Token
from mstair.i18n.token import derive_token as default_derive_token
from mstair.i18n.token import finalize_token as default_finalize_token
from mstair.i18n.xlogging.core_logger import CoreLogger
from mstair.i18n.xlogging.logger_factory import create_logger


__all__ = [
    "GettextConfig",
    "I18n",
    "Interpolator",
    "NgettextConfig",
    "gettext_default",
    "i18n",
    "make_gettext",
    "make_ngettext",
    "ngettext_default",
]

_LOG: CoreLogger = create_logger(__name__)

_PLURAL_ONLY_OPTIONS = frozenset({"delimiter", "expected_form_count", "choose"})


class Interpolator(Protocol):
    def __call__(self, fragments: Fragments, *substitutions: Any) -> SubstitutionResult: ...


@dataclass(frozen=True, slots=True)
class GettextConfig:
    """
    Options shared by both interpolators.

    ``translate`` is either a callable or an object exposing a ``gettext()`` /
    ``ngettext()`` method such as ``gettext.GNUTranslations``. None disables
    translation.
    """

    translate: Translator | Any | None = None
    derive_token: Callable[[Any, int], Token] = default_derive_token
    finalize_token: Callable[[Token, int], Any] = default_finalize_token
    strict_mode: bool = True

    def __post_init__(self) -> None:
        if not callable(self.derive_token):
            raise TypeError(f"derive_token must be callable, got {self.derive_token!r}")
        if not callable(self.finalize_token):
            raise TypeError(f"finalize_token must be callable, got {self.finalize_token!r}")


@dataclass(frozen=True, slots=True)
class NgettextConfig(GettextConfig):
    """
    Options for the plural interpolator.

    ``expected_form_count`` of None (or <= 0) accepts any number of forms.
    ``choose`` maps the quantity arguments to the index of the form whose
    tokens, and whose untranslated text, are used.
    """

    delimiter: str = "|"
    expected_form_count: int | None = 2
    choose: Callable[..., Any] = default_plural_index

    def __post_init__(self) -> None:
        GettextConfig.__post_init__(self)
        if not isinstance(self.delimiter, str) or not self.delimiter:
            raise ValueError(f"delimiter must be a non-empty string, got {self.delimiter!r}")
        if not callable(self.choose):
            raise TypeError(f"choose must be callable, got {self.choose!r}")


class I18n(NamedTuple):
    gettext: Interpolator
    ngettext: Callable[..., Interpolator]


def _resolve_translator(translate: Any, fieldname: str, message: str) -> Translator | None:
    """Return the translation callable, taking ``fieldname`` from an instance if needed."""
    if translate is None or callable(translate):
        return translate
    assert_translator_instance(translate, fieldname, message)
    method: Translator = getattr(translate, fieldname)
    return method


def _derive_tokens(config: GettextConfig, substitutions: Sequence[Any]) -> list[Token]:
    return [config.derive_token(value, i) for i, value in enumerate(substitutions)]


def _interpolate_singular(
    config: GettextConfig,
    fragments: Sequence[str],
    substitutions: Sequence[Any],
) -> SubstitutionResult:
    tokens = _derive_tokens(config, substitutions)
    msgid = assemble_template(fragments, tokens)
    message = f"Error in gettext({msgid})"
    translate = _resolve_translator(config.translate, "gettext", message)

    if config.strict_mode:
        assert_fragment_count(len(fragments), len(substitutions), message)
        assert_tokens(tokens, message)

    if translate is None:
        msgstr = msgid
    else:
        msgstr = translate(msgid)
        _LOG.debug("gettext(%r) = %r", msgid, msgstr)

    return reinsert_substitutions(msgstr, tokens, config.finalize_token)


def _interpolate_plural(
    config: NgettextConfig,
    quantity_args: tuple[Any, ...],
    fragments: Sequence[str],
    substitutions: Sequence[Any],
) -> SubstitutionResult:
    tokens = _derive_tokens(config, substitutions)
    msgid = assemble_template(fragments, tokens)
    message = f"Error in ngettext({msgid})"
    translate = _resolve_translator(config.translate, "ngettext", message)

    source = split_plural_forms(config.delimiter, fragments, msgid, tokens)
    index = config.choose(*quantity_args)

    if config.strict_mode:
        assert_fragment_count(len(fragments), len(substitutions), message)
        assert_tokens(tokens, message)
        assert_plural_forms(config.expected_form_count, source.forms_in_source, message)
        # A substitution value containing the delimiter would shift the forms.
        assert_forms_preserved(source.forms_in_source, source.forms_in_translated, message)
        assert_form_index(index, len(source.groups), message)

    if translate is None:
        msgstr = form_text(source.groups, index)
    else:
        msgstr = translate(*source.texts, *quantity_args)
        _LOG.debug("ngettext(%s, %s) = %r", source.texts, quantity_args, msgstr)

    # The collaborator may hand back the whole delimited template, translated.
    translated = split_plural_forms(config.delimiter, fragments, msgstr, tokens)
    if translated.forms_in_translated > 1:
        if config.strict_mode:
            assert_forms_preserved(
                source.forms_in_source, translated.forms_in_translated, message
            )
        elif translated.forms_in_translated != source.forms_in_source:
            _LOG.warning(
                "%s: translation has %d plural forms, source has %d",
                message,
                translated.forms_in_translated,
                source.forms_in_source,
            )
        msgstr = form_text(translated.groups, index)

    return reinsert_substitutions(
        msgstr, tokens_for_form(source.groups, index), config.finalize_token
    )


def make_gettext(
    *,
    translate: Translator | Any | None = None,
    derive_token: Callable[[Any, int], Token] = default_derive_token,
    finalize_token: Callable[[Token, int], Any] = default_finalize_token,
    strict_mode: bool = True,
) -> Interpolator:
    """
    Create a gettext interpolator.

    :param translate: ``callable(msgid) -> str`` or an object with a ``gettext()`` method.
    :param derive_token: Converts (substitution, index) into a Token.
    :param finalize_token: Converts (token, emit position) into the emitted value.
    :param strict_mode: Validate every call before translating it.
    :return: ``gettext(fragments, *substitutions) -> str | list``.
    """
    config = GettextConfig(
        translate=translate,
        derive_token=derive_token,
        finalize_token=finalize_token,
        strict_mode=strict_mode,
    )

    def gettext(fragments: Fragments, *substitutions: Any) -> SubstitutionResult:
        return _interpolate_singular(config, as_fragments(fragments), substitutions)

    return gettext


def make_ngettext(
    *,
    translate: Translator | Any | None = None,
    derive_token: Callable[[Any, int], Token] = default_derive_token,
    finalize_token: Callable[[Token, int], Any] = default_finalize_token,
    strict_mode: bool = True,
    delimiter: str = "|",
    expected_form_count: int | None = 2,
    choose: Callable[..., Any] = default_plural_index,
) -> Callable[..., Interpolator]:
    """
    Create an ngettext interpolator factory.

    The result must be closed over the quantity before use:
    ``ngettext(n)(fragments, *substitutions)``. The quantity arguments are
    forwarded to ``translate`` after the forms and to ``choose``.

    :param translate: ``callable(*forms, *quantity) -> str`` or an object with an
        ``ngettext()`` method.
    :param derive_token: Converts (substitution, index) into a Token.
    :param finalize_token: Converts (token, emit position) into the emitted value.
    :param strict_mode: Validate every call before translating it.
    :param delimiter: Separator between plural forms in the template.
    :param expected_form_count: Required number of forms; None or <= 0 accepts any.
    :param choose: Maps the quantity arguments to a form index.
    :return: ``ngettext(*quantity) -> interpolator``.
    """
    config = NgettextConfig(
        translate=translate,
        derive_token=derive_token,
        finalize_token=finalize_token,
        strict_mode=strict_mode,
        delimiter=delimiter,
        expected_form_count=expected_form_count,
        choose=choose,
    )

    def ngettext(*quantity_args: Any) -> Interpolator:
        def interpolate(fragments: Fragments, *substitutions: Any) -> SubstitutionResult:
            return _interpolate_plural(
                config, quantity_args, as_fragments(fragments), substitutions
            )

        return interpolate

    return ngettext


def i18n(translate: Any = None, **options: Any) -> I18n:
    """
    Return gettext and ngettext interpolators sharing one translation collaborator.

    :param translate: An object with ``gettext()`` and ``ngettext()`` methods, or None.
    :param options: Factory keyword options; ``delimiter``, ``expected_form_count``
        and ``choose`` apply to ngettext only.
    :return: I18n(gettext, ngettext).
    """
    shared = {k: v for k, v in options.items() if k not in _PLURAL_ONLY_OPTIONS}
    return I18n(
        gettext=make_gettext(translate=translate, **shared),
        ngettext=make_ngettext(translate=translate, **options),
    )


gettext_default: Interpolator = make_gettext()
"""Gettext interpolator that performs no translation."""

ngettext_default: Callable[..., Interpolator] = make_ngettext()
"""Ngettext interpolator factory that performs no translation."""


# End of file: src/mstair/i18n/interpolator.py
