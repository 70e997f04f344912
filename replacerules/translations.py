"""
# Replace-Rules: translations.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Translation lookup.

A translation table maps `«id» --> «locale» --> «translation»`.
Lookups never fail: a missing translation produces a `LookupMissWarning`
and resolves to the empty string.
"""

import warnings
from typing import Callable, Iterable, Mapping, Optional, Union

from replacerules.core import Rule, replace_by_rules
from replacerules.exceptions import LookupMissWarning
from replacerules.items import ContentItem
from replacerules.utilities import none_to_empty_string

TranslationTable = Mapping[str, Mapping[str, str]]


def lookup_translation(translations: Optional[TranslationTable], id_: str, locale: str) -> str:
    """
    Look up the translation of `id_` into `locale`.

    A table or row which is not a mapping, or a translation which is not a string,
    counts as a miss, the same as an absent or empty translation.
    """
    translation = None
    if isinstance(translations, Mapping):
        translation_from_locale = translations.get(id_)
        if isinstance(translation_from_locale, Mapping):
            translation = translation_from_locale.get(locale)

    if not isinstance(translation, str):
        translation = None

    translation = none_to_empty_string(translation)
    if not translation:
        warnings.warn(f'warning: translation key `{id_}` not found for locale `{locale}`', LookupMissWarning)

    return translation


class Translator:
    """
    Object resolving translations for the current locale.

    `get_locale` is called on every lookup, so the locale may change between calls.
    If it returns None, there is no locale to translate into
    and every lookup resolves to the empty string (without a warning).
    """
    _get_locale: Callable[[], Optional[str]]
    _translations: Optional[TranslationTable]

    def __init__(self, get_locale: Callable[[], Optional[str]], translations: Optional[TranslationTable]):
        if not callable(get_locale):
            raise TypeError('error: `get_locale` must be a function')

        self._get_locale = get_locale
        self._translations = translations

    @property
    def locale(self) -> Optional[str]:
        return self._get_locale()

    @property
    def translations(self) -> Optional[TranslationTable]:
        return self._translations

    def translate(self, id_: str, rules: Optional[Iterable[Rule]] = None) -> Union[str, list[ContentItem]]:
        """
        Translate `id_` into the current locale.

        Without `rules`, the translation string is returned.
        With `rules`, the translation is replaced by them and the resulting items are returned.
        """
        locale = self.locale
        if not locale:
            if rules is not None:
                return []
            return ''

        translation = lookup_translation(self._translations, id_, locale)

        if rules is not None:
            return replace_by_rules(translation, rules)

        return translation
