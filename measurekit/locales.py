#
# Measurekit Locales
#

# Standard library -----------------------------------------------------------------------------------------------------
from typing import TypeAlias

# Third-party ----------------------------------------------------------------------------------------------------------
from babel import Locale, UnknownLocaleError

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import fmt_type, fmt_value

# Classes --------------------------------------------------------------------------------------------------------------

LocaleLike: TypeAlias = str | Locale

# Languages mapping 'i' to dotted capital 'İ' instead of 'I'
_DOTTED_I_LANGUAGES = frozenset({"tr", "az"})


# Methods --------------------------------------------------------------------------------------------------------------

def get_locale(locale: LocaleLike | None = None, *, default: LocaleLike = "en") -> Locale:
    """
    Resolve a locale identifier or a babel Locale to a babel Locale.

    There is no process-wide default locale: None resolves to the explicit `default`.
    Both POSIX ('de_DE') and BCP 47 ('de-DE') separators are accepted.

    Raises:
        TypeError: If locale is not str | babel.Locale | None.
        ValueError: If the identifier is malformed or unknown to CLDR.

    Examples:
        >>> get_locale("de-DE")
        Locale('de', territory='DE')
        >>> get_locale(None, default="fr")
        Locale('fr')
    """
    if locale is None:
        locale = default

    if isinstance(locale, Locale):
        return locale

    if not isinstance(locale, str):
        raise TypeError(f"locale must be str | babel.Locale | None, got {fmt_type(locale)}")

    sep = "-" if "-" in locale else "_"
    try:
        return Locale.parse(locale, sep=sep)
    except (UnknownLocaleError, ValueError) as e:
        raise ValueError(f"unknown locale identifier: {fmt_value(locale)}") from e


def upper(text: str, locale: LocaleLike | None = None) -> str:
    """
    Upper-case text following the case rules of the given locale.

    Unicode default case mapping applies except for Turkic languages,
    where 'i' maps to 'İ'.

    Examples:
        >>> upper(" mi", "en")
        ' MI'
        >>> upper(" mi", "tr")
        ' Mİ'
    """
    if get_locale(locale).language in _DOTTED_I_LANGUAGES:
        text = text.replace("i", "İ")
    return text.upper()
