"""
Localization of user-facing strings using Babel message catalogs.

Catalogs are looked up as ``config/locale/<locale>/LC_MESSAGES/prefspanel.mo``. When no
catalog matches, strings are returned unchanged.

"""
import logging
import pathlib
from typing import Optional, Sequence, Tuple

import babel
from babel.support import NullTranslations, Translations

DOMAIN: str = 'prefspanel'
LOCALE_DIR: pathlib.Path = pathlib.Path(__file__).parent.parent / 'config' / 'locale'

VERSION_NOTICE: str = 'This feature requires version {version} and above.'

_translations: NullTranslations = NullTranslations()


def get_system_locale() -> str:
    """
    Return the locale of the environment, e.g. 'en_US'. Falls back to 'en_US'.
    """
    return babel.default_locale() or 'en_US'


def load_translations(locale: Optional[str] = None) -> NullTranslations:
    """
    Load and install the message catalog for a locale.

    Args:
        locale (str, optional): Locale string, e.g. 'zh_TW'. Defaults to the system locale.

    Returns:
        NullTranslations: The installed translations. A :class:`NullTranslations` if no catalog was found.
    """
    locale = locale or get_system_locale()
    logging.debug(f'Loading "{DOMAIN}" translations for {locale} from "{LOCALE_DIR}"')
    translations = Translations.load(dirname=str(LOCALE_DIR), locales=[locale], domain=DOMAIN)
    install_translations(translations)
    return translations


def install_translations(translations: Optional[NullTranslations]) -> None:
    """
    Replace the translations used by :func:`localize`. None restores identity lookups.
    """
    global _translations
    _translations = translations if translations is not None else NullTranslations()


def localize(text: Optional[str]) -> str:
    """
    Translate a user-facing string.

    Args:
        text (str): The source string. None and empty strings return ''.

    Returns:
        str: The translated string, or the source string when untranslated.
    """
    if not text:
        return ''
    return _translations.gettext(text)


def format_version(version: Sequence[int]) -> str:
    """
    Format a version tuple, e.g. (10, 11) -> '10.11'.
    """
    return '.'.join(str(f) for f in version)


def version_notice(version: Tuple[int, ...]) -> str:
    """
    Return the localized notice shown for features gated behind a minimum platform version.
    """
    return localize(VERSION_NOTICE).format(version=format_version(version))
