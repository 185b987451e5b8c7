"""
Internationalization (i18n) utilities for user-facing messages.

This module provides functionality for:
- Loading translations for every supported language at startup
- Translating message keys based on the caller's language
- Determining the caller's language from query parameters or headers

Catalogs live in ``credo/locales/<lang>/LC_MESSAGES/messages.po``. Compiled
``.mo`` files are used through gettext when present; the ``.po`` source is
parsed as a fallback so freshly added keys resolve without a compile step.
"""

from __future__ import annotations

import gettext
import os
from typing import Dict, Optional

from fastapi import Request

from credo.core.config.settings import settings
from credo.core.logging import logger

_translations: Dict[str, gettext.NullTranslations] = {}

# Secondary lookup parsed from the *.po* sources
_fallback_catalogs: Dict[str, Dict[str, str]] = {}

LOCALES_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "locales"))


def _parse_po_file(po_path: str) -> Dict[str, str]:
    catalog: Dict[str, str] = {}
    current_msgid: Optional[str] = None
    with open(po_path, "r", encoding="utf-8") as po_file:
        for raw_line in po_file:
            line = raw_line.strip()
            if line.startswith("msgid "):
                current_msgid = line[6:].strip().strip('"')
            elif line.startswith("msgstr ") and current_msgid is not None:
                msgstr = line[7:].strip().strip('"')
                if current_msgid:
                    catalog[current_msgid] = msgstr or current_msgid
                current_msgid = None
    return catalog


def setup_i18n() -> None:
    """
    Initialize the internationalization system by loading translations.

    Raises:
        FileNotFoundError: If the locales directory is not found.
    """
    if not os.path.exists(LOCALES_PATH):
        raise FileNotFoundError(f"Locales directory not found: {LOCALES_PATH}")

    for lang in settings.SUPPORTED_LANGUAGES:
        _translations[lang] = gettext.translation(
            domain="messages",
            localedir=LOCALES_PATH,
            languages=[lang],
            fallback=True,
        )

        po_path = os.path.join(LOCALES_PATH, lang, "LC_MESSAGES", "messages.po")
        catalog: Dict[str, str] = {}
        if os.path.exists(po_path):
            try:
                catalog = _parse_po_file(po_path)
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("i18n_po_parse_failed", lang=lang, error=str(exc))

        _fallback_catalogs[lang] = catalog
        logger.debug("i18n_initialized", language=lang, entries=len(catalog))

    logger.info("i18n_setup_complete", default_locale=settings.DEFAULT_LANGUAGE)


def get_translated_message(key: str, locale: str = settings.DEFAULT_LANGUAGE) -> str:
    """
    Retrieve a translated message for the given key and locale.

    Unsupported locales fall back to the default language; unknown keys
    fall back to the key itself.

    Args:
        key: The message key to translate.
        locale: The target language code (defaults to DEFAULT_LANGUAGE).

    Returns:
        The translated message or the original key if translation fails.
    """
    if locale not in _translations:
        locale = settings.DEFAULT_LANGUAGE

    translation = _translations.get(locale)
    if not translation:  # setup_i18n has not run
        logger.error("translation_missing_for_locale", locale=locale)
        return key

    translated = translation.gettext(key)
    if translated == key:
        translated = _fallback_catalogs.get(locale, {}).get(key, key)
        if translated == key:
            logger.warning("translation_key_not_found", key=key, locale=locale)

    return translated


def get_request_language(request: Request) -> str:
    """
    Determine the preferred language from a request.

    Checks the `lang` query parameter, then the Accept-Language header, then
    falls back to the default language.

    Args:
        request: The FastAPI request object.

    Returns:
        A supported language code.
    """
    lang = request.query_params.get("lang")
    if lang and lang in settings.SUPPORTED_LANGUAGES:
        return lang

    accept_language = request.headers.get("Accept-Language", settings.DEFAULT_LANGUAGE)
    for lang in accept_language.split(","):
        lang = lang.split(";")[0].strip().split("-")[0]
        if lang in settings.SUPPORTED_LANGUAGES:
            return lang

    return settings.DEFAULT_LANGUAGE
