"""Translation of the labels printed on slips and statements.

Rendering code wraps its fixed words (``Balance``, ``Activity``, the
transaction labels, the month abbreviations) in ``_()``. The English words
are the msgids; catalogues live in
``locales/<language>/LC_MESSAGES/messages.mo`` next to this module, with the
``.po`` source beside them. French is shipped.
"""

import gettext
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

LOCALE_DIR = Path(__file__).parent / "locales"
DOMAIN = "messages"
SOURCE_LANGUAGE = "en"

_translation: gettext.NullTranslations = gettext.NullTranslations()
_language = SOURCE_LANGUAGE


def available_languages() -> tuple[str, ...]:
    """Return the languages with a compiled catalogue, plus English."""
    compiled = sorted(
        path.parent.parent.name
        for path in LOCALE_DIR.glob(f"*/LC_MESSAGES/{DOMAIN}.mo")
    )
    return (SOURCE_LANGUAGE, *compiled)


def setup_i18n(language: str) -> bool:
    """Install the catalogue of *language* for every later ``_()`` call.

    Returns:
        False when no catalogue exists for *language*, in which case the
        English source strings are used.
    """
    global _translation, _language  # pylint: disable=global-statement
    _translation = gettext.translation(
        DOMAIN,
        localedir=str(LOCALE_DIR),
        languages=[language],
        fallback=True,
    )
    found = isinstance(_translation, gettext.GNUTranslations)
    _language = language if found else SOURCE_LANGUAGE
    if not found and language != SOURCE_LANGUAGE:
        logger.warning("No %r catalogue, rendering in English", language)
    return found


def active_language() -> str:
    """Return the language ``_()`` currently translates to."""
    return _language


def _(message: str) -> str:
    """Return the translated string for *message*."""
    return _translation.gettext(message)
