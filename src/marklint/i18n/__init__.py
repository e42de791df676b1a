"""Localizable diagnostic messages."""

from .locales import LOCALES
from .translator import LocaleSet, Phrase, Translator, capitalize


def get_translator(locale: str = "en") -> Translator:
    """Create a translator for a locale, falling back to English."""
    return Translator(LOCALES.get(locale, LOCALES["en"]))


__all__ = [
    "LOCALES",
    "LocaleSet",
    "Phrase",
    "Translator",
    "capitalize",
    "get_translator",
]
