"""Parsing and display helpers for SupportedLanguage."""

from core.exceptions import UnsupportedLanguageError
from models import SupportedLanguage


def parse_language(text: str | None) -> SupportedLanguage:
    """
    Parse a language name into a SupportedLanguage enum value.

    Matching is case-insensitive and ignores surrounding whitespace, so
    "rust", "RUST" and " Rust " all yield SupportedLanguage.RUST.

    Args:
        text: The language name to parse.

    Returns:
        SupportedLanguage: The matching enum value.

    Raises:
        UnsupportedLanguageError: If no text is given or it doesn't match any
            supported language.
    """
    if not text:
        raise UnsupportedLanguageError(text, message="No language provided")

    normalized = text.strip().lower()
    for lang in SupportedLanguage:
        if str(lang).lower() == normalized:
            return lang
    raise UnsupportedLanguageError(text)


def display_name(language: SupportedLanguage) -> str:
    """Canonical capitalized name of the language, e.g. "Rust"."""
    return str(language)
