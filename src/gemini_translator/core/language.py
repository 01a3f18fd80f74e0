"""Language entity and the static table of supported languages."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Language:
    """A selectable language: an ISO-639-1 style code and its display name."""

    code: str
    name: str


# Order is the order shown in the language selectors.
LANGUAGES: tuple[Language, ...] = (
    Language("en", "English"),
    Language("es", "Spanish"),
    Language("fr", "French"),
    Language("de", "German"),
    Language("it", "Italian"),
    Language("pt", "Portuguese"),
    Language("nl", "Dutch"),
    Language("ru", "Russian"),
    Language("pl", "Polish"),
    Language("uk", "Ukrainian"),
    Language("tr", "Turkish"),
    Language("ar", "Arabic"),
    Language("hi", "Hindi"),
    Language("bn", "Bengali"),
    Language("zh", "Chinese (Simplified)"),
    Language("ja", "Japanese"),
    Language("ko", "Korean"),
    Language("vi", "Vietnamese"),
    Language("th", "Thai"),
    Language("id", "Indonesian"),
    Language("sv", "Swedish"),
    Language("el", "Greek"),
    Language("he", "Hebrew"),
)

DEFAULT_SOURCE_LANGUAGE = "en"
DEFAULT_TARGET_LANGUAGE = "es"


def find_language(code: str) -> Optional[Language]:
    """Return the table entry for ``code``, or None if it is not listed."""
    for language in LANGUAGES:
        if language.code == code:
            return language
    return None


def get_language_name(code: str) -> str:
    """
    Resolve a language code to its display name.

    Unknown codes are returned unchanged so callers can still build a prompt.
    """
    language = find_language(code)
    return language.name if language else code
