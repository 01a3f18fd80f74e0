"""Domain layer - languages, requests and session state."""

from .language import (
    DEFAULT_SOURCE_LANGUAGE,
    DEFAULT_TARGET_LANGUAGE,
    LANGUAGES,
    Language,
    find_language,
    get_language_name,
)
from .session_state import SessionState, SessionStatus
from .translation_request import TranslationRequest

__all__ = [
    "Language",
    "LANGUAGES",
    "DEFAULT_SOURCE_LANGUAGE",
    "DEFAULT_TARGET_LANGUAGE",
    "find_language",
    "get_language_name",
    "SessionState",
    "SessionStatus",
    "TranslationRequest",
]
