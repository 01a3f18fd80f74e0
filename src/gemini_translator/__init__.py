"""
Gemini Translator - a desktop language translator backed by Google Gemini.

Pick a source and target language, enter text, and get the translation
in a side-by-side panel.
"""

__version__ = "0.1.0"

from gemini_translator.core import LANGUAGES, Language, SessionState
from gemini_translator.errors import ConfigurationError, TranslationError, TranslatorError

__all__ = [
    "Language",
    "LANGUAGES",
    "SessionState",
    "TranslatorError",
    "ConfigurationError",
    "TranslationError",
]
