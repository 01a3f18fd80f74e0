"""Translation services - abstract interface and Gemini implementation."""

from gemini_translator.services.translation.translation_service import TranslationService
from gemini_translator.services.translation.gemini_translation_service import GeminiTranslationService

__all__ = [
    "TranslationService",
    "GeminiTranslationService",
]
