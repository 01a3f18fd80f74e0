"""Services layer - configuration, translation and background workers."""

from gemini_translator.services.settings_manager import SettingsManager

# Translation services
from gemini_translator.services.translation import TranslationService, GeminiTranslationService

from gemini_translator.services.api_workers import TranslationWorker, WorkerSignals

__all__ = [
	"SettingsManager",
	"TranslationService",
	"GeminiTranslationService",
	"TranslationWorker",
	"WorkerSignals",
]
