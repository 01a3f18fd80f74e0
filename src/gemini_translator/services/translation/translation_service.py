"""Translation Service - abstract interface for text translation."""

from abc import ABC, abstractmethod


class TranslationService(ABC):
    """
    Abstract service for translating text between two languages.

    Implementations (e.g., GeminiTranslationService) handle API calls.
    """

    @abstractmethod
    def translate(self, text: str, source_code: str, target_code: str) -> str:
        """
        Translate text from one language to another.

        Args:
            text: Text to translate. Blank text yields an empty string.
            source_code: Language code of the text (e.g. "en").
            target_code: Language code to translate into.

        Returns:
            The translated text, stripped of surrounding whitespace.

        Raises:
            ConfigurationError: The service has no API key.
            TranslationError: The API call failed.
        """
        pass
