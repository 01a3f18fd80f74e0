"""Gemini Translation Service - Implements translation via Google Gemini API."""

import logging
from typing import Optional

import google.genai as genai
from google.genai import types

from gemini_translator.core import get_language_name
from gemini_translator.errors import ConfigurationError, TranslationError
from gemini_translator.services.settings_manager import DEFAULT_MODEL_NAME, DEFAULT_TIMEOUT_MS
from gemini_translator.services.translation.translation_service import TranslationService

logger = logging.getLogger(__name__)


class GeminiTranslationService(TranslationService):
    """
    Translation service using Google Gemini API.

    One request per call, no retries. Uses the google.genai package.
    """

    TRANSLATION_PROMPT = """You are an expert translator. Translate the following text from {source_name} to {target_name}. Do not add any commentary, explanations, or quotes around the translation. Respond ONLY with the translated text.

Text to translate:
"{text}"
"""

    FAILURE_MESSAGE = "Failed to translate text. The API call returned an error."

    def __init__(
        self,
        api_key: Optional[str],
        model_name: str = DEFAULT_MODEL_NAME,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
    ):
        self._api_key = api_key
        self.model_name = model_name
        self.timeout_ms = timeout_ms

    @classmethod
    def from_settings(cls, settings_manager) -> "GeminiTranslationService":
        """Build a service from the API key, model and timeout in settings."""
        return cls(
            api_key=settings_manager.get_gemini_api_key(),
            model_name=settings_manager.get_model_name(),
            timeout_ms=settings_manager.get_request_timeout_ms(),
        )

    def build_prompt(self, text: str, source_code: str, target_code: str) -> str:
        """Compose the instruction prompt, using display names where known."""
        return self.TRANSLATION_PROMPT.format(
            source_name=get_language_name(source_code),
            target_name=get_language_name(target_code),
            text=text,
        )

    def translate(self, text: str, source_code: str, target_code: str) -> str:
        """
        Translate text using Gemini API.

        Args:
            text: Text to translate.
            source_code: Source language code.
            target_code: Target language code.

        Returns:
            Trimmed response text, or "" for blank input.
        """
        if not self._api_key:
            raise ConfigurationError(
                "API key not found. Please set the GEMINI_API_KEY environment variable."
            )

        if not text.strip():
            return ""

        prompt = self.build_prompt(text, source_code, target_code)
        logger.debug(
            "Translating %d chars %s->%s with %s",
            len(text), source_code, target_code, self.model_name,
        )

        try:
            client = genai.Client(
                api_key=self._api_key,
                http_options=types.HttpOptions(timeout=self.timeout_ms),
            )
            response = client.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=types.GenerateContentConfig(temperature=0.3),
            )
            translated = response.text
        except Exception as e:
            logger.error("Gemini API call failed: %s", e, exc_info=True)
            raise TranslationError(self.FAILURE_MESSAGE) from e

        if translated is None:
            logger.error("Gemini API returned a response without text")
            raise TranslationError(self.FAILURE_MESSAGE)

        return translated.strip()
