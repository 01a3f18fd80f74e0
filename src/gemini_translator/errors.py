"""Exception types raised by the translator."""


class TranslatorError(Exception):
    """Base class for translator failures."""


class ConfigurationError(TranslatorError):
    """Raised when a required setting (the API key) is missing."""


class TranslationError(TranslatorError):
    """Raised when the translation API call fails or returns nothing usable."""
