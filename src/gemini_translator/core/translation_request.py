"""Translation Request - the value handed to a worker for one translate action."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TranslationRequest:
    """Text plus the language pair it should be translated between."""

    text: str
    source_code: str
    target_code: str
