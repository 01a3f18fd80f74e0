"""Session State - the view model of one interactive translation session."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .language import DEFAULT_SOURCE_LANGUAGE, DEFAULT_TARGET_LANGUAGE


class SessionStatus(Enum):
    """Coarse state of the session as seen by the translate workflow."""

    IDLE = "idle"
    TRANSLATING = "translating"
    ERROR = "error"


@dataclass
class SessionState:
    """
    Mutable state behind the translator window.

    The coordinator owns the live instance and publishes copies of it, so
    widgets never mutate it directly.
    """

    source_language_code: str = DEFAULT_SOURCE_LANGUAGE
    target_language_code: str = DEFAULT_TARGET_LANGUAGE
    source_text: str = ""
    translated_text: str = ""
    is_translating: bool = False
    last_error: Optional[str] = None
    is_copied: bool = False

    @property
    def status(self) -> SessionStatus:
        if self.is_translating:
            return SessionStatus.TRANSLATING
        if self.last_error:
            return SessionStatus.ERROR
        return SessionStatus.IDLE

    @property
    def can_translate(self) -> bool:
        """True when the translate button should be enabled."""
        return not self.is_translating and bool(self.source_text.strip())

    @property
    def can_clear(self) -> bool:
        return bool(self.source_text)

    @property
    def can_copy(self) -> bool:
        return bool(self.translated_text)

    @property
    def source_char_count(self) -> int:
        return len(self.source_text)

    @property
    def translated_char_count(self) -> int:
        return len(self.translated_text)
