"""Language Selector - combo box listing the supported languages."""

from typing import Iterable

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QComboBox

from gemini_translator.core import LANGUAGES, Language


class LanguageSelector(QComboBox):
    """Combo box of languages that reports selections by language code."""

    language_changed = Signal(str)

    def __init__(self, languages: Iterable[Language] = LANGUAGES):
        super().__init__()
        for language in languages:
            self.addItem(language.name, language.code)
        self.currentIndexChanged.connect(self._on_index_changed)

    def current_code(self) -> str:
        return self.currentData()

    def set_current_code(self, code: str) -> None:
        """Select ``code`` without emitting language_changed."""
        index = self.findData(code)
        if index < 0 or index == self.currentIndex():
            return
        self.blockSignals(True)
        self.setCurrentIndex(index)
        self.blockSignals(False)

    def _on_index_changed(self, index: int) -> None:
        if index >= 0:
            self.language_changed.emit(self.itemData(index))
