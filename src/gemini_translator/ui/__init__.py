"""UI layer - PySide6 presentation components."""

from .language_selector import LanguageSelector
from .main_window import MainWindow
from .translation_text_panel import TranslationTextPanel

__all__ = ["MainWindow", "LanguageSelector", "TranslationTextPanel"]
