"""Main Window - the translator's single screen."""

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from gemini_translator.core import SessionState

from .language_selector import LanguageSelector
from .translation_text_panel import TranslationTextPanel


class MainWindow(QMainWindow):
    """Language selectors, source/target panels, error banner and translate button."""

    source_language_changed = Signal(str)
    target_language_changed = Signal(str)
    source_text_changed = Signal(str)
    swap_clicked = Signal()
    clear_clicked = Signal()
    copy_clicked = Signal()
    translate_clicked = Signal()

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Gemini Language Translator")
        self.setGeometry(100, 100, 960, 560)

        self._setup_ui()

    def _setup_ui(self):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QVBoxLayout(central_widget)
        main_layout.setContentsMargins(16, 16, 16, 16)
        main_layout.setSpacing(12)

        title = QLabel("Gemini Language Translator")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet("font-size: 22px; font-weight: bold;")
        main_layout.addWidget(title)

        selectors = QHBoxLayout()
        self.source_selector = LanguageSelector()
        self.source_selector.language_changed.connect(self.source_language_changed.emit)
        self.swap_button = QPushButton("⇄")
        self.swap_button.setToolTip("Swap languages")
        self.swap_button.setFixedWidth(40)
        self.swap_button.clicked.connect(self.swap_clicked.emit)
        self.target_selector = LanguageSelector()
        self.target_selector.language_changed.connect(self.target_language_changed.emit)
        selectors.addWidget(self.source_selector, 1)
        selectors.addWidget(self.swap_button)
        selectors.addWidget(self.target_selector, 1)
        main_layout.addLayout(selectors)

        panels = QHBoxLayout()
        self.source_panel = TranslationTextPanel("Enter text to translate...", read_only=False)
        self.source_panel.text_edited.connect(self.source_text_changed.emit)
        self.source_panel.clear_clicked.connect(self.clear_clicked.emit)
        self.target_panel = TranslationTextPanel("Translation will appear here...", read_only=True)
        self.target_panel.copy_clicked.connect(self.copy_clicked.emit)
        panels.addWidget(self.source_panel, 1)
        panels.addWidget(self.target_panel, 1)
        main_layout.addLayout(panels, 1)

        self.error_label = QLabel("")
        self.error_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(
            "color: #f87171; background-color: #7f1d1d; padding: 8px; border-radius: 6px;"
        )
        self.error_label.setVisible(False)
        main_layout.addWidget(self.error_label)

        self.translate_button = QPushButton("Translate")
        self.translate_button.setMinimumHeight(40)
        self.translate_button.setEnabled(False)
        self.translate_button.clicked.connect(self.translate_clicked.emit)
        main_layout.addWidget(self.translate_button, 0, Qt.AlignmentFlag.AlignHCenter)

    def set_coordinator(self, coordinator):
        """Inject the coordinator and wire UI signals to its slots.

        The coordinator is expected to expose:
        - set_source_language(str), set_target_language(str), set_source_text(str)
        - swap_languages(), clear_text(), copy_translation(), request_translation()
        - state_changed signal carrying a SessionState
        """
        self._coordinator = coordinator
        self.source_language_changed.connect(coordinator.set_source_language)
        self.target_language_changed.connect(coordinator.set_target_language)
        self.source_text_changed.connect(coordinator.set_source_text)
        self.swap_clicked.connect(coordinator.swap_languages)
        self.clear_clicked.connect(coordinator.clear_text)
        self.copy_clicked.connect(coordinator.copy_translation)
        self.translate_clicked.connect(coordinator.request_translation)
        coordinator.state_changed.connect(self.render_state)
        self.render_state(coordinator.snapshot())

    def render_state(self, state: SessionState) -> None:
        """Bring every widget in line with ``state``."""
        self.source_selector.set_current_code(state.source_language_code)
        self.target_selector.set_current_code(state.target_language_code)

        self.source_panel.set_text(state.source_text)
        self.source_panel.set_char_count(state.source_char_count)
        self.target_panel.set_text(state.translated_text)
        self.target_panel.set_char_count(state.translated_char_count)
        self.source_panel.set_action_visible(state.can_clear)
        self.target_panel.set_action_visible(state.can_copy)
        self.target_panel.set_loading(state.is_translating)
        self.target_panel.set_copied(state.is_copied)

        self.error_label.setText(state.last_error or "")
        self.error_label.setVisible(bool(state.last_error))

        self.translate_button.setEnabled(state.can_translate)
        self.translate_button.setText("Translating..." if state.is_translating else "Translate")
