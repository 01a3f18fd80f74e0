"""Translation Text Panel - text area with its action button and character count."""

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)


class TranslationTextPanel(QWidget):
    """
    One side of the translator.

    The editable panel offers a Clear button, the read-only panel a Copy
    button. Either button is shown only while the panel has text.
    """

    text_edited = Signal(str)
    clear_clicked = Signal()
    copy_clicked = Signal()

    def __init__(self, placeholder: str, read_only: bool):
        super().__init__()
        self.read_only = read_only

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        header = QHBoxLayout()
        header.addStretch()
        self.action_button = QPushButton("Copy" if read_only else "Clear")
        self.action_button.setMaximumHeight(28)
        self.action_button.setVisible(False)
        if read_only:
            self.action_button.clicked.connect(self.copy_clicked.emit)
        else:
            self.action_button.clicked.connect(self.clear_clicked.emit)
        header.addWidget(self.action_button)
        layout.addLayout(header)

        self.text_edit = QTextEdit()
        self.text_edit.setAcceptRichText(False)
        self.text_edit.setReadOnly(read_only)
        self.text_edit.setPlaceholderText(placeholder)
        self.text_edit.setMinimumHeight(200)
        self.text_edit.textChanged.connect(self._on_text_changed)
        layout.addWidget(self.text_edit, 1)

        self.loading_label = QLabel("Translating...")
        self.loading_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.loading_label.setStyleSheet("color: gray;")
        self.loading_label.setVisible(False)
        layout.addWidget(self.loading_label)

        self.count_label = QLabel("0 characters")
        self.count_label.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.count_label.setStyleSheet("color: gray; font-size: 11px;")
        layout.addWidget(self.count_label)

    def text(self) -> str:
        return self.text_edit.toPlainText()

    def set_text(self, text: str) -> None:
        """Replace the text without echoing it back through text_edited."""
        if text != self.text():
            self.text_edit.blockSignals(True)
            self.text_edit.setPlainText(text)
            self.text_edit.blockSignals(False)

    def set_action_visible(self, visible: bool) -> None:
        self.action_button.setVisible(visible)

    def set_char_count(self, count: int) -> None:
        self.count_label.setText(f"{count} characters")

    def set_loading(self, loading: bool) -> None:
        self.loading_label.setVisible(loading)

    def set_copied(self, copied: bool) -> None:
        if self.read_only:
            self.action_button.setText("Copied!" if copied else "Copy")

    def _on_text_changed(self) -> None:
        text = self.text()
        self.set_action_visible(bool(text))
        self.text_edited.emit(text)
