"""Translation Session Coordinator - Manages the translate workflow and session state."""

import dataclasses
import logging
from typing import Optional

from PySide6.QtCore import QObject, QThreadPool, QTimer, Signal, Slot
from PySide6.QtGui import QGuiApplication

from gemini_translator.core import SessionState, TranslationRequest
from gemini_translator.services import TranslationService, TranslationWorker, WorkerSignals

logger = logging.getLogger(__name__)


class TranslationSessionCoordinator(QObject):
    """
    Orchestrates one interactive translation session.

    Responsibilities:
    - Own the session state (languages, texts, in-flight flag, error, copy indicator).
    - Run translate requests through the service on a worker thread, one at a time.
    - Swap, clear and copy actions.
    - Publish a state snapshot after every change.
    """

    GENERIC_ERROR_MESSAGE = "An error occurred during translation. Please try again."
    COPY_RESET_MS = 2000

    state_changed = Signal(object)  # SessionState snapshot
    copied_changed = Signal(bool)

    translation_started = Signal()
    translation_completed = Signal(str)
    translation_failed = Signal(str)

    def __init__(
        self,
        translation_service: TranslationService,
        thread_pool: Optional[QThreadPool] = None,
        clipboard=None,
        initial_state: Optional[SessionState] = None,
        copy_reset_ms: int = COPY_RESET_MS,
    ):
        super().__init__()

        self.translation_service = translation_service
        self.state = initial_state if initial_state is not None else SessionState()

        # Thread pool for async API calls
        self.thread_pool = thread_pool if thread_pool is not None else QThreadPool.globalInstance()
        self._clipboard = clipboard

        self._copy_timer = QTimer(self)
        self._copy_timer.setSingleShot(True)
        self._copy_timer.setInterval(copy_reset_ms)
        self._copy_timer.timeout.connect(self._on_copy_timeout)

        # Keep the in-flight worker's signals alive until its result is delivered
        self._active_signals: Optional[WorkerSignals] = None

    def snapshot(self) -> SessionState:
        """Return a copy of the current state, safe to hand to widgets."""
        return dataclasses.replace(self.state)

    def set_source_language(self, code: str) -> None:
        if code == self.state.source_language_code:
            return
        self.state.source_language_code = code
        self._publish()

    def set_target_language(self, code: str) -> None:
        if code == self.state.target_language_code:
            return
        self.state.target_language_code = code
        self._publish()

    def set_source_text(self, text: str) -> None:
        """Update the source text. An in-flight translation keeps running."""
        if text == self.state.source_text:
            return
        self.state.source_text = text
        self._publish()

    def request_translation(self) -> None:
        """Translate the current source text unless a request is already in flight."""
        if self.state.is_translating:
            logger.debug("Translation already in flight; ignoring request")
            return

        if not self.state.source_text.strip():
            self._set_translated_text("")
            self._publish()
            return

        request = TranslationRequest(
            text=self.state.source_text,
            source_code=self.state.source_language_code,
            target_code=self.state.target_language_code,
        )

        self.state.is_translating = True
        self.state.last_error = None
        self._set_translated_text("")
        self._publish()
        self.translation_started.emit()

        logger.debug("Starting translation %s->%s", request.source_code, request.target_code)

        worker = TranslationWorker(
            translation_service=self.translation_service,
            request=request,
        )
        worker.signals.translation_result.connect(self._handle_translation_result)
        worker.signals.error.connect(self._handle_translation_error)
        worker.signals.finished.connect(self._on_worker_finished)
        self._active_signals = worker.signals

        self.thread_pool.start(worker)

    @Slot(str)
    def _handle_translation_result(self, text: str) -> None:
        """Handle translation result from worker thread (runs in main thread)."""
        self.state.is_translating = False
        self.state.last_error = None
        self._set_translated_text(text)
        self._publish()
        self.translation_completed.emit(text)

    @Slot(str)
    def _handle_translation_error(self, error: str) -> None:
        """Handle translation error from worker thread. The detail is logged, not shown."""
        logger.error("Translation failed: %s", error)
        self.state.is_translating = False
        self.state.last_error = self.GENERIC_ERROR_MESSAGE
        self._publish()
        self.translation_failed.emit(self.GENERIC_ERROR_MESSAGE)

    @Slot()
    def _on_worker_finished(self) -> None:
        self._active_signals = None

    def swap_languages(self) -> None:
        """Exchange languages and texts in a single update."""
        state = self.state
        state.source_language_code, state.target_language_code = (
            state.target_language_code,
            state.source_language_code,
        )
        source_text, translated_text = state.source_text, state.translated_text
        state.source_text = translated_text
        self._set_translated_text(source_text)
        self._publish()

    def clear_text(self) -> None:
        """Reset source text, translation and error, whatever the current state."""
        self.state.source_text = ""
        self.state.last_error = None
        self._set_translated_text("")
        self._publish()

    def copy_translation(self) -> None:
        """Copy the translation to the clipboard and show the copied indicator."""
        if not self.state.can_copy:
            return
        self._get_clipboard().setText(self.state.translated_text)
        self._copy_timer.start()
        if not self.state.is_copied:
            self.state.is_copied = True
            self.copied_changed.emit(True)
            self._publish()

    @Slot()
    def _on_copy_timeout(self) -> None:
        self._reset_copied()
        self._publish()

    def _set_translated_text(self, text: str) -> None:
        if text != self.state.translated_text:
            self._reset_copied()
        self.state.translated_text = text

    def _reset_copied(self) -> None:
        self._copy_timer.stop()
        if self.state.is_copied:
            self.state.is_copied = False
            self.copied_changed.emit(False)

    def _get_clipboard(self):
        if self._clipboard is None:
            self._clipboard = QGuiApplication.clipboard()
        return self._clipboard

    def _publish(self) -> None:
        self.state_changed.emit(self.snapshot())
