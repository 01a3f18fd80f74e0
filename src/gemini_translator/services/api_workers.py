"""Async workers for non-blocking API calls using Qt threading."""

import logging

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from gemini_translator.core import TranslationRequest
from gemini_translator.errors import TranslatorError
from gemini_translator.services.translation import TranslationService

logger = logging.getLogger(__name__)


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(str)
    translation_result = Signal(str)


class TranslationWorker(QRunnable):
    """
    Worker that runs translation API call in a background thread.

    Uses Qt's thread pool for efficient thread management.
    Emits signals when translation completes or fails.
    """

    def __init__(
        self,
        translation_service: TranslationService,
        request: TranslationRequest,
    ):
        super().__init__()
        self.translation_service = translation_service
        self.request = request
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the translation API call in background thread."""
        try:
            result = self.translation_service.translate(
                text=self.request.text,
                source_code=self.request.source_code,
                target_code=self.request.target_code,
            )
            self.signals.translation_result.emit(result)
        except TranslatorError as e:
            self.signals.error.emit(str(e))
        except Exception as e:
            # Anything the service did not translate into a TranslatorError
            logger.exception("Unexpected translation error")
            self.signals.error.emit(f"Unexpected translation error: {str(e)}")
        finally:
            self.signals.finished.emit()
