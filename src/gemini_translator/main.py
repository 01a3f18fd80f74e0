"""Main entry point for the translator application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from gemini_translator.coordinators import TranslationSessionCoordinator
from gemini_translator.services import GeminiTranslationService, SettingsManager
from gemini_translator.ui import MainWindow

logger = logging.getLogger(__name__)


def configure_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Gemini Translator")
    app.setOrganizationName("GeminiTranslator")

    # 2. Configuration and logging
    settings = SettingsManager()
    configure_logging(settings.get_log_level())
    if settings.get_gemini_api_key() is None:
        logger.warning("GEMINI_API_KEY is not set; translations will fail until it is configured")

    # 3. Services
    translation_service = GeminiTranslationService.from_settings(settings)

    # 4. Coordinator (Dependency Injection)
    coordinator = TranslationSessionCoordinator(
        translation_service=translation_service,
        clipboard=app.clipboard(),
    )

    # 5. Construct UI and wire it to the coordinator
    main_window = MainWindow()
    main_window.set_coordinator(coordinator)

    # 6. Show UI and start event loop
    main_window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
