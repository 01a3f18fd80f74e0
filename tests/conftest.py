"""Shared test setup."""

import os

# Widgets need a platform plugin; tests run without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication


def ensure_qt_app():
    if QApplication.instance() is None:
        QApplication([])
    return QApplication.instance()


@pytest.fixture(scope="session")
def qt_app():
    """Provide the process-wide QApplication."""
    return ensure_qt_app()
