#!/usr/bin/env python3
"""
Tests for MainWindow and its panels - validates rendering and signal wiring.
"""

from unittest.mock import MagicMock

import pytest

from gemini_translator.coordinators import TranslationSessionCoordinator
from gemini_translator.core import LANGUAGES, SessionState
from gemini_translator.ui import LanguageSelector, MainWindow, TranslationTextPanel


class ImmediateThreadPool:
    def start(self, worker):
        worker.run()


@pytest.fixture
def window(qt_app):
    return MainWindow()


@pytest.fixture
def wired(qt_app):
    service = MagicMock()
    service.translate = MagicMock(return_value="Hola")
    coordinator = TranslationSessionCoordinator(
        translation_service=service,
        thread_pool=ImmediateThreadPool(),
        clipboard=MagicMock(),
    )
    window = MainWindow()
    window.set_coordinator(coordinator)
    return window, coordinator, service


def test_language_selector_lists_table_in_order(qt_app):
    selector = LanguageSelector()
    assert selector.count() == len(LANGUAGES)
    assert selector.itemText(0) == LANGUAGES[0].name
    assert selector.itemData(0) == LANGUAGES[0].code


def test_language_selector_emits_code(qt_app):
    selector = LanguageSelector()
    spy = MagicMock()
    selector.language_changed.connect(spy)

    selector.setCurrentIndex(selector.findData("ja"))

    spy.assert_called_once_with("ja")


def test_language_selector_programmatic_set_is_silent(qt_app):
    selector = LanguageSelector()
    spy = MagicMock()
    selector.language_changed.connect(spy)

    selector.set_current_code("fr")

    assert selector.current_code() == "fr"
    spy.assert_not_called()


def test_text_panel_counts_characters_and_shows_action(qt_app):
    panel = TranslationTextPanel("placeholder", read_only=True)
    assert panel.action_button.isHidden()

    panel.set_text("Hola")
    panel.set_char_count(4)
    panel.set_action_visible(True)

    assert panel.count_label.text() == "4 characters"
    assert not panel.action_button.isHidden()


def test_text_panel_copied_label(qt_app):
    panel = TranslationTextPanel("placeholder", read_only=True)
    panel.set_copied(True)
    assert panel.action_button.text() == "Copied!"
    panel.set_copied(False)
    assert panel.action_button.text() == "Copy"


def test_render_state_loading_disables_translate(window):
    window.render_state(SessionState(source_text="Hello", is_translating=True))

    assert not window.translate_button.isEnabled()
    assert window.translate_button.text() == "Translating..."
    assert not window.target_panel.loading_label.isHidden()


def test_render_state_blank_source_disables_translate(window):
    window.render_state(SessionState(source_text="  "))
    assert not window.translate_button.isEnabled()


def test_render_state_shows_error_banner(window):
    window.render_state(SessionState(last_error="Something went wrong"))

    assert not window.error_label.isHidden()
    assert window.error_label.text() == "Something went wrong"


def test_typing_updates_coordinator(wired):
    window, coordinator, _ = wired

    window.source_panel.text_edit.setPlainText("Hello")

    assert coordinator.state.source_text == "Hello"
    assert window.translate_button.isEnabled()


def test_translate_button_translates(wired):
    window, coordinator, service = wired
    window.source_panel.text_edit.setPlainText("Hello")

    window.translate_button.click()

    service.translate.assert_called_once_with(text="Hello", source_code="en", target_code="es")
    assert window.target_panel.text() == "Hola"
    assert window.target_panel.count_label.text() == "4 characters"


def test_swap_button_swaps_selectors_and_panels(wired):
    window, coordinator, _ = wired
    window.source_panel.text_edit.setPlainText("Hello")
    window.translate_button.click()

    window.swap_button.click()

    assert window.source_selector.current_code() == "es"
    assert window.target_selector.current_code() == "en"
    assert window.source_panel.text() == "Hola"
    assert window.target_panel.text() == "Hello"


def test_clear_button_clears_both_panels(wired):
    window, coordinator, _ = wired
    window.source_panel.text_edit.setPlainText("Hello")
    window.translate_button.click()

    window.source_panel.action_button.click()

    assert window.source_panel.text() == ""
    assert window.target_panel.text() == ""
    assert coordinator.state.source_text == ""


def test_selector_change_updates_coordinator(wired):
    window, coordinator, _ = wired

    window.target_selector.setCurrentIndex(window.target_selector.findData("de"))

    assert coordinator.state.target_language_code == "de"


def test_render_state_shows_character_counts(window):
    window.render_state(SessionState(source_text="Hello", translated_text="¡Hola!"))

    assert window.source_panel.count_label.text() == "5 characters"
    assert window.target_panel.count_label.text() == "6 characters"


def test_typing_updates_source_character_count(wired):
    window, _, _ = wired

    window.source_panel.text_edit.setPlainText("Hello there")

    assert window.source_panel.count_label.text() == "11 characters"


def test_render_state_action_buttons_follow_state(window):
    window.render_state(SessionState(source_text="", translated_text="Hola"))

    assert window.source_panel.action_button.isHidden()
    assert not window.target_panel.action_button.isHidden()

    window.render_state(SessionState(source_text="Hello", translated_text=""))

    assert not window.source_panel.action_button.isHidden()
    assert window.target_panel.action_button.isHidden()
