"""Coordinators - Orchestration layer connecting UI with business logic."""

from .translation_session_coordinator import TranslationSessionCoordinator

__all__ = [
    "TranslationSessionCoordinator",
]
