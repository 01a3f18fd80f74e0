"""Settings Manager - Handles API key, model and logging configuration."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_MODEL_NAME = "gemini-2.5-flash"
DEFAULT_TIMEOUT_MS = 30_000
DEFAULT_LOG_LEVEL = "INFO"


class SettingsManager:
    """
    Manages settings and API key configuration.

    Values come from the process environment, seeded from a .env file in the
    project root.
    """

    API_KEY_VARS = ("GEMINI_API_KEY", "API_KEY")

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_gemini_api_key(self) -> Optional[str]:
        """Get the Gemini API key from environment (GEMINI_API_KEY, then API_KEY)."""
        for var in self.API_KEY_VARS:
            key = os.getenv(var)
            if key and key.strip():
                return key.strip()
        return None

    def get_model_name(self) -> str:
        model = os.getenv("GEMINI_MODEL", "").strip()
        return model or DEFAULT_MODEL_NAME

    def get_request_timeout_ms(self) -> int:
        """Request timeout for the Gemini client, in milliseconds."""
        raw = os.getenv("GEMINI_TIMEOUT_MS", "").strip()
        if not raw:
            return DEFAULT_TIMEOUT_MS
        try:
            timeout = int(raw)
        except ValueError:
            logger.warning("Ignoring invalid GEMINI_TIMEOUT_MS=%r", raw)
            return DEFAULT_TIMEOUT_MS
        if timeout <= 0:
            logger.warning("Ignoring non-positive GEMINI_TIMEOUT_MS=%r", raw)
            return DEFAULT_TIMEOUT_MS
        return timeout

    def get_log_level(self) -> int:
        """Logging level from TRANSLATOR_LOG_LEVEL (name such as DEBUG or INFO)."""
        name = os.getenv("TRANSLATOR_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)
