from __future__ import annotations

"""
Internationalization (i18n) Utility.

Singleton manager for the launcher's user-facing texts. Looks keys up
with dot-notation in nested JSON locale files and interpolates named
variables. Unknown keys resolve to themselves so a missing translation
never breaks a launch.
"""

import json
import logging
import os
from typing import Any, Dict

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
LOCALES_REL_PATH = os.path.join("..", "interface", "locales")


class I18n:
    """Resource manager for locale-specific string translations."""

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self._locale = locale
        self._translations: Dict[str, Any] = {}
        self.is_loaded = False

        base_dir = os.path.dirname(os.path.abspath(__file__))
        self._locales_path = os.path.abspath(os.path.join(base_dir, LOCALES_REL_PATH))

        self.load_locale(locale)

    @property
    def locale(self) -> str:
        return self._locale

    def load_locale(self, locale: str) -> bool:
        """
        Load a translation dictionary from the locale repository.

        The current translations stay active if the requested locale is
        missing or unreadable.

        Args:
            locale: ISO identifier for the target language.

        Returns:
            bool: True if the locale was loaded.
        """
        file_path = os.path.join(self._locales_path, f"{locale}.json")

        if not os.path.exists(file_path):
            logger.warning(f"I18n: Locale resource missing at '{file_path}'.")
            return False

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"I18n: Corruption in locale file {file_path}: {e}")
            return False

        self._translations = data if isinstance(data, dict) else {}
        self._locale = locale
        self.is_loaded = bool(self._translations)
        logger.debug(f"I18n: Loaded locale dictionary: {locale}")
        return self.is_loaded

    def t(self, key: str, **kwargs: Any) -> str:
        """
        Resolve and format a translation string using dot-notation.

        Args:
            key: Hierarchical identifier path (e.g., 'launcher.errors.no_runtime').
            **kwargs: Dynamic variables for string formatting.

        Returns:
            str: The translated string, or the key itself if unresolved.
        """
        current_val: Any = self._translations
        for k in key.split("."):
            if not isinstance(current_val, dict):
                return key
            current_val = current_val.get(k)

        if not isinstance(current_val, str):
            return key

        try:
            return current_val.format(**kwargs) if kwargs else current_val
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: Formatting error for '{key}': {e}")
            return current_val


# Global singleton instance for application-wide resource access
i18n = I18n(DEFAULT_LOCALE)
