from __future__ import annotations

"""
Internationalization (i18n) Utility.

Provides a centralized singleton manager for user-facing strings. Implements
dot-notation lookup for nested JSON locale files and variable interpolation
for the shell menu, status lines and CLI help.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

from treeshell.domain.constants import DEFAULT_LOCALE

logger = logging.getLogger(__name__)

LOCALES_REL_PATH = os.path.join("..", "interface", "locales")

# -----------------------------------------------------------------------------
# I18N MANAGER SERVICE
# -----------------------------------------------------------------------------

class I18n:
    """
    Resource manager for locale-specific string translations.

    Loads JSON resource files from the locale repository and resolves
    dot-notation keys, falling back to the key itself when missing.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE):
        """
        Initialize the manager and attempt to load the requested locale.

        Args:
            locale: ISO locale identifier (e.g., 'en', 'es').
        """
        self._locale = locale
        self._translations: Dict[str, Any] = {}
        self.is_loaded = False

        base_dir = os.path.dirname(os.path.abspath(__file__))
        self._locales_path = os.path.abspath(os.path.join(base_dir, LOCALES_REL_PATH))

        self.load_locale(locale)

    @property
    def locale(self) -> str:
        return self._locale

    def available_locales(self) -> List[str]:
        """Return the sorted codes of every locale file shipped with the package."""
        try:
            names = os.listdir(self._locales_path)
        except OSError:
            return []
        return sorted(n[:-len(".json")] for n in names if n.endswith(".json"))

    def load_locale(self, locale: str) -> bool:
        """
        Load a translation dictionary from the locale repository.

        On failure the previously loaded dictionary stays active.

        Args:
            locale: ISO identifier for the target language.

        Returns:
            bool: True if the locale was switched.
        """
        file_path = os.path.join(self._locales_path, f"{locale}.json")

        if not os.path.exists(file_path):
            logger.warning(f"I18n: Locale resource missing at '{file_path}'. Keeping '{self._locale}'.")
            return False

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                translations = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"I18n: Corruption in locale file {file_path}: {e}")
            return False

        if not isinstance(translations, dict):
            logger.error(f"I18n: Locale file {file_path} is not a JSON object")
            return False

        self._translations = translations
        self._locale = locale
        self.is_loaded = True
        logger.debug(f"I18n: Loaded locale dictionary: {locale}")
        return True

    def t(self, key: str, default: Optional[str] = None, **kwargs: Any) -> str:
        """
        Resolve and format a translation string using dot-notation.

        Args:
            key: Hierarchical identifier path (e.g., 'menu.commands.mkdir').
            default: Text used when the key is missing from the locale.
            **kwargs: Dynamic variables for string formatting.

        Returns:
            str: The translated and formatted string. Falls back to 'default'
                 or to the key itself if resolution fails.
        """
        current_val: Any = self._translations
        for k in key.split("."):
            if not isinstance(current_val, dict):
                current_val = None
                break
            current_val = current_val.get(k)

        if not isinstance(current_val, str):
            current_val = default if default is not None else key

        if not kwargs:
            return current_val
        try:
            return current_val.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: Interpolation error for path '{key}': {e}")
            return current_val

# -----------------------------------------------------------------------------
# SERVICE INITIALIZATION
# -----------------------------------------------------------------------------

# Global singleton instance for application-wide resource access
i18n = I18n(DEFAULT_LOCALE)
