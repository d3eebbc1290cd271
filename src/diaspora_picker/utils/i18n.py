from __future__ import annotations

"""
Internationalization (i18n) Utility.

Singleton translation manager shared by the CLI and the GUI. Locale files
are nested JSON documents under interface/locales and are addressed with
dot-notation keys ('gui.sidebar.expertise'). Unknown keys resolve to the
provided default or to the key itself.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# SYSTEM DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_LOCALE = "en"
LOCALES_REL_PATH = os.path.join("..", "interface", "locales")


# -----------------------------------------------------------------------------
# I18N MANAGER SERVICE
# -----------------------------------------------------------------------------

class I18n:
    """
    Resource manager for locale-specific string translations.

    Args:
        locale: ISO locale identifier (e.g. 'en', 'es').
        locales_path: Optional override of the locale directory (tests).
    """

    def __init__(self, locale: str = DEFAULT_LOCALE, locales_path: Optional[str] = None):
        self._locale = locale
        self._translations: Dict[str, Any] = {}
        self.is_loaded = False

        if locales_path is None:
            base_dir = os.path.dirname(os.path.abspath(__file__))
            locales_path = os.path.join(base_dir, LOCALES_REL_PATH)
        self._locales_path = os.path.abspath(locales_path)

        self.load_locale(locale)

    @property
    def locale(self) -> str:
        return self._locale

    def available_locales(self) -> List[str]:
        """Locale identifiers that have a resource file."""
        if not os.path.isdir(self._locales_path):
            return []
        return sorted(
            os.path.splitext(name)[0]
            for name in os.listdir(self._locales_path)
            if name.endswith(".json")
        )

    def load_locale(self, locale: str) -> bool:
        """
        Load a translation dictionary from the filesystem.

        Returns:
            bool: True if the locale was loaded. On failure the previously
                  active translations are kept.
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

        self._translations = translations
        self._locale = locale
        self.is_loaded = True
        logger.debug(f"I18n: Loaded locale dictionary: {locale}")
        return True

    def t(self, key: str, default: Optional[str] = None, **kwargs: Any) -> str:
        """
        Resolve and format a translation string using dot-notation.

        Args:
            key: Hierarchical identifier path (e.g. 'gui.buttons.save').
            default: Text used when the key is missing.
            **kwargs: Variables for str.format interpolation.

        Returns:
            str: The translated string, the default, or the key itself.
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
            logger.debug(f"I18n: Formatting error for path '{key}': {e}")
            return current_val


# -----------------------------------------------------------------------------
# SERVICE INITIALIZATION
# -----------------------------------------------------------------------------

i18n = I18n(DEFAULT_LOCALE)
