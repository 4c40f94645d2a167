from __future__ import annotations

"""
Internationalization (i18n) Utility.

Provides a module-level catalogue of user-facing CLI strings. Keys use
dot-notation over nested JSON locale files; a key missing from the active
locale falls back to English, then to the supplied default, then to the key
itself.
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
LOCALES_DIR = os.path.abspath(
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "interface", "locales")
)

# -----------------------------------------------------------------------------
# I18N MANAGER SERVICE
# -----------------------------------------------------------------------------

class I18n:
    """
    Resource manager for locale-specific string translations.

    Attributes:
        locale: ISO identifier of the active catalogue.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE, locales_dir: str = LOCALES_DIR):
        self._locales_dir = locales_dir
        self._fallback = self._read_catalogue(DEFAULT_LOCALE)
        self._translations: Dict[str, Any] = {}
        self.locale = DEFAULT_LOCALE
        self.set_locale(locale)

    def available_locales(self) -> List[str]:
        """List the locale identifiers shipped in the locales directory."""
        if not os.path.isdir(self._locales_dir):
            return []
        return sorted(
            os.path.splitext(name)[0]
            for name in os.listdir(self._locales_dir)
            if name.endswith(".json")
        )

    def set_locale(self, locale: str) -> bool:
        """
        Activate a locale catalogue.

        Returns:
            bool: False if the catalogue is missing or unreadable (the
                  English catalogue stays active).
        """
        locale = (locale or DEFAULT_LOCALE).strip().lower()
        if locale == DEFAULT_LOCALE:
            self._translations = self._fallback
            self.locale = DEFAULT_LOCALE
            return bool(self._fallback)

        catalogue = self._read_catalogue(locale)
        if not catalogue:
            self._translations = self._fallback
            self.locale = DEFAULT_LOCALE
            return False

        self._translations = catalogue
        self.locale = locale
        return True

    def t(self, key: str, default: Optional[str] = None, **kwargs: Any) -> str:
        """
        Resolve and format a translation string.

        Args:
            key: Hierarchical identifier path (e.g., 'cli.status.success').
            default: Text used when no catalogue defines the key.
            **kwargs: Variables interpolated with str.format.

        Returns:
            str: The translated and formatted string.
        """
        template = _lookup(self._translations, key)
        if template is None:
            template = _lookup(self._fallback, key)
        if template is None:
            template = default if default is not None else key

        if not kwargs:
            return template
        try:
            return template.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: Formatting error for '{key}': {e}")
            return template

    def _read_catalogue(self, locale: str) -> Dict[str, Any]:
        path = os.path.join(self._locales_dir, f"{locale}.json")
        if not os.path.exists(path):
            logger.debug(f"I18n: Locale resource missing at '{path}'.")
            return {}
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"I18n: Corruption in locale file {path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}


def _lookup(catalogue: Dict[str, Any], key: str) -> Optional[str]:
    current: Any = catalogue
    for part in key.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(part)
    return current if isinstance(current, str) else None

# -----------------------------------------------------------------------------
# SERVICE INITIALIZATION
# -----------------------------------------------------------------------------

# Shared catalogue for the CLI layer
i18n = I18n(DEFAULT_LOCALE)
