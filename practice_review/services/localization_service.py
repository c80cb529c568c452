"""
LocalizationService - Display string lookup

Pattern: Singleton with language switching (same shape as a theme manager).
Only widgets read resolved strings; services and sessions pass keys around.
"""

import logging
from typing import Dict, Optional

from PyQt6.QtCore import QObject, QSettings, pyqtSignal

from ..config import Config
from ..core.records import normalize_section
from .translations import TRANSLATIONS

logger = logging.getLogger(__name__)


class LocalizationService(QObject):
    """
    Resolves localization keys for the current language

    Lookup order: current language, English, the caller's default, the key.

    Usage:
        i18n = get_localization_service()
        label.setText(i18n.resolve('practice.notes'))
        i18n.language_changed.connect(self._retranslate)
    """

    language_changed = pyqtSignal(str)

    def __init__(self, language: str = Config.DEFAULT_LANGUAGE, tables: Optional[Dict[str, Dict[str, str]]] = None, parent=None):
        super().__init__(parent)
        self._tables = tables if tables is not None else TRANSLATIONS
        self._language = language if language in self._tables else Config.DEFAULT_LANGUAGE

    @property
    def language(self) -> str:
        return self._language

    def available_languages(self):
        return [code for code in Config.SUPPORTED_LANGUAGES if code in self._tables]

    def set_language(self, language: str, persist: bool = False) -> bool:
        """
        Switch language

        Args:
            language: Language code ('en', 'vi')
            persist: Save as the user's preference

        Returns:
            True if the language changed
        """
        if language not in self._tables:
            logger.warning(f"Unsupported language: {language}")
            return False
        if language == self._language:
            return False

        self._language = language
        if persist:
            settings = QSettings(Config.APP_AUTHOR, Config.APP_NAME)
            settings.setValue("i18n/language", language)

        self.language_changed.emit(language)
        return True

    def resolve(self, key: str, default: Optional[str] = None, **kwargs) -> str:
        """
        Resolve a key to display text

        Args:
            key: Dotted localization key
            default: Text used when no table has the key
            **kwargs: str.format() arguments

        Returns:
            Display string (the key itself as last resort)
        """
        text = self._tables.get(self._language, {}).get(key)
        if text is None:
            text = self._tables.get(Config.DEFAULT_LANGUAGE, {}).get(key)
        if text is None:
            text = default if default is not None else key

        if kwargs:
            try:
                text = text.format(**kwargs)
            except (KeyError, IndexError, ValueError):
                logger.debug(f"Could not format '{key}' with {kwargs}")
        return text

    def section_label(self, section: str) -> str:
        """Display name of a section tag (the raw tag if unknown)"""
        key = section_label_key(section)
        if key is None:
            return section or ""
        return self.resolve(key)


def section_label_key(section: str) -> Optional[str]:
    """Localization key for a section tag, None for unknown tags"""
    return Config.SECTION_LABEL_KEYS.get(normalize_section(section))


# Singleton instance
_localization_service_instance: Optional[LocalizationService] = None


def get_localization_service() -> LocalizationService:
    """
    Get global LocalizationService singleton

    Restores the saved language preference on first access.
    """
    global _localization_service_instance
    if _localization_service_instance is None:
        settings = QSettings(Config.APP_AUTHOR, Config.APP_NAME)
        saved_language = settings.value("i18n/language", Config.DEFAULT_LANGUAGE)
        _localization_service_instance = LocalizationService(language=str(saved_language))
    return _localization_service_instance


__all__ = ['LocalizationService', 'get_localization_service', 'section_label_key']
