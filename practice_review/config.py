"""
Configuration for Practice Review

Centralized app configuration with sensible defaults.
Pattern: Single source of truth for all settings.
"""

import os
import sys
from pathlib import Path


class Config:
    """
    Application configuration

    Features:
    - App metadata
    - Section tags and list defaults
    - Review status display metadata
    - Performance settings
    - User data / log paths
    """

    # ==================== APP METADATA ====================
    APP_NAME = "Practice Review"

    # Version: read from version.txt (injected by build system) or use fallback
    _version_file = Path(__file__).parent / "version.txt"
    if _version_file.exists():
        APP_VERSION = _version_file.read_text().strip().lstrip('v')
    else:
        APP_VERSION = "1.0.0"  # Dev/fallback version

    APP_AUTHOR = "Practice Review Team"

    # ==================== PATHS ====================
    APP_ROOT: Path = Path(__file__).parent
    DATA_DIR_ENV = "PRACTICE_REVIEW_DATA_DIR"
    LOGS_FOLDER = "logs"

    # ==================== LOGGING ====================
    LOG_LEVEL_ENV = "PRACTICE_REVIEW_LOG_LEVEL"
    LOG_RETENTION_DAYS = 14

    @classmethod
    def get_user_data_dir(cls) -> Path:
        """Get user data directory in OS AppData.

        The PRACTICE_REVIEW_DATA_DIR environment variable overrides the
        platform default (used by tests and portable installs).
        """
        override = os.environ.get(cls.DATA_DIR_ENV)
        if override:
            user_dir = Path(override)
        elif sys.platform == 'win32':
            base = Path(os.environ.get('LOCALAPPDATA', Path.home() / 'AppData' / 'Local'))
            user_dir = base / 'PracticeReview'
        elif sys.platform == 'darwin':
            user_dir = Path.home() / 'Library' / 'Application Support' / 'PracticeReview'
        else:
            base = Path(os.environ.get('XDG_DATA_HOME', Path.home() / '.local' / 'share'))
            user_dir = base / 'PracticeReview'

        user_dir.mkdir(parents=True, exist_ok=True)
        return user_dir

    @classmethod
    def get_logs_directory(cls) -> Path:
        """Get logs directory path (inside user data dir)"""
        logs_dir = cls.get_user_data_dir() / cls.LOGS_FOLDER
        logs_dir.mkdir(parents=True, exist_ok=True)
        return logs_dir

    # ==================== SECTIONS ====================
    # Stored section tags are compared after strip().upper()
    SECTION_LANGUAGE = "TIẾNG ANH"
    SECTION_MATH = "TOÁN"
    SECTION_TAGS = (SECTION_LANGUAGE, SECTION_MATH)

    # Localization keys for section display names
    SECTION_LABEL_KEYS = {
        SECTION_LANGUAGE: 'scoreDetails.readingWriting',
        SECTION_MATH: 'scoreDetails.math',
    }

    # Section chip colors (bg, text, border)
    SECTION_COLORS = {
        SECTION_LANGUAGE: {'bg': '#e3f2fd', 'color': '#1976d2', 'border': '#1976d2'},
        SECTION_MATH: {'bg': '#fff3e0', 'color': '#f57c00', 'border': '#f57c00'},
    }

    # Option letters a record's answers may use
    OPTION_LETTERS = ('a', 'b', 'c', 'd', 'e')

    # ==================== LIST DEFAULTS ====================
    DEFAULT_PAGE_SIZE = 10
    PAGE_SIZE_OPTIONS = [5, 10, 20, 50]

    # ==================== REVIEW STATUS ====================
    REVIEW_STATUSES = {
        'needs_review': {'color': '#f57c00', 'background': '#fff3e0', 'label_key': 'errorLogs.needsReview'},
        'reviewed': {'color': '#4caf50', 'background': '#e8f5e8', 'label_key': 'practice.reviewed'},
    }

    # ==================== PRACTICE LAUNCH ====================
    # Practice types offered by the "practice by type" dialog
    PRACTICE_TYPES = {
        'algebra': 'practice.practiceTypes.algebra',
        'geometry': 'practice.practiceTypes.geometry',
        'reading': 'practice.practiceTypes.reading',
        'writing': 'practice.practiceTypes.writing',
        'vocabulary': 'practice.practiceTypes.vocabulary',
        'grammar': 'practice.practiceTypes.grammar',
    }

    # ==================== NAVIGATION ====================
    PRACTICE_HOME_ROUTE = "/practice"

    # ==================== LOCALIZATION ====================
    DEFAULT_LANGUAGE = 'en'
    SUPPORTED_LANGUAGES = ('en', 'vi')

    # ==================== PERFORMANCE ====================
    # Worker threads for repository calls
    PERSISTENCE_THREAD_COUNT = 2

    # Simulated latency of the bundled sample repository (seconds)
    SAMPLE_DATA_LATENCY_S = 1.0

    # ==================== UI DEFAULTS ====================
    DEFAULT_WINDOW_WIDTH = 1100
    DEFAULT_WINDOW_HEIGHT = 760
    REVIEW_DIALOG_MIN_WIDTH = 720
    REVIEW_DIALOG_MIN_HEIGHT = 560


__all__ = ['Config']
