"""
NavigationService - Route changes requested by the error list

Fire-and-forget: callers never wait on or inspect the result. The host
application connects navigation_requested to whatever swaps its pages.
"""

import logging
from typing import List, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from ..config import Config

logger = logging.getLogger(__name__)


class NavigationService(QObject):
    """
    Emits route requests and keeps a short history

    Signals:
        navigation_requested(str): Target route
    """

    navigation_requested = pyqtSignal(str)

    MAX_HISTORY = 50

    def __init__(self, parent=None):
        super().__init__(parent)
        self._history: List[str] = []

    @property
    def history(self) -> List[str]:
        return self._history.copy()

    def go_back(self, target: str = Config.PRACTICE_HOME_ROUTE):
        """Leave the error list for target"""
        logger.info(f"Navigating back to {target}")
        self._history.append(target)
        del self._history[:-self.MAX_HISTORY]
        self.navigation_requested.emit(target)


# Singleton instance
_navigation_service_instance: Optional[NavigationService] = None


def get_navigation_service() -> NavigationService:
    global _navigation_service_instance
    if _navigation_service_instance is None:
        _navigation_service_instance = NavigationService()
    return _navigation_service_instance


__all__ = ['NavigationService', 'get_navigation_service']
