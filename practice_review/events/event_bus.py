"""
EventBus - Central event system for cross-widget communication

Pattern: Singleton event bus for decoupled component communication
"""

from typing import Optional
from PyQt6.QtCore import QObject, pyqtSignal


class EventBus(QObject):
    """
    Central event bus for application-wide signal coordination

    Features:
    - Record selection / review dialog notifications
    - Practice launch requests
    - Status and error messages

    Usage:
        bus = get_event_bus()
        bus.status_error.connect(status_bar.show_error)
        bus.emit_error("Could not update status")
    """

    # ==================== SELECTION SIGNALS ====================
    record_selected = pyqtSignal(str)  # record_id (empty string for deselect)

    # ==================== REVIEW SIGNALS ====================
    review_opened = pyqtSignal(str)  # record_id

    # ==================== REQUEST SIGNALS ====================
    # Practice launchers; whatever starts a practice run listens here
    request_practice_by_type = pyqtSignal(str)  # practice type key
    request_practice_all = pyqtSignal()

    # ==================== UI STATE SIGNALS ====================
    # Status messages (already resolved text, or a localization key)
    status_message = pyqtSignal(str)
    status_error = pyqtSignal(str)
    status_error_key = pyqtSignal(str)  # localization key

    def __init__(self, parent=None):
        super().__init__(parent)
        self._current_record_id: str = ""

    @property
    def current_record_id(self) -> str:
        """Get the record last opened for review"""
        return self._current_record_id

    # ==================== EMIT HELPERS ====================
    def emit_record_selected(self, record_id: str):
        self._current_record_id = record_id
        self.record_selected.emit(record_id)

    def emit_record_opened(self, record_id: str):
        """A review dialog was opened for a record"""
        self._current_record_id = record_id
        self.review_opened.emit(record_id)

    def emit_practice_by_type(self, practice_type: str):
        self.request_practice_by_type.emit(practice_type)

    def emit_practice_all(self):
        self.request_practice_all.emit()

    def emit_status(self, message: str):
        """Emit status message"""
        self.status_message.emit(message)

    def emit_error(self, message: str):
        """Emit error message"""
        self.status_error.emit(message)

    def emit_error_key(self, message_key: str):
        """Emit an error by localization key (the view resolves it)"""
        self.status_error_key.emit(message_key)


# Singleton instance
_event_bus_instance: Optional[EventBus] = None


def get_event_bus() -> EventBus:
    """
    Get global EventBus singleton

    Returns:
        Global EventBus instance
    """
    global _event_bus_instance
    if _event_bus_instance is None:
        _event_bus_instance = EventBus()
    return _event_bus_instance


__all__ = ['EventBus', 'get_event_bus']
