"""
StatusBar - Bottom status bar

Pattern: QWidget with horizontal layout
"""

from PyQt6.QtWidgets import QWidget, QHBoxLayout, QLabel
from PyQt6.QtCore import Qt

from ..events.event_bus import get_event_bus
from ..services.localization_service import get_localization_service


class StatusBar(QWidget):
    """
    Bottom status bar

    Features:
    - Status / error message display (event bus driven)
    - Record count display

    Layout:
        [Status message...                    ] [8 questions]
    """

    def __init__(self, event_bus=None, i18n=None, parent=None):
        super().__init__(parent)

        self._event_bus = event_bus or get_event_bus()
        self._i18n = i18n or get_localization_service()
        self._count = 0
        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self):
        """Setup status bar UI"""

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 4, 12, 4)
        layout.setSpacing(16)

        self._status_label = QLabel("")
        self._status_label.setStyleSheet("color: #a0a0a0;")
        layout.addWidget(self._status_label, 1)

        self._count_label = QLabel("")
        self._count_label.setStyleSheet("color: #808080;")
        self._count_label.setAlignment(Qt.AlignmentFlag.AlignRight)
        layout.addWidget(self._count_label)

        self.setFixedHeight(28)

    def _connect_signals(self):
        """Connect signals"""
        self._event_bus.status_message.connect(self.set_status)
        self._event_bus.status_error.connect(self.set_error)
        self._event_bus.status_error_key.connect(self._on_error_key)
        self._i18n.language_changed.connect(self._on_language_changed)

    def set_status(self, message: str):
        """Set status message"""
        self._status_label.setText(message)
        self._status_label.setStyleSheet("color: #a0a0a0;")

    def set_error(self, message: str):
        """Set error message (red)"""
        self._status_label.setText(message)
        self._status_label.setStyleSheet("color: #ff6b6b;")

    def status_text(self) -> str:
        return self._status_label.text()

    def set_record_count(self, count: int):
        self._count = count
        self._count_label.setText(f"{count:,} {self._i18n.resolve('errorLogs.question')}")

    def _on_error_key(self, message_key: str):
        self.set_error(self._i18n.resolve(message_key))

    def _on_language_changed(self, _language: str):
        self.set_record_count(self._count)


__all__ = ['StatusBar']
