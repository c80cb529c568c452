"""
PracticeTypeDialog - Pick a practice type to start
"""

from typing import Optional

from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QComboBox, QPushButton, QWidget
)

from ...config import Config
from ...services.localization_service import LocalizationService, get_localization_service


class PracticeTypeDialog(QDialog):
    """
    Modal chooser for "practice by type".

    Start is enabled once a type is selected; selected_type() holds the
    chosen key from Config.PRACTICE_TYPES after exec() returns Accepted.
    """

    def __init__(self, i18n: Optional[LocalizationService] = None, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._i18n = i18n or get_localization_service()
        self._setup_ui()

    def _setup_ui(self):
        self.setWindowTitle(self._i18n.resolve('practice.selectPracticeType'))
        self.setMinimumWidth(420)

        layout = QVBoxLayout(self)
        layout.setSpacing(12)

        description = QLabel(self._i18n.resolve('practice.selectPracticeTypeDescription'))
        description.setWordWrap(True)
        description.setStyleSheet("color: #a0a0a0;")
        layout.addWidget(description)

        layout.addWidget(QLabel(self._i18n.resolve('practice.practiceType')))
        self._type_combo = QComboBox()
        self._type_combo.addItem("", None)
        for key, label_key in Config.PRACTICE_TYPES.items():
            self._type_combo.addItem(self._i18n.resolve(label_key), key)
        self._type_combo.currentIndexChanged.connect(self._update_buttons)
        layout.addWidget(self._type_combo)

        buttons = QHBoxLayout()
        buttons.addStretch()
        cancel_btn = QPushButton(self._i18n.resolve('common.cancel'))
        cancel_btn.clicked.connect(self.reject)
        self._start_btn = QPushButton(self._i18n.resolve('practice.startPractice'))
        self._start_btn.clicked.connect(self.accept)
        buttons.addWidget(cancel_btn)
        buttons.addWidget(self._start_btn)
        layout.addLayout(buttons)

        self._update_buttons()

    def _update_buttons(self, *_):
        self._start_btn.setEnabled(self.selected_type() is not None)

    def selected_type(self) -> Optional[str]:
        return self._type_combo.currentData()

    def set_selected_type(self, practice_type: str) -> bool:
        index = self._type_combo.findData(practice_type)
        if index < 0:
            return False
        self._type_combo.setCurrentIndex(index)
        return True


__all__ = ['PracticeTypeDialog']
