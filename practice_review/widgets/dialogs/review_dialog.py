"""
ReviewDialog - Review one question record

Shows:
- Question text, section chip and answer options (correct / selected marked)
- Review status radios (Needs review / Reviewed)
- Note panel with view and edit modes

All state lives in the ReviewSession; the dialog only renders it and
forwards user input. Closing the dialog closes the session.
"""

from typing import Optional

from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QWidget, QLabel, QPushButton,
    QRadioButton, QButtonGroup, QTextEdit, QStackedWidget, QFrame
)
from PyQt6.QtCore import Qt

from ...config import Config
from ...core.records import QuestionRecord, normalize_section
from ...core.review_states import ReviewStatus, SessionError
from ...events.event_bus import get_event_bus
from ...services.localization_service import LocalizationService, get_localization_service


class ReviewDialog(QDialog):
    """
    Dialog bound to the active ReviewSession of a ReviewModalController.

    Usage:
        session = controller.open(record_id)
        dialog = ReviewDialog(controller, parent=self)
        dialog.exec()
    """

    def __init__(
        self,
        controller,
        i18n: Optional[LocalizationService] = None,
        event_bus=None,
        parent: Optional[QWidget] = None
    ):
        super().__init__(parent)

        self._controller = controller
        self._session = controller.active_session
        self._record: QuestionRecord = controller.active_record
        self._i18n = i18n or get_localization_service()
        self._event_bus = event_bus or get_event_bus()

        self._status_buttons = {}

        self._setup_ui()
        self._connect_signals()
        self._refresh_all()

    # ==================== UI ====================

    def _setup_ui(self):
        """Build the dialog UI."""
        self.setWindowTitle(self._i18n.resolve('practice.reviewQuestion'))
        self.setMinimumSize(Config.REVIEW_DIALOG_MIN_WIDTH, Config.REVIEW_DIALOG_MIN_HEIGHT)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        # Header: section chip + status radios
        header = QHBoxLayout()
        self._section_chip = QLabel()
        header.addWidget(self._section_chip)
        header.addStretch()

        self._status_group = QButtonGroup(self)
        self._status_group.setExclusive(True)
        for status in ReviewStatus:
            meta = Config.REVIEW_STATUSES[status.value]
            button = QRadioButton(self._i18n.resolve(meta['label_key']))
            button.setStyleSheet(f"color: {meta['color']}; font-weight: bold;")
            self._status_group.addButton(button)
            self._status_buttons[status] = button
            header.addWidget(button)
        layout.addLayout(header)

        # Question
        question_title = QLabel(self._i18n.resolve('scoreDetails.question'))
        question_title.setStyleSheet("font-weight: bold; color: #a0a0a0;")
        layout.addWidget(question_title)

        self._question_label = QLabel(self._record.question_data.question_text)
        self._question_label.setWordWrap(True)
        self._question_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        layout.addWidget(self._question_label)

        # Answer options
        options_title = QLabel(self._i18n.resolve('scoreDetails.answerOptions'))
        options_title.setStyleSheet("font-weight: bold; color: #a0a0a0;")
        layout.addWidget(options_title)
        layout.addWidget(self._build_options())

        # Notes
        layout.addWidget(self._build_notes_panel(), 1)

        # Inline error
        self._error_label = QLabel()
        self._error_label.setWordWrap(True)
        self._error_label.setStyleSheet("color: #ff6b6b;")
        self._error_label.hide()
        layout.addWidget(self._error_label)

        # Footer
        footer = QHBoxLayout()
        footer.addStretch()
        close_btn = QPushButton(self._i18n.resolve('common.close'))
        close_btn.clicked.connect(self.close)
        footer.addWidget(close_btn)
        layout.addLayout(footer)

        section = normalize_section(self._record.question_data.section)
        colors = Config.SECTION_COLORS.get(section, {'bg': '#333', 'color': '#ddd', 'border': '#555'})
        self._section_chip.setText(self._i18n.section_label(section))
        self._section_chip.setStyleSheet(f"""
            background: {colors['bg']};
            color: {colors['color']};
            border: 1px solid {colors['border']};
            border-radius: 10px;
            padding: 2px 10px;
            font-weight: bold;
        """)

    def _build_options(self) -> QWidget:
        container = QWidget()
        options_layout = QVBoxLayout(container)
        options_layout.setContentsMargins(0, 0, 0, 0)
        options_layout.setSpacing(6)

        for letter, text in self._record.question_data.answers.items():
            option = QLabel(f"{letter.upper()}. {text}")
            option.setWordWrap(True)
            if self._record.is_option_correct(letter):
                style = "background: #e8f5e8; color: #2e7d32; border: 1px solid #4caf50;"
            elif self._record.is_option_selected(letter):
                style = "background: #ffebee; color: #c62828; border: 1px solid #f44336;"
                option.setText(f"{option.text()}  ({self._i18n.resolve('scoreDetails.yourAnswer')})")
            else:
                style = "border: 1px solid #444;"
            option.setStyleSheet(f"QLabel {{ {style} border-radius: 6px; padding: 8px; }}")
            options_layout.addWidget(option)

        return container

    def _build_notes_panel(self) -> QWidget:
        frame = QFrame()
        frame.setStyleSheet("QFrame { background: #2a2a2a; border-radius: 6px; }")
        notes_layout = QVBoxLayout(frame)
        notes_layout.setContentsMargins(12, 10, 12, 10)

        header = QHBoxLayout()
        title = QLabel(self._i18n.resolve('practice.notes'))
        title.setStyleSheet("font-weight: bold;")
        header.addWidget(title)
        header.addStretch()

        self._edit_btn = QPushButton(self._i18n.resolve('common.edit'))
        header.addWidget(self._edit_btn)
        notes_layout.addLayout(header)

        # Page 0: read-only note, page 1: editor
        self._note_stack = QStackedWidget()

        self._note_view = QLabel()
        self._note_view.setWordWrap(True)
        self._note_view.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)
        self._note_stack.addWidget(self._note_view)

        editor_page = QWidget()
        editor_layout = QVBoxLayout(editor_page)
        editor_layout.setContentsMargins(0, 0, 0, 0)
        self._note_edit = QTextEdit()
        self._note_edit.setPlaceholderText(self._i18n.resolve('practice.enterNotes'))
        editor_layout.addWidget(self._note_edit)

        editor_buttons = QHBoxLayout()
        editor_buttons.addStretch()
        self._cancel_btn = QPushButton(self._i18n.resolve('common.cancel'))
        self._save_btn = QPushButton(self._i18n.resolve('common.save'))
        self._save_btn.setStyleSheet("""
            QPushButton { background: #2196F3; color: white; padding: 6px 16px; border-radius: 4px; }
            QPushButton:disabled { background: #555; color: #999; }
        """)
        editor_buttons.addWidget(self._cancel_btn)
        editor_buttons.addWidget(self._save_btn)
        editor_layout.addLayout(editor_buttons)
        self._note_stack.addWidget(editor_page)

        notes_layout.addWidget(self._note_stack, 1)
        return frame

    def _connect_signals(self):
        """Connect widget and session signals"""
        self._status_group.buttonClicked.connect(self._on_status_clicked)
        self._edit_btn.clicked.connect(self._session.toggle_edit)
        self._cancel_btn.clicked.connect(self._session.cancel_edit)
        self._save_btn.clicked.connect(self._session.save_note)
        self._note_edit.textChanged.connect(self._on_editor_text_changed)

        self._session.mode_changed.connect(self._refresh_notes)
        self._session.save_state_changed.connect(self._refresh_notes)
        self._session.note_draft_changed.connect(self._on_draft_changed)
        self._session.status_changed.connect(self._refresh_status)
        self._session.status_update_state_changed.connect(self._refresh_status)
        self._session.error_changed.connect(self._show_error)
        self._session.note_committed.connect(self._on_note_committed)
        self._session.status_committed.connect(self._on_status_committed)

    # ==================== RENDERING ====================

    def _refresh_all(self):
        self._refresh_status()
        self._refresh_notes()
        self._show_error(self._session.last_error)

    def _refresh_status(self, *_):
        for status, button in self._status_buttons.items():
            button.blockSignals(True)
            button.setChecked(status is self._session.status)
            button.blockSignals(False)
            button.setEnabled(not self._session.is_updating_status)

    def _refresh_notes(self, *_):
        session = self._session
        if session.is_editing:
            if self._note_edit.toPlainText() != session.note_draft:
                self._note_edit.blockSignals(True)
                self._note_edit.setPlainText(session.note_draft)
                self._note_edit.blockSignals(False)
            self._note_stack.setCurrentIndex(1)
        else:
            note = session.committed_note
            if note:
                self._note_view.setText(note)
                self._note_view.setStyleSheet("color: #e0e0e0;")
            else:
                self._note_view.setText(self._i18n.resolve('practice.noNotesYet'))
                self._note_view.setStyleSheet("color: #808080; font-style: italic;")
            self._note_stack.setCurrentIndex(0)

        self._edit_btn.setText(self._i18n.resolve('common.cancel' if session.is_editing else 'common.edit'))
        self._edit_btn.setEnabled(not session.is_saving)
        self._cancel_btn.setEnabled(not session.is_saving)
        self._save_btn.setEnabled(not session.is_saving)
        self._note_edit.setReadOnly(session.is_saving)

    def _show_error(self, error: Optional[SessionError]):
        if error is None:
            self._error_label.hide()
            self._error_label.clear()
            return
        self._error_label.setText(self._i18n.resolve(error.message_key))
        self._error_label.show()

    # ==================== HANDLERS ====================

    def _on_status_clicked(self, button):
        for status, candidate in self._status_buttons.items():
            if candidate is button:
                if not self._session.set_status(status):
                    self._refresh_status()
                return

    def _on_editor_text_changed(self):
        self._session.set_note_draft(self._note_edit.toPlainText())

    def _on_draft_changed(self, text: str):
        if self._session.is_editing and self._note_edit.toPlainText() != text:
            self._note_edit.blockSignals(True)
            self._note_edit.setPlainText(text)
            self._note_edit.blockSignals(False)

    def _on_note_committed(self, _record_id: str, _text: str):
        self._event_bus.emit_status(self._i18n.resolve('errorLogs.noteUpdatedSuccess'))

    def _on_status_committed(self, _record_id: str, _status: str):
        self._event_bus.emit_status(self._i18n.resolve('errorLogs.statusUpdatedSuccess'))

    # ==================== EVENTS ====================

    def done(self, result: int):
        """Close the session however the dialog ends (close, Esc, reject)"""
        self._controller.close()
        super().done(result)


__all__ = ['ReviewDialog']
