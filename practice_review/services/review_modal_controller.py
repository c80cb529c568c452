"""
ReviewModalController - Opens and closes review sessions.

At most one ReviewSession is active. Opening a record seeds the session's
draft from the record's note and its status from the RecordStore status
source; closing disposes the session regardless of unsaved edits. A save
that succeeds after close still updates the RecordStore.
"""

import logging
from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal

from ..core.exceptions import RecordNotFoundError
from ..core.records import QuestionRecord
from ..core.review_states import ReviewStatus, SessionError, NOTE_REQUIRED
from .record_store import RecordStore
from .review_session import ReviewSession
from .task_runner import TaskRunner, get_task_runner

logger = logging.getLogger(__name__)


class ReviewModalController(QObject):
    """
    Owns the active review session.

    Signals:
        session_opened(str): record_id
        session_closed(str): record_id

    Usage:
        controller = ReviewModalController(store, repo, repo)
        session = controller.open(record_id)
        session.toggle_edit()
        controller.close()
    """

    session_opened = pyqtSignal(str)
    session_closed = pyqtSignal(str)

    def __init__(
        self,
        store: RecordStore,
        note_repository,
        status_repository,
        runner: Optional[TaskRunner] = None,
        event_bus=None,
        parent=None
    ):
        super().__init__(parent)
        self._store = store
        self._note_repository = note_repository
        self._status_repository = status_repository
        self._runner = runner or get_task_runner()
        self._event_bus = event_bus

        self._session: Optional[ReviewSession] = None
        self._record: Optional[QuestionRecord] = None

    @property
    def active_session(self) -> Optional[ReviewSession]:
        return self._session

    @property
    def active_record(self) -> Optional[QuestionRecord]:
        """Record under review (read-only use by the view)"""
        return self._record

    @property
    def is_open(self) -> bool:
        return self._session is not None

    def open(self, record_id: str) -> ReviewSession:
        """
        Start reviewing a record.

        Any session already open is closed first.

        Raises:
            RecordNotFoundError: If the store has no such record
        """
        record = self._store.get(record_id)
        if record is None:
            raise RecordNotFoundError("Record not found", details=record_id)

        if self._session is not None:
            self.close()

        status = self._store.status_for(record_id) or ReviewStatus.NEEDS_REVIEW
        session = ReviewSession(
            record_id=record.id,
            note=record.note,
            status=status,
            note_repository=self._note_repository,
            status_repository=self._status_repository,
            runner=self._runner,
            parent=self,
        )
        session.note_committed.connect(self._store.apply_note)
        session.status_committed.connect(self._on_status_committed)
        session.error_changed.connect(self._on_session_error)

        self._session = session
        self._record = record

        logger.debug(f"Review session opened for record {record_id}")
        self.session_opened.emit(record_id)
        if self._event_bus is not None:
            self._event_bus.emit_record_opened(record_id)
        return session

    def close(self):
        """Discard the active session (unsaved drafts are dropped)."""
        session = self._session
        if session is None:
            return

        self._session = None
        self._record = None
        session.dispose()
        session.setParent(None)

        logger.debug(f"Review session closed for record {session.record_id}")
        self.session_closed.emit(session.record_id)

    def _on_status_committed(self, record_id: str, status: str):
        self._store.apply_status(record_id, ReviewStatus(status))

    def _on_session_error(self, error: Optional[SessionError]):
        # Validation errors stay inline; persistence errors also go to the status bar
        if error is None or error.code == NOTE_REQUIRED or self._event_bus is None:
            return
        self._event_bus.emit_error_key(error.message_key)


__all__ = ['ReviewModalController']
