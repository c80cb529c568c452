"""
ReviewSession - Per-record review state machine

Owns the ephemeral state of one open review dialog:
- Note draft and editing mode (Viewing / Editing, with a Saving flag)
- Review status (NeedsReview / Reviewed) with optimistic updates
- In-flight flags for note saves and status updates
- Last error surfaced to the view

Note panel transitions (mode, save_state) on events:

    Viewing/Idle  --toggle_edit-------->  Editing/Idle
    Editing/Idle  --toggle_edit-------->  Viewing/Idle    (draft reset to committed note)
    Editing/Idle  --validation_failed-->  Editing/Idle    (last_error = note required)
    Editing/Idle  --begin_save--------->  Editing/Saving
    Editing/Saving --save_succeeded---->  Viewing/Idle
    Editing/Saving --save_failed------->  Editing/Idle    (last_error set, draft kept)

Status updates (status_update_state): Idle --begin_update--> Updating
--update_succeeded/update_failed--> Idle. A failed update restores the
previous status.

An event with no entry for the current state is ignored. Note saves and
status updates are independent and may be in flight together; neither kind
queues behind itself. After dispose() completions leave the session state
alone; a call that did persist still emits its committed signal so the
store matches the repository.
"""

import functools
import logging
from typing import Any, Callable, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from ..core.exceptions import PersistenceError
from ..core.review_states import (
    EditMode,
    NOTE_REQUIRED,
    NOTE_UPDATE_FAILED,
    ReviewStatus,
    STATUS_UPDATE_FAILED,
    SaveState,
    SessionError,
    StatusUpdateState,
    make_error,
)
from .task_runner import TaskRunner

logger = logging.getLogger(__name__)


# (mode, save_state, event) -> (mode, save_state)
_NOTE_TRANSITIONS = {
    (EditMode.VIEWING, SaveState.IDLE, 'toggle_edit'): (EditMode.EDITING, SaveState.IDLE),
    (EditMode.EDITING, SaveState.IDLE, 'toggle_edit'): (EditMode.VIEWING, SaveState.IDLE),
    (EditMode.EDITING, SaveState.IDLE, 'validation_failed'): (EditMode.EDITING, SaveState.IDLE),
    (EditMode.EDITING, SaveState.IDLE, 'begin_save'): (EditMode.EDITING, SaveState.SAVING),
    (EditMode.EDITING, SaveState.SAVING, 'save_succeeded'): (EditMode.VIEWING, SaveState.IDLE),
    (EditMode.EDITING, SaveState.SAVING, 'save_failed'): (EditMode.EDITING, SaveState.IDLE),
}

# (status_update_state, event) -> status_update_state
_STATUS_TRANSITIONS = {
    (StatusUpdateState.IDLE, 'begin_update'): StatusUpdateState.UPDATING,
    (StatusUpdateState.UPDATING, 'update_succeeded'): StatusUpdateState.IDLE,
    (StatusUpdateState.UPDATING, 'update_failed'): StatusUpdateState.IDLE,
}


class ReviewSession(QObject):
    """
    Review state of one record while its dialog is open.

    Created by ReviewModalController.open() and disposed by close(); never
    reused for another record.

    Signals:
        mode_changed(str): EditMode value
        status_changed(str): ReviewStatus value (optimistic or rolled back)
        note_draft_changed(str): Draft text
        save_state_changed(str): SaveState value
        status_update_state_changed(str): StatusUpdateState value
        error_changed(object): SessionError or None
        note_committed(str, str): record_id, saved text
        status_committed(str, str): record_id, persisted status value
    """

    mode_changed = pyqtSignal(str)
    status_changed = pyqtSignal(str)
    note_draft_changed = pyqtSignal(str)
    save_state_changed = pyqtSignal(str)
    status_update_state_changed = pyqtSignal(str)
    error_changed = pyqtSignal(object)
    note_committed = pyqtSignal(str, str)
    status_committed = pyqtSignal(str, str)

    def __init__(
        self,
        record_id: str,
        note: str,
        status: ReviewStatus,
        note_repository,
        status_repository,
        runner: TaskRunner,
        parent=None
    ):
        super().__init__(parent)

        self._record_id = record_id
        self._note_repository = note_repository
        self._status_repository = status_repository
        self._runner = runner

        self._committed_note = note or ""
        self._note_draft = self._committed_note
        self._status = ReviewStatus(status)
        self._mode = EditMode.VIEWING
        self._save_state = SaveState.IDLE
        self._status_update_state = StatusUpdateState.IDLE
        self._last_error: Optional[SessionError] = None

        self._disposed = False

    # ==================== STATE ====================

    @property
    def record_id(self) -> str:
        return self._record_id

    @property
    def status(self) -> ReviewStatus:
        return self._status

    @property
    def note_draft(self) -> str:
        return self._note_draft

    @property
    def committed_note(self) -> str:
        """Last note known to be persisted"""
        return self._committed_note

    @property
    def mode(self) -> EditMode:
        return self._mode

    @property
    def save_state(self) -> SaveState:
        return self._save_state

    @property
    def status_update_state(self) -> StatusUpdateState:
        return self._status_update_state

    @property
    def last_error(self) -> Optional[SessionError]:
        return self._last_error

    @property
    def is_editing(self) -> bool:
        return self._mode is EditMode.EDITING

    @property
    def is_saving(self) -> bool:
        return self._save_state is SaveState.SAVING

    @property
    def is_updating_status(self) -> bool:
        return self._status_update_state is StatusUpdateState.UPDATING

    @property
    def has_unsaved_changes(self) -> bool:
        return self.is_editing and self._note_draft != self._committed_note

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    # ==================== TRANSITIONS ====================

    def _fire_note_event(self, event: str) -> bool:
        """Apply a note-panel event; False if not allowed in the current state."""
        target = _NOTE_TRANSITIONS.get((self._mode, self._save_state, event))
        if target is None:
            logger.debug(
                f"Session {self._record_id}: '{event}' ignored in "
                f"{self._mode.value}/{self._save_state.value}"
            )
            return False

        mode, save_state = target
        if save_state is not self._save_state:
            self._save_state = save_state
            self.save_state_changed.emit(save_state.value)
        if mode is not self._mode:
            self._mode = mode
            self.mode_changed.emit(mode.value)
        return True

    def _fire_status_event(self, event: str) -> bool:
        target = _STATUS_TRANSITIONS.get((self._status_update_state, event))
        if target is None:
            logger.debug(
                f"Session {self._record_id}: '{event}' ignored while "
                f"{self._status_update_state.value}"
            )
            return False

        if target is not self._status_update_state:
            self._status_update_state = target
            self.status_update_state_changed.emit(target.value)
        return True

    def _set_error(self, error: Optional[SessionError]):
        if error != self._last_error:
            self._last_error = error
            self.error_changed.emit(error)

    def _set_draft(self, text: str):
        if text != self._note_draft:
            self._note_draft = text
            self.note_draft_changed.emit(text)

    def _set_status(self, status: ReviewStatus):
        if status is not self._status:
            self._status = status
            self.status_changed.emit(status.value)

    # ==================== NOTE EDITING ====================

    def toggle_edit(self) -> bool:
        """
        Enter or leave edit mode.

        Leaving discards the draft back to the committed note. Ignored while
        a save is in flight.

        Returns:
            True if the mode changed
        """
        if self._disposed:
            return False

        leaving = self._mode is EditMode.EDITING
        if not self._fire_note_event('toggle_edit'):
            return False

        if leaving:
            self._set_draft(self._committed_note)
        self._set_error(None)
        return True

    def start_editing(self) -> bool:
        if self._mode is EditMode.EDITING:
            return False
        return self.toggle_edit()

    def cancel_edit(self) -> bool:
        """Leave edit mode without saving (Cancel button)."""
        if self._mode is not EditMode.EDITING:
            return False
        return self.toggle_edit()

    def set_note_draft(self, text: str) -> bool:
        """Update the draft; only accepted while editing and not saving."""
        if self._disposed:
            return False
        if self._mode is not EditMode.EDITING or self._save_state is SaveState.SAVING:
            logger.debug(f"Session {self._record_id}: draft change ignored")
            return False

        self._set_draft(text or "")
        return True

    def save_note(self) -> bool:
        """
        Persist the draft.

        An empty (after trimming) draft is rejected without calling the
        NoteRepository. A second save while one is in flight is a no-op.

        Returns:
            True if a persistence call was issued
        """
        if self._disposed:
            return False
        if self._save_state is SaveState.SAVING:
            logger.debug(f"Session {self._record_id}: save already in flight")
            return False
        if self._mode is not EditMode.EDITING:
            logger.debug(f"Session {self._record_id}: save ignored while viewing")
            return False

        if not self._note_draft.strip():
            self._fire_note_event('validation_failed')
            self._set_error(make_error(NOTE_REQUIRED))
            return False

        self._set_error(None)
        self._fire_note_event('begin_save')

        text = self._note_draft
        self._runner.submit(
            self._persist_note,
            text,
            on_success=functools.partial(self._on_note_saved, text),
            on_failure=self._on_note_save_failed,
        )
        return True

    def _persist_note(self, text: str):
        # Runs on a worker thread
        if self._note_repository.update_note(self._record_id, text) is False:
            raise PersistenceError("Note update rejected", details=self._record_id)

    def _on_note_saved(self, text: str, _result: Any = None):
        if self._disposed:
            logger.debug(f"Note for closed session {self._record_id} persisted after close")
            self.note_committed.emit(self._record_id, text)
            return

        self._committed_note = text
        self._fire_note_event('save_succeeded')
        logger.info(f"Note saved for record {self._record_id}")
        self.note_committed.emit(self._record_id, text)

    def _on_note_save_failed(self, error_message: str):
        if self._disposed:
            logger.debug(f"Discarding note save failure for closed session {self._record_id}")
            return

        logger.warning(f"Failed to update note for record {self._record_id}: {error_message}")
        self._fire_note_event('save_failed')
        self._set_error(make_error(NOTE_UPDATE_FAILED, error_message))

    # ==================== STATUS ====================

    def set_status(self, status: ReviewStatus) -> bool:
        """
        Change the review status optimistically.

        The new status is visible immediately; if persisting it fails the
        previous status is restored and last_error is set. Requests made
        while an update is in flight are ignored.

        Returns:
            True if an update was started
        """
        if self._disposed:
            return False

        status = ReviewStatus(status)
        if self._status_update_state is StatusUpdateState.UPDATING:
            logger.debug(f"Session {self._record_id}: status update already in flight")
            return False
        if status is self._status:
            return False

        self._optimistic_update(
            new_value=status,
            read=lambda: self._status,
            write=self._set_status,
            persist=self._persist_status,
            settle=self._settle_status_update,
            error_code=STATUS_UPDATE_FAILED,
            on_committed=lambda value: self.status_committed.emit(self._record_id, value.value),
        )
        return True

    def toggle_status(self) -> bool:
        """Flip between NeedsReview and Reviewed."""
        return self.set_status(self._status.toggled())

    def _persist_status(self, status: ReviewStatus):
        # Runs on a worker thread
        if self._status_repository.update_status(self._record_id, status) is False:
            raise PersistenceError("Status update rejected", details=self._record_id)

    def _settle_status_update(self, succeeded: bool):
        self._fire_status_event('update_succeeded' if succeeded else 'update_failed')
        if succeeded and self._last_error and self._last_error.code == STATUS_UPDATE_FAILED:
            self._set_error(None)

    def _optimistic_update(
        self,
        new_value: Any,
        read: Callable[[], Any],
        write: Callable[[Any], None],
        persist: Callable[[Any], Any],
        settle: Callable[[bool], None],
        error_code: str,
        on_committed: Callable[[Any], None]
    ):
        """
        Snapshot, apply, persist; restore the snapshot on failure.

        Args:
            new_value: Value to show right away
            read: Returns the current value (the snapshot)
            write: Sets the visible value
            persist: Blocking call run on the TaskRunner with new_value
            settle: Called with the outcome to clear the in-flight flag
            error_code: SessionError code on failure
            on_committed: Called with new_value once persisted
        """
        previous = read()
        write(new_value)
        self._fire_status_event('begin_update')

        def succeeded(_result):
            if self._disposed:
                logger.debug(f"Update for closed session {self._record_id} persisted after close")
                on_committed(new_value)
                return
            settle(True)
            on_committed(new_value)

        def failed(error_message: str):
            if self._disposed:
                logger.debug(f"Discarding update failure for closed session {self._record_id}")
                return
            logger.warning(f"Update failed for record {self._record_id}, rolling back: {error_message}")
            write(previous)
            settle(False)
            self._set_error(make_error(error_code, error_message))

        self._runner.submit(persist, new_value, on_success=succeeded, on_failure=failed)

    # ==================== LIFECYCLE ====================

    def dispose(self):
        """
        Detach the session (dialog closed).

        In-flight calls are not cancelled. Their completions no longer change
        this session; successful ones are still reported through
        note_committed / status_committed.
        """
        if self._disposed:
            return
        self._disposed = True
        if self.is_saving or self.is_updating_status:
            logger.debug(f"Session {self._record_id} closed with calls in flight")


__all__ = ['ReviewSession']
