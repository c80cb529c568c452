"""
Review session states.

Enumerations for the per-record review state machine and the error value
a session exposes to the view.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ReviewStatus(str, Enum):
    """Review status of a record"""
    NEEDS_REVIEW = 'needs_review'
    REVIEWED = 'reviewed'

    def toggled(self) -> 'ReviewStatus':
        if self is ReviewStatus.NEEDS_REVIEW:
            return ReviewStatus.REVIEWED
        return ReviewStatus.NEEDS_REVIEW


class EditMode(str, Enum):
    """Note panel mode"""
    VIEWING = 'viewing'
    EDITING = 'editing'


class SaveState(str, Enum):
    """Note save in-flight flag"""
    IDLE = 'idle'
    SAVING = 'saving'


class StatusUpdateState(str, Enum):
    """Status update in-flight flag"""
    IDLE = 'idle'
    UPDATING = 'updating'


@dataclass(frozen=True)
class SessionError:
    """
    Error surfaced by a review session.

    Attributes:
        code: note_required, note_update_failed or status_update_failed
        message_key: Localization key for the inline message
        detail: Underlying error text (for logs/tooltips)
    """
    code: str
    message_key: str
    detail: Optional[str] = None


NOTE_REQUIRED = 'note_required'
NOTE_UPDATE_FAILED = 'note_update_failed'
STATUS_UPDATE_FAILED = 'status_update_failed'

ERROR_MESSAGE_KEYS = {
    NOTE_REQUIRED: 'errorLogs.noteRequired',
    NOTE_UPDATE_FAILED: 'errorLogs.noteUpdateError',
    STATUS_UPDATE_FAILED: 'errorLogs.statusUpdateError',
}


def make_error(code: str, detail: Optional[str] = None) -> SessionError:
    """Build a SessionError with the message key for its code."""
    return SessionError(code=code, message_key=ERROR_MESSAGE_KEYS[code], detail=detail)


__all__ = [
    'ReviewStatus',
    'EditMode',
    'SaveState',
    'StatusUpdateState',
    'SessionError',
    'NOTE_REQUIRED',
    'NOTE_UPDATE_FAILED',
    'STATUS_UPDATE_FAILED',
    'make_error',
]
