"""
Core functionality for Practice Review

Contains:
- Question record entities
- Review session state enums
- Custom exceptions for error handling
"""

from .records import QuestionData, QuestionRecord, normalize_section
from .review_states import (
    ReviewStatus,
    EditMode,
    SaveState,
    StatusUpdateState,
    SessionError,
)
from .exceptions import (
    PracticeReviewError,
    ValidationError,
    PersistenceError,
    LoadError,
    RecordNotFoundError,
)

__all__ = [
    # Entities
    'QuestionData',
    'QuestionRecord',
    'normalize_section',
    # States
    'ReviewStatus',
    'EditMode',
    'SaveState',
    'StatusUpdateState',
    'SessionError',
    # Exceptions
    'PracticeReviewError',
    'ValidationError',
    'PersistenceError',
    'LoadError',
    'RecordNotFoundError',
]
