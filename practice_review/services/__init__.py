"""
Services for Practice Review

Data access, background execution and review session services.
"""

from .task_runner import TaskRunner, PersistenceTask, get_task_runner
from .repositories import (
    QuestionRepository,
    NoteRepository,
    StatusRepository,
    InMemoryReviewRepository,
    create_sample_repository,
)
from .record_store import RecordStore
from .review_session import ReviewSession
from .review_modal_controller import ReviewModalController
from .navigation_service import NavigationService, get_navigation_service
from .localization_service import LocalizationService, get_localization_service, section_label_key

__all__ = [
    # Background execution
    'TaskRunner',
    'PersistenceTask',
    'get_task_runner',
    # Repositories
    'QuestionRepository',
    'NoteRepository',
    'StatusRepository',
    'InMemoryReviewRepository',
    'create_sample_repository',
    # Records and review
    'RecordStore',
    'ReviewSession',
    'ReviewModalController',
    # Collaborators
    'NavigationService',
    'get_navigation_service',
    'LocalizationService',
    'get_localization_service',
    'section_label_key',
]
