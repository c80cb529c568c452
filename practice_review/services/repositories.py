"""
Repositories - Data source contracts for practice review

Contracts consumed by RecordStore and ReviewSession, plus an in-memory
implementation seeded with sample error-log data. Repository methods are
blocking and are always called through TaskRunner, off the GUI thread.

A call fails by raising; update methods may also return False.
"""

import copy
import logging
import threading
import time
from typing import Any, Dict, List, Optional, Protocol

from ..config import Config
from ..core.exceptions import RecordNotFoundError
from ..core.review_states import ReviewStatus
from ..utils.decorators import timed

logger = logging.getLogger(__name__)


class QuestionRepository(Protocol):
    def fetch_all(self) -> List[Dict[str, Any]]:
        """Return every error-log row, in display order."""
        ...


class NoteRepository(Protocol):
    def update_note(self, record_id: str, text: str) -> bool:
        ...


class StatusRepository(Protocol):
    def update_status(self, record_id: str, status: ReviewStatus) -> bool:
        ...


SAMPLE_ERROR_LOGS: List[Dict[str, Any]] = [
    {
        '_id': '1',
        'questionData': {
            'question': 'If 3x + 5 = 14, what is the value of x?',
            'section': 'TOÁN',
            'answers': {'a': '2', 'b': '3', 'c': '4', 'd': '5'},
            'correctAnswer': 'b',
        },
        'selectedAnswer': 'a',
        'isCorrect': False,
        'note': 'Forgot to subtract 5 from both sides first',
    },
    {
        '_id': '2',
        'questionData': {
            'question': "Which of the following best describes the author's tone in the passage?",
            'section': 'TIẾNG ANH',
            'answers': {'a': 'Optimistic', 'b': 'Critical', 'c': 'Neutral', 'd': 'Enthusiastic'},
            'correctAnswer': 'b',
        },
        'selectedAnswer': 'a',
        'isCorrect': False,
        'note': 'Need to pay more attention to negative words in the passage',
    },
    {
        '_id': '3',
        'questionData': {
            'question': 'The function f(x) = 2x² - 4x + 1. What is f(3)?',
            'section': 'TOÁN',
            'answers': {'a': '7', 'b': '11', 'c': '15', 'd': '19'},
            'correctAnswer': 'a',
        },
        'selectedAnswer': 'b',
        'isCorrect': False,
        'note': 'Made calculation error: 2(9) - 4(3) + 1 = 18 - 12 + 1 = 7',
    },
    {
        '_id': '4',
        'questionData': {
            'question': 'Based on the graph, what is the relationship between variables x and y?',
            'section': 'TIẾNG ANH',
            'answers': {
                'a': 'Directly proportional',
                'b': 'Inversely proportional',
                'c': 'No relationship',
                'd': 'Exponential growth',
            },
            'correctAnswer': 'a',
        },
        'selectedAnswer': 'c',
        'isCorrect': False,
        'note': 'Need to practice reading graphs more carefully',
    },
    {
        '_id': '5',
        'questionData': {
            'question': 'Solve for y: 2y - 7 = 3y + 2',
            'section': 'TOÁN',
            'answers': {'a': '-9', 'b': '-5', 'c': '5', 'd': '9'},
            'correctAnswer': 'a',
        },
        'selectedAnswer': 'd',
        'isCorrect': False,
        'note': 'Wrong sign when moving terms: 2y - 3y = 2 + 7, so -y = 9, therefore y = -9',
    },
    {
        '_id': '6',
        'questionData': {
            'question': "The author uses the phrase 'a double-edged sword' to suggest that technology:",
            'section': 'TIẾNG ANH',
            'answers': {
                'a': 'Is always beneficial',
                'b': 'Has both positive and negative effects',
                'c': 'Is dangerous',
                'd': 'Should be avoided',
            },
            'correctAnswer': 'b',
        },
        'selectedAnswer': 'c',
        'isCorrect': False,
        'note': 'Double-edged sword means having both advantages and disadvantages',
    },
    {
        '_id': '7',
        'questionData': {
            'question': 'If the area of a square is 64 square units, what is its perimeter?',
            'section': 'TOÁN',
            'answers': {'a': '16', 'b': '24', 'c': '32', 'd': '64'},
            'correctAnswer': 'c',
        },
        'selectedAnswer': 'a',
        'isCorrect': False,
        'note': 'Side length = √64 = 8, so perimeter = 4 × 8 = 32',
    },
    {
        '_id': '8',
        'questionData': {
            'question': 'Which transition word best connects these two sentences in the passage?',
            'section': 'TIẾNG ANH',
            'answers': {'a': 'However', 'b': 'Therefore', 'c': 'Furthermore', 'd': 'Meanwhile'},
            'correctAnswer': 'a',
        },
        'selectedAnswer': 'c',
        'isCorrect': False,
        'note': "The second sentence contrasts with the first, so 'However' is correct",
    },
]


class InMemoryReviewRepository:
    """
    Question, note and status repository backed by process memory

    Features:
    - Seeded with the sample error logs by default
    - Optional simulated latency per call
    - Thread-safe (calls arrive on TaskRunner worker threads)

    Usage:
        repo = InMemoryReviewRepository(latency=Config.SAMPLE_DATA_LATENCY_S)
        store = RecordStore(repo)
    """

    def __init__(self, rows: Optional[List[Dict[str, Any]]] = None, latency: float = 0.0):
        self._lock = threading.Lock()
        self._rows = copy.deepcopy(SAMPLE_ERROR_LOGS if rows is None else rows)
        self._statuses: Dict[str, ReviewStatus] = {}
        self._latency = latency

    def _simulate_latency(self):
        if self._latency > 0:
            time.sleep(self._latency)

    def _find_row(self, record_id: str) -> Dict[str, Any]:
        for row in self._rows:
            if str(row.get('_id', row.get('id'))) == record_id:
                return row
        raise RecordNotFoundError("Record not found", details=record_id)

    @timed
    def fetch_all(self) -> List[Dict[str, Any]]:
        self._simulate_latency()
        with self._lock:
            return copy.deepcopy(self._rows)

    @timed
    def update_note(self, record_id: str, text: str) -> bool:
        self._simulate_latency()
        with self._lock:
            self._find_row(record_id)['note'] = text
        logger.info(f"Note updated for record {record_id}")
        return True

    @timed
    def update_status(self, record_id: str, status: ReviewStatus) -> bool:
        self._simulate_latency()
        with self._lock:
            self._find_row(record_id)
            self._statuses[record_id] = ReviewStatus(status)
        logger.info(f"Status of record {record_id} set to {ReviewStatus(status).value}")
        return True

    def get_status(self, record_id: str) -> Optional[ReviewStatus]:
        with self._lock:
            return self._statuses.get(record_id)


def create_sample_repository() -> InMemoryReviewRepository:
    """Repository used by the desktop app until a real backend is wired in."""
    return InMemoryReviewRepository(latency=Config.SAMPLE_DATA_LATENCY_S)


__all__ = [
    'QuestionRepository',
    'NoteRepository',
    'StatusRepository',
    'InMemoryReviewRepository',
    'SAMPLE_ERROR_LOGS',
    'create_sample_repository',
]
