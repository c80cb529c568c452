"""
RecordStore - The session's ordered set of question records.

Loads records through a QuestionRepository on the TaskRunner and holds them
for the list view. Nothing edits records directly: a committed note save is
applied with apply_note(), which replaces the note of the record in place
(identity and order preserved).

The store also remembers review statuses committed during this run, and is
the status source used when a review dialog opens.
"""

import functools
import logging
from typing import Any, Dict, List, Optional, Tuple

from PyQt6.QtCore import QObject, pyqtSignal

from ..core.exceptions import LoadError, ValidationError
from ..core.records import QuestionRecord
from ..core.review_states import ReviewStatus
from .task_runner import TaskRunner, get_task_runner

logger = logging.getLogger(__name__)


class RecordStore(QObject):
    """
    Holds the loaded question records.

    Signals:
        loading_changed(bool): Load started / finished
        records_changed(int): Record sequence replaced (new count)
        load_failed(str): Load failed; the sequence is now empty
        record_updated(str): A record's note was committed (record_id)
        status_updated(str, str): A review status was committed (record_id, status)
    """

    loading_changed = pyqtSignal(bool)
    records_changed = pyqtSignal(int)
    load_failed = pyqtSignal(str)
    record_updated = pyqtSignal(str)
    status_updated = pyqtSignal(str, str)

    def __init__(self, repository, runner: Optional[TaskRunner] = None, parent=None):
        super().__init__(parent)
        self._repository = repository
        self._runner = runner or get_task_runner()

        self._records: List[QuestionRecord] = []
        self._index: Dict[str, QuestionRecord] = {}
        self._statuses: Dict[str, ReviewStatus] = {}

        self._loading = False
        self._load_generation = 0

    # ==================== LOADING ====================

    def load(self):
        """
        Fetch records asynchronously.

        A load issued while another is in flight supersedes it; only the
        latest completion is applied.
        """
        self._load_generation += 1
        generation = self._load_generation
        self._set_loading(True)
        logger.info("Loading error logs...")

        self._runner.submit(
            self._repository.fetch_all,
            on_success=functools.partial(self._on_load_succeeded, generation),
            on_failure=functools.partial(self._on_load_failed, generation),
        )

    def _on_load_succeeded(self, generation: int, rows: Any):
        if generation != self._load_generation:
            logger.debug(f"Ignoring superseded load #{generation}")
            return

        try:
            records = self._parse_rows(rows)
        except (LoadError, ValidationError) as e:
            self._on_load_failed(generation, str(e))
            return

        self._records = records
        self._index = {record.id: record for record in records}
        self._set_loading(False)
        logger.info(f"Loaded {len(records)} error logs")
        self.records_changed.emit(len(records))

    def _on_load_failed(self, generation: int, error_message: str):
        if generation != self._load_generation:
            logger.debug(f"Ignoring superseded load failure #{generation}")
            return

        logger.error(f"Error fetching error logs: {error_message}")
        self._records = []
        self._index = {}
        self._set_loading(False)
        self.records_changed.emit(0)
        self.load_failed.emit(error_message)

    @staticmethod
    def _parse_rows(rows: Any) -> List[QuestionRecord]:
        if rows is None or isinstance(rows, (str, bytes, dict)):
            raise LoadError("Repository returned no record list", details=type(rows).__name__)
        try:
            rows = iter(rows)
        except TypeError:
            raise LoadError("Repository returned no record list", details=type(rows).__name__) from None

        records = []
        seen = set()
        for row in rows:
            if isinstance(row, QuestionRecord):
                record = row
            elif isinstance(row, dict):
                record = QuestionRecord.from_dict(row)
            else:
                raise LoadError("Unexpected record row", details=type(row).__name__)
            if record.id in seen:
                raise LoadError("Duplicate record id", details=record.id)
            seen.add(record.id)
            records.append(record)
        return records

    def _set_loading(self, loading: bool):
        if self._loading != loading:
            self._loading = loading
            self.loading_changed.emit(loading)

    @property
    def is_loading(self) -> bool:
        return self._loading

    # ==================== ACCESS ====================

    @property
    def records(self) -> Tuple[QuestionRecord, ...]:
        """Snapshot of the ordered record sequence"""
        return tuple(self._records)

    def get(self, record_id: str) -> Optional[QuestionRecord]:
        return self._index.get(record_id)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: str) -> bool:
        return record_id in self._index

    def status_for(self, record_id: str) -> ReviewStatus:
        """Committed review status of a record (NEEDS_REVIEW if none)"""
        return self._statuses.get(record_id, ReviewStatus.NEEDS_REVIEW)

    @property
    def statuses(self) -> Dict[str, ReviewStatus]:
        return dict(self._statuses)

    # ==================== COMMITS ====================

    def apply_note(self, record_id: str, text: str) -> bool:
        """
        Apply a committed note to its record.

        Returns:
            True if the record exists
        """
        record = self._index.get(record_id)
        if record is None:
            logger.warning(f"Committed note for unknown record {record_id}")
            return False

        record.note = text
        self.record_updated.emit(record_id)
        return True

    def apply_status(self, record_id: str, status: ReviewStatus):
        """Remember a committed review status."""
        status = ReviewStatus(status)
        self._statuses[record_id] = status
        self.status_updated.emit(record_id, status.value)


__all__ = ['RecordStore']
