"""
QuestionListModel - Qt Model for the visible page of question records

Pattern: Model/View architecture with QAbstractListModel
Holds only the current page; filtering and pagination happen upstream in
ListViewState.derive().
"""

from enum import IntEnum
from typing import Any, Dict, List, Optional, Sequence

from PyQt6.QtCore import QAbstractListModel, QModelIndex, Qt

from ..core.records import QuestionRecord
from ..core.review_states import ReviewStatus


class QuestionRole(IntEnum):
    """Custom Qt roles for question record data"""

    RecordIdRole = Qt.ItemDataRole.UserRole + 1
    QuestionTextRole = Qt.ItemDataRole.UserRole + 2
    SectionRole = Qt.ItemDataRole.UserRole + 3
    SelectedAnswerRole = Qt.ItemDataRole.UserRole + 4
    CorrectAnswerRole = Qt.ItemDataRole.UserRole + 5
    IsCorrectRole = Qt.ItemDataRole.UserRole + 6
    NoteRole = Qt.ItemDataRole.UserRole + 7

    # Review workflow
    ReviewStatusRole = Qt.ItemDataRole.UserRole + 20

    # Position in the filtered sequence (1-based, across pages)
    OrdinalRole = Qt.ItemDataRole.UserRole + 30

    # Complete record
    RecordRole = Qt.ItemDataRole.UserRole + 100


class QuestionListModel(QAbstractListModel):
    """
    Qt model for one page of question records

    Usage:
        model = QuestionListModel()
        model.set_records(page_view.items, first_ordinal=1)
        view.setModel(model)
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._records: List[QuestionRecord] = []
        self._statuses: Dict[str, ReviewStatus] = {}
        self._first_ordinal = 1

    def set_records(
        self,
        records: Sequence[QuestionRecord],
        statuses: Optional[Dict[str, ReviewStatus]] = None,
        first_ordinal: int = 1
    ):
        """
        Replace the page

        Args:
            records: Records on the page
            statuses: Committed review statuses by record id
            first_ordinal: Ordinal of the first record in the filtered list
        """
        self.beginResetModel()
        self._records = list(records)
        self._statuses = dict(statuses or {})
        self._first_ordinal = first_ordinal
        self.endResetModel()

    def refresh_record(self, record_id: str, status: Optional[ReviewStatus] = None) -> bool:
        """
        Re-emit a row after its note or status changed

        Returns:
            True if the record is on this page
        """
        for i, record in enumerate(self._records):
            if record.id == record_id:
                if status is not None:
                    self._statuses[record_id] = status
                index = self.index(i, 0)
                self.dataChanged.emit(index, index)
                return True
        return False

    def get_record_at_index(self, row: int) -> Optional[QuestionRecord]:
        if 0 <= row < len(self._records):
            return self._records[row]
        return None

    def rowCount(self, parent=QModelIndex()) -> int:
        """Return number of records on the page"""
        if parent.isValid():
            return 0
        return len(self._records)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if not index.isValid() or index.row() >= len(self._records):
            return None

        record = self._records[index.row()]
        question = record.question_data

        if role == Qt.ItemDataRole.DisplayRole:
            return question.question_text

        elif role == Qt.ItemDataRole.ToolTipRole:
            return record.note or None

        elif role == QuestionRole.RecordIdRole:
            return record.id

        elif role == QuestionRole.QuestionTextRole:
            return question.question_text

        elif role == QuestionRole.SectionRole:
            return question.section

        elif role == QuestionRole.SelectedAnswerRole:
            return record.selected_answer_letter

        elif role == QuestionRole.CorrectAnswerRole:
            return question.correct_answer_letter

        elif role == QuestionRole.IsCorrectRole:
            return record.is_correct

        elif role == QuestionRole.NoteRole:
            return record.note

        elif role == QuestionRole.ReviewStatusRole:
            return self._statuses.get(record.id, ReviewStatus.NEEDS_REVIEW).value

        elif role == QuestionRole.OrdinalRole:
            return self._first_ordinal + index.row()

        elif role == QuestionRole.RecordRole:
            return record

        return None


__all__ = ['QuestionListModel', 'QuestionRole']
