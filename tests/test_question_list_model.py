"""
QuestionListModel tests - roles and row refresh.
"""

import pytest
from PyQt6.QtCore import Qt

from practice_review.core.review_states import ReviewStatus
from practice_review.models.question_list_model import QuestionListModel, QuestionRole


@pytest.fixture
def model(qapp, sample_records):
    model = QuestionListModel()
    model.set_records(sample_records[2:4], {'4': ReviewStatus.REVIEWED}, first_ordinal=3)
    return model


class TestQuestionListModel:
    """Test QuestionListModel data access."""

    def test_row_count(self, model):
        assert model.rowCount() == 2

    def test_roles(self, model, sample_records):
        index = model.index(0, 0)
        record = sample_records[2]
        assert index.data(Qt.ItemDataRole.DisplayRole) == record.question_data.question_text
        assert index.data(QuestionRole.RecordIdRole) == '3'
        assert index.data(QuestionRole.SectionRole) == 'TOÁN'
        assert index.data(QuestionRole.SelectedAnswerRole) == 'b'
        assert index.data(QuestionRole.CorrectAnswerRole) == 'a'
        assert index.data(QuestionRole.IsCorrectRole) is False
        assert index.data(QuestionRole.NoteRole) == record.note
        assert index.data(QuestionRole.RecordRole) is record

    def test_ordinal_continues_across_pages(self, model):
        assert model.index(0, 0).data(QuestionRole.OrdinalRole) == 3
        assert model.index(1, 0).data(QuestionRole.OrdinalRole) == 4

    def test_review_status_role(self, model):
        assert model.index(0, 0).data(QuestionRole.ReviewStatusRole) == 'needs_review'
        assert model.index(1, 0).data(QuestionRole.ReviewStatusRole) == 'reviewed'

    def test_invalid_index(self, model):
        assert model.data(model.index(5, 0), QuestionRole.RecordIdRole) is None
        assert model.get_record_at_index(5) is None

    def test_refresh_record_emits_data_changed(self, model):
        changed = []
        model.dataChanged.connect(lambda top_left, *_: changed.append(top_left.row()))

        assert model.refresh_record('4', ReviewStatus.NEEDS_REVIEW)

        assert changed == [1]
        assert model.index(1, 0).data(QuestionRole.ReviewStatusRole) == 'needs_review'

    def test_refresh_record_off_page(self, model):
        assert not model.refresh_record('1')

    def test_set_records_resets(self, model, sample_records):
        resets = []
        model.modelReset.connect(lambda: resets.append(True))
        model.set_records([])
        assert model.rowCount() == 0
        assert resets == [True]
