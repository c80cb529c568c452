"""
Widget tests - main window and dialogs wired to real services (offscreen).
"""

from unittest.mock import MagicMock

import pytest
from PyQt6.QtWidgets import QDialog

from practice_review.core.review_states import EditMode, ReviewStatus
from practice_review.events.event_bus import EventBus
from practice_review.models.question_list_model import QuestionRole
from practice_review.services.localization_service import LocalizationService
from practice_review.services.review_modal_controller import ReviewModalController
from practice_review.widgets.dialogs import PracticeTypeDialog, ReviewDialog
from practice_review.widgets.main_window import PracticeErrorWindow


@pytest.fixture
def i18n(qapp):
    return LocalizationService()


@pytest.fixture
def event_bus(qapp):
    return EventBus()


@pytest.fixture
def modal_controller(loaded_store, repository, runner, event_bus):
    return ReviewModalController(
        loaded_store,
        note_repository=repository,
        status_repository=repository,
        runner=runner,
        event_bus=event_bus,
    )


@pytest.fixture
def navigation():
    return MagicMock()


@pytest.fixture
def window(loaded_store, modal_controller, navigation, i18n, event_bus):
    window = PracticeErrorWindow(
        loaded_store, modal_controller, navigation=navigation, i18n=i18n, event_bus=event_bus
    )
    yield window
    window.deleteLater()


class TestPracticeErrorWindow:
    """Test the error list window."""

    def test_shows_first_page(self, window):
        model = window._list_view.model()
        assert model.rowCount() == 8
        assert model.index(0, 0).data(QuestionRole.RecordIdRole) == '1'

    def test_tab_switch_filters(self, window):
        window._tab_bar.setCurrentIndex(2)
        model = window._list_view.model()
        assert [model.index(row, 0).data(QuestionRole.RecordIdRole) for row in range(model.rowCount())] == ['1', '3', '5', '7']

    def test_page_size_selector(self, window):
        window._page_size_combo.setCurrentIndex(window._page_size_combo.findData(5))
        assert window._list_view.model().rowCount() == 5
        assert window._next_btn.isEnabled()
        assert not window._prev_btn.isEnabled()

    def test_back_navigates(self, window, navigation):
        window._back_btn.click()
        navigation.go_back.assert_called_once_with()

    def test_committed_note_refreshes_row(self, window, loaded_store):
        loaded_store.apply_note('1', 'fresh note')
        model = window._list_view.model()
        assert model.index(0, 0).data(QuestionRole.NoteRole) == 'fresh note'

    def test_committed_status_refreshes_row(self, window, loaded_store):
        loaded_store.apply_status('2', ReviewStatus.REVIEWED)
        model = window._list_view.model()
        assert model.index(1, 0).data(QuestionRole.ReviewStatusRole) == 'reviewed'

    def test_language_switch_retranslates(self, window, i18n):
        i18n.set_language('vi')
        assert window._title_label.text() == "Phân tích lỗi sai"


class TestReviewDialog:
    """Test the review dialog bound to a session."""

    @pytest.fixture
    def dialog(self, modal_controller, i18n, event_bus):
        modal_controller.open('1')
        dialog = ReviewDialog(modal_controller, i18n=i18n, event_bus=event_bus)
        yield dialog
        dialog.deleteLater()

    def test_empty_note_shows_inline_error(self, dialog, modal_controller, repository):
        session = modal_controller.active_session
        dialog._edit_btn.click()
        assert session.mode is EditMode.EDITING

        dialog._note_edit.setPlainText("")
        dialog._save_btn.click()

        assert not dialog._error_label.isHidden()
        assert dialog._error_label.text() == "Please enter your notes before saving"
        assert session.mode is EditMode.EDITING
        repository.update_note.assert_not_called()

    def test_save_note_through_dialog(self, dialog, modal_controller, loaded_store, runner):
        session = modal_controller.active_session
        dialog._edit_btn.click()
        dialog._note_edit.setPlainText("typed in the dialog")
        dialog._save_btn.click()
        assert not dialog._save_btn.isEnabled()

        runner.complete()

        assert session.mode is EditMode.VIEWING
        assert dialog._note_view.text() == "typed in the dialog"
        assert loaded_store.get('1').note == "typed in the dialog"

    def test_status_radio_updates_optimistically(self, dialog, modal_controller, repository, runner):
        session = modal_controller.active_session
        reviewed_button = dialog._status_buttons[ReviewStatus.REVIEWED]

        reviewed_button.click()
        assert session.status is ReviewStatus.REVIEWED
        assert not reviewed_button.isEnabled()

        repository.update_status.side_effect = RuntimeError("offline")
        runner.complete()

        assert session.status is ReviewStatus.NEEDS_REVIEW
        assert dialog._status_buttons[ReviewStatus.NEEDS_REVIEW].isChecked()
        assert dialog._error_label.text() == "Could not update the status"

    def test_closing_dialog_closes_session(self, dialog, modal_controller):
        session = modal_controller.active_session
        dialog.reject()
        assert not modal_controller.is_open
        assert session.is_disposed


class TestPracticeTypeDialog:
    """Test the practice type chooser."""

    def test_start_requires_a_type(self, qapp, i18n):
        dialog = PracticeTypeDialog(i18n=i18n)
        assert dialog.selected_type() is None
        assert not dialog._start_btn.isEnabled()

        assert dialog.set_selected_type('geometry')
        assert dialog.selected_type() == 'geometry'
        assert dialog._start_btn.isEnabled()

    def test_unknown_type(self, qapp, i18n):
        dialog = PracticeTypeDialog(i18n=i18n)
        assert not dialog.set_selected_type('chemistry')

    def test_accept(self, qapp, i18n):
        dialog = PracticeTypeDialog(i18n=i18n)
        dialog.set_selected_type('reading')
        dialog._start_btn.click()
        assert dialog.result() == QDialog.DialogCode.Accepted.value
