"""
ErrorListController tests - tab/page/page-size handling over the store.
"""

from unittest.mock import MagicMock

import pytest

from practice_review.models.section_filter import Category
from practice_review.widgets.controllers.error_list_controller import ErrorListController


@pytest.fixture
def event_bus():
    return MagicMock()


@pytest.fixture
def controller(loaded_store, event_bus):
    return ErrorListController(loaded_store, event_bus=event_bus)


class TestErrorListController:
    """Test ErrorListController state changes."""

    def test_initial_view(self, controller):
        view = controller.current_view()
        assert [r.id for r in view.items] == [str(i) for i in range(1, 9)]
        assert view.state.page == 1

    def test_math_tab(self, controller):
        view = controller.set_category(Category.MATH)
        assert [r.id for r in view.items] == ['1', '3', '5', '7']

    def test_second_page_of_two(self, controller):
        controller.set_page_size(2)
        view = controller.set_page(2)
        assert [r.id for r in view.items] == ['3', '4']

    def test_tab_change_resets_page_and_page_size(self, controller):
        controller.set_page_size(2)
        controller.set_page(3)

        view = controller.set_category(Category.LANGUAGE)

        assert view.state.page == 1
        assert view.state.page_size == 10
        assert [r.id for r in view.items] == ['2', '4', '6', '8']

    def test_page_size_change_resets_page(self, controller):
        controller.set_page_size(2)
        controller.set_page(4)
        view = controller.set_page_size(5)
        assert view.state.page == 1
        assert [r.id for r in view.items] == ['1', '2', '3', '4', '5']

    def test_invalid_page_size_is_ignored(self, controller):
        view = controller.set_page_size(0)
        assert view.state.page_size == 10

    def test_page_is_clamped(self, controller):
        controller.set_page_size(3)
        assert controller.set_page(99).state.page == 3
        assert controller.set_page(-4).state.page == 1

    def test_next_and_previous(self, controller):
        controller.set_page_size(3)
        assert controller.next_page().state.page == 2
        assert controller.next_page().state.page == 3
        assert controller.next_page().state.page == 3
        assert controller.previous_page().state.page == 2

    def test_view_changed_emitted(self, controller):
        views = []
        controller.view_changed.connect(views.append)
        controller.set_category(Category.MATH)
        assert len(views) == 1
        assert views[0].state.category is Category.MATH

    def test_reload_resets_page(self, controller, loaded_store, runner):
        controller.set_page_size(2)
        controller.set_page(3)

        loaded_store.load()
        runner.run_all()

        assert controller.state.page == 1
        assert controller.state.page_size == 2

    def test_category_counts(self, controller):
        counts = controller.category_counts()
        assert counts[Category.ALL] == 8
        assert counts[Category.MATH] == 4

    def test_practice_requests_go_to_event_bus(self, controller, event_bus):
        controller.request_practice_by_type('algebra')
        controller.request_practice_all()
        event_bus.emit_practice_by_type.assert_called_once_with('algebra')
        event_bus.emit_practice_all.assert_called_once_with()
