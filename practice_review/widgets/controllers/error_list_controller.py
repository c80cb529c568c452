"""
ErrorListController - Tab, page and page-size handling for the error list

Extracts list navigation logic from PracticeErrorWindow. Holds the current
ListViewState and re-derives the visible page whenever the state or the
store's records change.
"""

import logging
from typing import Dict, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from ...models.list_view_state import ListViewState, PageView
from ...models.section_filter import Category, count_by_category

logger = logging.getLogger(__name__)


class ErrorListController(QObject):
    """
    Manages the list view state of the error list.

    Handles:
    - Tab (category) switches, page-size changes, page navigation
    - Page reset when the filtered sequence changes
    - Practice launch requests (forwarded to the event bus)

    Signals:
        view_changed(object): PageView to display
    """

    view_changed = pyqtSignal(object)

    def __init__(self, store, event_bus=None, parent=None):
        """
        Initialize error list controller.

        Args:
            store: RecordStore providing the records
            event_bus: Event bus for practice launch requests
            parent: Parent QObject
        """
        super().__init__(parent)
        self._store = store
        self._event_bus = event_bus
        self._state = ListViewState()

        self._store.records_changed.connect(self._on_records_changed)

    @property
    def state(self) -> ListViewState:
        return self._state

    def current_view(self) -> PageView:
        return self._state.derive(self._store.records)

    def category_counts(self) -> Dict[Category, int]:
        return count_by_category(self._store.records)

    # ==================== STATE CHANGES ====================

    def set_category(self, category) -> PageView:
        """Switch tab; page and page size go back to their defaults."""
        return self._apply(self._state.with_category(category))

    def set_page_size(self, page_size: int) -> PageView:
        """Change page size; page goes back to 1."""
        if page_size < 1:
            logger.warning(f"Ignoring invalid page size: {page_size}")
            return self.current_view()
        return self._apply(self._state.with_page_size(page_size))

    def set_page(self, page: int) -> PageView:
        """Go to a page, clamped to the pages of the filtered sequence."""
        view = self.current_view()
        page = max(1, min(page, max(view.page_count, 1)))
        if page == self._state.page:
            return view
        return self._apply(self._state.with_page(page))

    def next_page(self) -> PageView:
        return self.set_page(self._state.page + 1)

    def previous_page(self) -> PageView:
        return self.set_page(self._state.page - 1)

    def _apply(self, state: ListViewState) -> PageView:
        self._state = state
        view = state.derive(self._store.records)
        logger.debug(
            f"List view: category={state.category.name} page={state.page} "
            f"page_size={state.page_size} ({len(view.items)}/{view.total})"
        )
        self.view_changed.emit(view)
        return view

    def _on_records_changed(self, _count: int):
        self._apply(self._state.reset_page())

    # ==================== PRACTICE LAUNCH ====================

    def request_practice_by_type(self, practice_type: str):
        logger.info(f"Practice by type requested: {practice_type}")
        if self._event_bus is not None:
            self._event_bus.emit_practice_by_type(practice_type)

    def request_practice_all(self):
        logger.info("Practice all requested")
        if self._event_bus is not None:
            self._event_bus.emit_practice_all()


__all__ = ['ErrorListController']
