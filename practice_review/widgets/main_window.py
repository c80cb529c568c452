"""
PracticeErrorWindow - Error list window

Pattern: QMainWindow with a list view over a page model. Tab, page and
page-size logic lives in ErrorListController; review state lives in the
ReviewSession owned by ReviewModalController.
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QTabBar, QListView, QComboBox, QStackedWidget, QDialog
)
from PyQt6.QtCore import Qt, QSettings, QModelIndex
from PyQt6.QtGui import QCloseEvent

from ..config import Config
from ..core.exceptions import RecordNotFoundError
from ..core.review_states import ReviewStatus
from ..events.event_bus import get_event_bus
from ..models.list_view_state import PageView
from ..models.question_list_model import QuestionListModel, QuestionRole
from ..models.section_filter import Category
from ..services.localization_service import get_localization_service
from ..services.navigation_service import get_navigation_service
from .controllers import ErrorListController
from .dialogs import ReviewDialog, PracticeTypeDialog
from .status_bar import StatusBar

logger = logging.getLogger(__name__)

# Tab order matches Category values
_TAB_LABEL_KEYS = {
    Category.ALL: 'practice.tabs.all',
    Category.LANGUAGE: 'practice.tabs.readingWriting',
    Category.MATH: 'practice.tabs.math',
}

# Stack pages
_PAGE_LIST = 0
_PAGE_LOADING = 1
_PAGE_EMPTY = 2


class PracticeErrorWindow(QMainWindow):
    """
    Main application window

    Features:
    - Back navigation and practice launchers
    - Section tabs with counts
    - Paged question list with page-size selector
    - Review dialog on double-click
    - Window geometry persistence

    Layout:
        +------------------------------------------+
        | < Back   Error analysis (8)   [lang]     |
        | [Practice by type] [Practice all]        |
        | [All] [Reading & Writing] [Math]         |
        +------------------------------------------+
        | Question list                            |
        +------------------------------------------+
        | [Prev] Page 1 of 1 [Next]  Per page [10] |
        | StatusBar                                |
        +------------------------------------------+
    """

    def __init__(
        self,
        store,
        modal_controller,
        navigation=None,
        i18n=None,
        event_bus=None,
        parent=None
    ):
        super().__init__(parent)

        self._store = store
        self._modal_controller = modal_controller
        self._navigation = navigation or get_navigation_service()
        self._i18n = i18n or get_localization_service()
        self._event_bus = event_bus or get_event_bus()

        self._list_controller = ErrorListController(store, event_bus=self._event_bus, parent=self)
        self._model = QuestionListModel(self)

        self._setup_window()
        self._create_widgets()
        self._create_layout()
        self._connect_signals()
        self._retranslate()
        self._load_settings()

        self._set_loading(self._store.is_loading)
        self._render(self._list_controller.current_view())

    def _setup_window(self):
        """Configure window properties"""
        self.setWindowTitle(f"{Config.APP_NAME} {Config.APP_VERSION}")
        self.resize(Config.DEFAULT_WINDOW_WIDTH, Config.DEFAULT_WINDOW_HEIGHT)

    def _create_widgets(self):
        """Create UI widgets"""
        self._back_btn = QPushButton()
        self._back_btn.setFlat(True)

        self._title_label = QLabel()
        self._title_label.setStyleSheet("font-size: 18px; font-weight: bold;")
        self._count_label = QLabel()
        self._count_label.setStyleSheet("color: #808080;")

        self._language_combo = QComboBox()
        for code in self._i18n.available_languages():
            self._language_combo.addItem(code.upper(), code)
        self._language_combo.setCurrentIndex(max(self._language_combo.findData(self._i18n.language), 0))

        self._practice_type_btn = QPushButton()
        self._practice_all_btn = QPushButton()
        self._practice_all_btn.setStyleSheet("""
            QPushButton { background: #2196F3; color: white; padding: 6px 16px; border-radius: 4px; }
        """)

        self._tab_bar = QTabBar()
        for _ in _TAB_LABEL_KEYS:
            self._tab_bar.addTab("")

        self._list_view = QListView()
        self._list_view.setModel(self._model)
        self._list_view.setWordWrap(True)
        self._list_view.setUniformItemSizes(False)
        self._list_view.setSpacing(4)

        self._loading_label = QLabel()
        self._loading_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._empty_label = QLabel()
        self._empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._empty_label.setStyleSheet("color: #808080;")

        self._content_stack = QStackedWidget()
        self._content_stack.insertWidget(_PAGE_LIST, self._list_view)
        self._content_stack.insertWidget(_PAGE_LOADING, self._loading_label)
        self._content_stack.insertWidget(_PAGE_EMPTY, self._empty_label)

        self._prev_btn = QPushButton()
        self._next_btn = QPushButton()
        self._page_label = QLabel()
        self._page_size_label = QLabel()
        self._page_size_combo = QComboBox()
        for size in Config.PAGE_SIZE_OPTIONS:
            self._page_size_combo.addItem(str(size), size)

        self._status_bar = StatusBar(event_bus=self._event_bus, i18n=self._i18n)

    def _create_layout(self):
        """Create window layout"""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QVBoxLayout(central_widget)
        main_layout.setContentsMargins(16, 12, 16, 0)
        main_layout.setSpacing(10)

        header = QHBoxLayout()
        header.addWidget(self._back_btn)
        header.addSpacing(12)
        header.addWidget(self._title_label)
        header.addWidget(self._count_label)
        header.addStretch()
        header.addWidget(self._language_combo)
        main_layout.addLayout(header)

        practice_row = QHBoxLayout()
        practice_row.addWidget(self._practice_type_btn)
        practice_row.addWidget(self._practice_all_btn)
        practice_row.addStretch()
        main_layout.addLayout(practice_row)

        main_layout.addWidget(self._tab_bar)
        main_layout.addWidget(self._content_stack, 1)

        pagination = QHBoxLayout()
        pagination.addWidget(self._prev_btn)
        pagination.addWidget(self._page_label)
        pagination.addWidget(self._next_btn)
        pagination.addStretch()
        pagination.addWidget(self._page_size_label)
        pagination.addWidget(self._page_size_combo)
        main_layout.addLayout(pagination)

        main_layout.addWidget(self._status_bar)

    def _connect_signals(self):
        """Connect signals and slots"""
        self._back_btn.clicked.connect(self._on_back_clicked)
        self._practice_type_btn.clicked.connect(self._on_practice_by_type_clicked)
        self._practice_all_btn.clicked.connect(self._list_controller.request_practice_all)
        self._language_combo.currentIndexChanged.connect(self._on_language_selected)

        self._tab_bar.currentChanged.connect(self._list_controller.set_category)
        self._prev_btn.clicked.connect(self._list_controller.previous_page)
        self._next_btn.clicked.connect(self._list_controller.next_page)
        self._page_size_combo.currentIndexChanged.connect(self._on_page_size_selected)
        self._list_view.doubleClicked.connect(self._on_item_double_clicked)

        self._list_controller.view_changed.connect(self._render)

        self._store.loading_changed.connect(self._set_loading)
        self._store.load_failed.connect(self._on_load_failed)
        self._store.record_updated.connect(self._on_record_updated)
        self._store.status_updated.connect(self._on_status_updated)

        self._i18n.language_changed.connect(self._retranslate)

    # ==================== RENDERING ====================

    def _retranslate(self, *_):
        i18n = self._i18n
        self._back_btn.setText(f"← {i18n.resolve('practice.backToPractice')}")
        self._title_label.setText(i18n.resolve('practice.errorAnalysis'))
        self._practice_type_btn.setText(i18n.resolve('practice.practiceByType'))
        self._practice_all_btn.setText(i18n.resolve('practice.practiceAll'))
        self._loading_label.setText(i18n.resolve('common.loading'))
        self._empty_label.setText(i18n.resolve('errorLogs.empty'))
        self._prev_btn.setText(i18n.resolve('common.previous'))
        self._next_btn.setText(i18n.resolve('common.next'))
        self._page_size_label.setText(i18n.resolve('practice.perPage'))
        self._update_tab_labels()
        self._render(self._list_controller.current_view())

    def _update_tab_labels(self):
        counts = self._list_controller.category_counts()
        for category, key in _TAB_LABEL_KEYS.items():
            self._tab_bar.setTabText(int(category), f"{self._i18n.resolve(key)} ({counts.get(category, 0)})")

    def _render(self, view: PageView):
        state = view.state
        first_ordinal = (state.page - 1) * state.page_size + 1
        self._model.set_records(view.items, self._store.statuses, first_ordinal)

        self._tab_bar.blockSignals(True)
        self._tab_bar.setCurrentIndex(int(state.category))
        self._tab_bar.blockSignals(False)

        self._page_size_combo.blockSignals(True)
        index = self._page_size_combo.findData(state.page_size)
        if index < 0:
            self._page_size_combo.addItem(str(state.page_size), state.page_size)
            index = self._page_size_combo.count() - 1
        self._page_size_combo.setCurrentIndex(index)
        self._page_size_combo.blockSignals(False)

        self._page_label.setText(self._i18n.resolve(
            'practice.pageOf', page=state.page if view.page_count else 0, pages=view.page_count
        ))
        self._prev_btn.setEnabled(view.has_previous)
        self._next_btn.setEnabled(view.has_next)

        total = len(self._store)
        self._count_label.setText(f"({total} {self._i18n.resolve('errorLogs.question')})")
        self._status_bar.set_record_count(total)
        self._update_tab_labels()

        if not self._store.is_loading:
            self._content_stack.setCurrentIndex(_PAGE_LIST if view.items else _PAGE_EMPTY)

    def _set_loading(self, loading: bool):
        if loading:
            self._content_stack.setCurrentIndex(_PAGE_LOADING)
        else:
            self._render(self._list_controller.current_view())

    # ==================== HANDLERS ====================

    def _on_back_clicked(self):
        self._modal_controller.close()
        self._navigation.go_back()

    def _on_practice_by_type_clicked(self):
        dialog = PracticeTypeDialog(i18n=self._i18n, parent=self)
        if dialog.exec() == QDialog.DialogCode.Accepted and dialog.selected_type():
            self._list_controller.request_practice_by_type(dialog.selected_type())

    def _on_page_size_selected(self, index: int):
        page_size = self._page_size_combo.itemData(index)
        if page_size:
            self._list_controller.set_page_size(int(page_size))

    def _on_language_selected(self, index: int):
        language = self._language_combo.itemData(index)
        if language:
            self._i18n.set_language(language, persist=True)

    def _on_item_double_clicked(self, index: QModelIndex):
        record_id = index.data(QuestionRole.RecordIdRole)
        if record_id:
            self.open_review(record_id)

    def open_review(self, record_id: str) -> Optional[ReviewDialog]:
        """Open the review dialog for a record (modal)"""
        try:
            self._modal_controller.open(record_id)
        except RecordNotFoundError as e:
            logger.warning(f"Cannot open review: {e}")
            self._event_bus.emit_error(str(e))
            return None

        dialog = ReviewDialog(self._modal_controller, i18n=self._i18n, event_bus=self._event_bus, parent=self)
        dialog.exec()
        return dialog

    def _on_load_failed(self, error_message: str):
        self._event_bus.emit_error(self._i18n.resolve('errorLogs.loadError'))

    def _on_record_updated(self, record_id: str):
        self._model.refresh_record(record_id)

    def _on_status_updated(self, record_id: str, status: str):
        self._model.refresh_record(record_id, ReviewStatus(status))

    # ==================== SETTINGS ====================

    def _load_settings(self):
        """Load window geometry"""
        settings = QSettings(Config.APP_AUTHOR, Config.APP_NAME)
        if settings.contains("window/geometry"):
            self.restoreGeometry(settings.value("window/geometry"))

    def _save_settings(self):
        """Save window geometry"""
        settings = QSettings(Config.APP_AUTHOR, Config.APP_NAME)
        settings.setValue("window/geometry", self.saveGeometry())

    def closeEvent(self, event: QCloseEvent):
        """Handle window close"""
        self._modal_controller.close()
        self._save_settings()
        event.accept()


__all__ = ['PracticeErrorWindow']
