"""
Models for Practice Review

- Pure derivations: section filter, paginator, list view state
- Qt list model for the visible page
"""

from .section_filter import Category, filter_records, count_by_category
from .paginator import paginate, page_count
from .list_view_state import ListViewState, PageView
from .question_list_model import QuestionListModel, QuestionRole

__all__ = [
    'Category',
    'filter_records',
    'count_by_category',
    'paginate',
    'page_count',
    'ListViewState',
    'PageView',
    'QuestionListModel',
    'QuestionRole',
]
