"""
ListViewState - Immutable category/page/page-size state of the error list.

The single object passed between SectionFilter and Paginator. Changing the
category or the page size yields a state whose page is back at 1, so a
derived page never points past the end of a shorter sequence.
"""

from dataclasses import dataclass, field, replace
from typing import Sequence, Tuple

from ..config import Config
from ..core.records import QuestionRecord
from .paginator import paginate, page_count
from .section_filter import Category, filter_records


@dataclass(frozen=True)
class PageView:
    """
    One derived page of the list.

    Attributes:
        items: Records on the page, in order
        total: Size of the filtered sequence
        page_count: Pages in the filtered sequence
        state: State the page was derived from
    """
    items: Tuple[QuestionRecord, ...]
    total: int
    page_count: int
    state: 'ListViewState'

    @property
    def has_previous(self) -> bool:
        return self.state.page > 1

    @property
    def has_next(self) -> bool:
        return self.state.page < self.page_count


@dataclass(frozen=True)
class ListViewState:
    """
    Category, page and page size of the error list.

    Usage:
        state = ListViewState()
        state = state.with_category(Category.MATH)
        view = state.derive(store.records)
    """
    category: Category = Category.ALL
    page: int = 1
    page_size: int = field(default=Config.DEFAULT_PAGE_SIZE)

    def with_category(self, category) -> 'ListViewState':
        """Switch tab: page back to 1 and page size back to the default."""
        try:
            category = Category(category)
        except ValueError:
            category = Category.ALL
        return replace(self, category=category, page=1, page_size=Config.DEFAULT_PAGE_SIZE)

    def with_page_size(self, page_size: int) -> 'ListViewState':
        """Change page size: page back to 1."""
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")
        return replace(self, page=1, page_size=page_size)

    def with_page(self, page: int) -> 'ListViewState':
        """Go to a page (caller keeps it within range)."""
        return replace(self, page=page)

    def reset_page(self) -> 'ListViewState':
        """Page back to 1 (the filtered sequence changed)."""
        return replace(self, page=1)

    def filtered(self, records: Sequence[QuestionRecord]) -> Sequence[QuestionRecord]:
        return filter_records(records, self.category)

    def derive(self, records: Sequence[QuestionRecord]) -> PageView:
        """Filter then paginate records with this state."""
        filtered = self.filtered(records)
        return PageView(
            items=tuple(paginate(filtered, self.page, self.page_size)),
            total=len(filtered),
            page_count=page_count(len(filtered), self.page_size),
            state=self,
        )


__all__ = ['ListViewState', 'PageView']
