"""
SectionFilter - Derive the records of one subject section.

Pure functions; the input sequence is never modified.
"""

from enum import IntEnum
from typing import List, Sequence

from ..config import Config
from ..core.records import QuestionRecord, normalize_section


class Category(IntEnum):
    """Section tabs of the error list (values are tab indices)"""
    ALL = 0
    LANGUAGE = 1
    MATH = 2


# Category -> section tag it selects
CATEGORY_SECTIONS = {
    Category.LANGUAGE: Config.SECTION_LANGUAGE,
    Category.MATH: Config.SECTION_MATH,
}


def filter_records(records: Sequence[QuestionRecord], category) -> Sequence[QuestionRecord]:
    """
    Return the records belonging to a category.

    Args:
        records: Ordered record sequence
        category: Category (or its int value). Unknown values act as ALL.

    Returns:
        records itself for ALL, otherwise a new list with the matching
        records in their original order
    """
    try:
        category = Category(category)
    except ValueError:
        return records

    section = CATEGORY_SECTIONS.get(category)
    if section is None:
        return records

    return [
        record for record in records
        if normalize_section(record.question_data.section) == section
    ]


def count_by_category(records: Sequence[QuestionRecord]) -> dict:
    """Count records per category (tab badges)."""
    counts = {Category.ALL: len(records)}
    for category in CATEGORY_SECTIONS:
        counts[category] = len(filter_records(records, category))
    return counts


__all__ = ['Category', 'CATEGORY_SECTIONS', 'filter_records', 'count_by_category', 'normalize_section']
