"""
Dialog components for Practice Review
"""

from .review_dialog import ReviewDialog
from .practice_type_dialog import PracticeTypeDialog

__all__ = [
    'ReviewDialog',
    'PracticeTypeDialog',
]
