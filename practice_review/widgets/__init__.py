"""
UI widgets for Practice Review
"""

from .status_bar import StatusBar
from .main_window import PracticeErrorWindow

# Controllers
from .controllers import ErrorListController

# Dialogs
from .dialogs import ReviewDialog, PracticeTypeDialog

__all__ = [
    'StatusBar',
    'PracticeErrorWindow',
    'ErrorListController',
    'ReviewDialog',
    'PracticeTypeDialog',
]
