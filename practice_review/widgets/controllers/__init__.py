"""
Controllers for Practice Review widgets
"""

from .error_list_controller import ErrorListController

__all__ = ['ErrorListController']
