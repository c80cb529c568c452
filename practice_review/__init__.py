"""
Practice Review

Desktop review tool for incorrectly answered practice questions.
"""

__version__ = "1.0.0"
__author__ = "Practice Review Team"

__all__ = ['__version__', '__author__']
