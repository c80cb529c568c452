"""
Utility functions for Practice Review

Logging setup and helper decorators.
"""

from .logging_config import LoggingConfig
from .decorators import timed

__all__ = [
    'LoggingConfig',
    'timed',
]
