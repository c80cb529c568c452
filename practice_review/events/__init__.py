"""
Event system for Practice Review

Central event bus for cross-widget communication.
"""

from .event_bus import EventBus, get_event_bus

__all__ = [
    'EventBus',
    'get_event_bus',
]
