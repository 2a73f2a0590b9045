"""
Event bus for panel communication.
Decoupled pub/sub pattern for cross-panel events.
"""

import logging
from typing import Callable, Any

logger = logging.getLogger(__name__)


class EventBus:
    """Central event system for panel communication."""
    
    _subscribers: dict[str, list[Callable]] = {}
    
    @classmethod
    def subscribe(cls, event: str, callback: Callable):
        """Subscribe to an event."""
        cls._subscribers.setdefault(event, []).append(callback)
    
    @classmethod
    def publish(cls, event: str, data: Any = None):
        """Publish an event to all subscribers."""
        for cb in list(cls._subscribers.get(event, [])):
            try:
                cb(data)
            except Exception:
                logger.exception("EventBus error on '%s'", event)
    
    @classmethod
    def unsubscribe(cls, event: str, callback: Callable):
        """Unsubscribe from an event."""
        callbacks = cls._subscribers.get(event, [])
        if callback in callbacks:
            callbacks.remove(callback)
    
    @classmethod
    def clear(cls):
        """Clear all subscriptions."""
        cls._subscribers.clear()


class Events:
    """Event name constants."""
    # File events
    FILE_LOADED = "file.loaded"
    FILE_CLEARED = "file.cleared"
    FILE_FAILED = "file.failed"
    
    # Tag events
    TAG_SELECTED = "tag.selected"
    
    STATUS_UPDATE = "status.update"
