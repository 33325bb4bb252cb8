"""
Events module - in-process fire-and-forget event bus.
"""

from common.events.event_bus import EventBus, EventHandler

__all__ = ["EventBus", "EventHandler"]
