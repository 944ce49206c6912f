"""Send events and the dispatcher contract."""

from notiscope.events.dispatcher import Dispatcher, EventDispatcher
from notiscope.events.events import MessageSent, NotificationSent

__all__ = ["Dispatcher", "EventDispatcher", "MessageSent", "NotificationSent"]
