from models.event import EventType, StatusEvent
from models.notification import Notification

__all__ = ["EventType", "Notification", "StatusEvent"]
