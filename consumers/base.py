from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from models.notification import Notification

log = logging.getLogger(__name__)


class EventConsumer(ABC):
    """Destination for notifications produced by the scheduler.

    The scheduler awaits ``deliver()`` for each notification in turn, so a
    consumer sees notifications in snapshot order and the next one is not
    attempted until the current one has finished or failed.
    """

    @abstractmethod
    async def process(self, notification: Notification) -> None:
        """Handle a single notification.  Subclasses implement this."""

    async def deliver(self, notification: Notification) -> bool:
        """Run ``process()``, logging instead of raising on failure.

        Returns True when the notification was handled.
        """
        try:
            await self.process(notification)
        except Exception:
            log.exception(
                "%s failed processing event %s",
                type(self).__name__,
                notification.event.id,
            )
            return False
        return True
