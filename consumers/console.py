from __future__ import annotations

from consumers.base import EventConsumer
from consumers.embed import LABELS, Labels
from models.notification import Notification


class ConsoleConsumer(EventConsumer):
    """Consumer that prints notifications to stdout."""

    def __init__(self, labels: Labels = LABELS["en"]) -> None:
        self._labels = labels

    async def process(self, notification: Notification) -> None:
        event = notification.event
        if event.resolved_at is not None:
            status = f"{self._labels.resolved} ({event.resolved_at:%Y-%m-%d %H:%M:%S})"
        else:
            status = f"{self._labels.open} ({event.opened_at:%Y-%m-%d %H:%M:%S})"
        print(
            f"[{notification.source}] {self._labels.event_type(event.event_type)}\n"
            f"  {notification.body}\n"
            f"  {self._labels.status}: {status}\n",
            flush=True,
        )
