from __future__ import annotations

from dataclasses import dataclass

from models.event import StatusEvent


@dataclass(frozen=True)
class Notification:
    """What a consumer receives for one notify-worthy event.

    ``body`` is the text to display, translated when a translator is
    configured. The remaining fields brand the message with the provider
    that produced the event.
    """

    event: StatusEvent
    body: str
    source: str
    logo_url: str
    page_url: str
