from __future__ import annotations

from datetime import datetime, timezone

from models.event import EventType, StatusEvent

OPENED = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
RESOLVED = datetime(2024, 3, 1, 13, 30, tzinfo=timezone.utc)


def make_event(
    event_id: str,
    resolved: bool = False,
    content: str = "Servers are down",
    event_type: EventType = EventType.SERVER_ISSUES,
) -> StatusEvent:
    return StatusEvent(
        id=event_id,
        content=content,
        event_type=event_type,
        type_code=int(event_type),
        opened_at=OPENED,
        resolved_at=RESOLVED if resolved else None,
    )
