from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

import httpx

from models.event import EventType, StatusEvent
from providers.base import DEFAULT_POLL_INTERVAL, StatusProvider

DEFAULT_STATUS_URL = "https://status.escapefromtarkov.com/api/message/list"
DEFAULT_PAGE_URL = "https://status.escapefromtarkov.com"
DEFAULT_LOGO_URL = "https://www.escapefromtarkov.com/themes/eft/images/logo.png"

log = logging.getLogger(__name__)


def _parse_timestamp(raw: str) -> datetime:
    """Parse ISO 8601 timestamps that may include fractional seconds."""
    cleaned = raw.replace("Z", "+00:00")
    parsed = datetime.fromisoformat(cleaned)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def parse_event(record: dict[str, Any]) -> StatusEvent:
    """Normalize one status-list record.

    Raises KeyError, TypeError or ValueError when the record is missing a
    required field or carries an unparseable timestamp.
    """
    solve_time = record.get("solveTime")
    code = record.get("type")
    return StatusEvent(
        id=str(record["_id"]),
        content=str(record.get("content") or ""),
        event_type=EventType.from_code(code),
        type_code=code,
        opened_at=_parse_timestamp(record["time"]),
        resolved_at=_parse_timestamp(solve_time) if solve_time else None,
    )


class TarkovStatusProvider(StatusProvider):
    """Provider adapter for the Escape from Tarkov status message list.

    The endpoint returns a JSON array holding every currently listed
    message; an incident drops off the list some time after it resolves.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        url: str = DEFAULT_STATUS_URL,
        page_url: str = DEFAULT_PAGE_URL,
        logo_url: str = DEFAULT_LOGO_URL,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ) -> None:
        super().__init__(client, poll_interval)
        self._url = url
        self._page_url = page_url
        self._logo_url = logo_url

    @property
    def name(self) -> str:
        return "Escape from Tarkov"

    @property
    def logo_url(self) -> str:
        return self._logo_url

    @property
    def page_url(self) -> str:
        return self._page_url

    async def fetch_events(self) -> list[StatusEvent] | None:
        try:
            resp = await self._client.get(self._url)
        except httpx.HTTPError as exc:
            log.error("[%s] HTTP error: %s", self.name, exc)
            return None

        if not resp.is_success:
            log.error("[%s] Status source returned error %d", self.name, resp.status_code)
            return None

        try:
            payload = resp.json()
        except ValueError as exc:
            log.error("[%s] Response is not valid JSON: %s", self.name, exc)
            return None

        if not isinstance(payload, list):
            log.error(
                "[%s] Expected a JSON array, got %s",
                self.name,
                type(payload).__name__,
            )
            return None

        events: list[StatusEvent] = []
        for record in payload:
            try:
                event = parse_event(record)
            except (KeyError, TypeError, ValueError, AttributeError, OverflowError) as exc:
                log.error("[%s] Malformed event record %r: %s", self.name, record, exc)
                return None

            if event.event_type is EventType.UNKNOWN:
                log.debug("[%s] Event %s has unknown type %r", self.name, event.id, event.type_code)
            events.append(event)

        return events
