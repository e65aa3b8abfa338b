from __future__ import annotations

from abc import ABC, abstractmethod

import httpx

from models.event import StatusEvent

DEFAULT_POLL_INTERVAL = 30


class StatusProvider(ABC):
    """Abstract base for all status-source adapters.

    Each concrete provider is responsible for fetching its own data source
    and normalizing entries into StatusEvent objects. It also carries the
    branding used when its events are rendered as notifications.

    A shared ``httpx.AsyncClient`` is injected at construction time so
    that all providers reuse one connection pool.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ) -> None:
        self._client = client
        self._poll_interval = poll_interval

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable provider name (e.g. 'Escape from Tarkov')."""

    @property
    def logo_url(self) -> str:
        return ""

    @property
    def page_url(self) -> str:
        return ""

    @property
    def poll_interval_seconds(self) -> float:
        """Seconds between the starts of two fetch cycles."""
        return self._poll_interval

    @abstractmethod
    async def fetch_events(self) -> list[StatusEvent] | None:
        """Fetch the current snapshot of events, in upstream order.

        Implementations should handle HTTP and decoding errors gracefully:
        log them and return None. An empty list means the fetch succeeded
        and upstream reports no events.
        """
