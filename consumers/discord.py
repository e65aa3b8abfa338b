from __future__ import annotations

import httpx

from consumers.base import EventConsumer
from consumers.embed import LABELS, Labels, build_message
from models.notification import Notification


class DiscordWebhookConsumer(EventConsumer):
    """Posts each notification to a Discord webhook as a single embed.

    Transport errors and non-2xx responses raise out of ``process()`` and are
    logged by ``deliver()``; nothing is retried.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        webhook_url: str,
        username: str,
        labels: Labels = LABELS["en"],
    ) -> None:
        self._client = client
        self._webhook_url = webhook_url
        self._username = username
        self._labels = labels

    async def process(self, notification: Notification) -> None:
        payload = build_message(notification, self._username, self._labels)
        resp = await self._client.post(self._webhook_url, json=payload)
        resp.raise_for_status()
