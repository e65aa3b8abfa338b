"""Status Relay -- entry point.

Assembles the polling pipeline:

    Provider worker (one asyncio task per provider, fixed interval)
        -> reconcile against the worker's tracked state
        -> translator (DeepL, or passthrough when no key is configured)
        -> consumers (Discord webhook, or stdout when no webhook is set)

A shared httpx.AsyncClient is injected into the provider, the translator
and the webhook consumer. The process runs until killed.
"""
from __future__ import annotations

import asyncio
import logging

import httpx

from config import Settings
from consumers.base import EventConsumer
from consumers.console import ConsoleConsumer
from consumers.discord import DiscordWebhookConsumer
from consumers.embed import labels_for
from core.scheduler import Scheduler
from providers.tarkov_provider import TarkovStatusProvider
from translators.base import PassthroughTranslator, Translator
from translators.deepl import DeepLTranslator

log = logging.getLogger(__name__)


def build_translator(settings: Settings, client: httpx.AsyncClient) -> Translator:
    if not settings.DEEPL_API_KEY:
        return PassthroughTranslator()
    return DeepLTranslator(
        client=client,
        api_key=settings.DEEPL_API_KEY,
        target_lang=settings.TARGET_LANG,
        api_url=settings.DEEPL_API_URL,
    )


def build_consumers(settings: Settings, client: httpx.AsyncClient) -> list[EventConsumer]:
    labels = labels_for(settings.LOCALE)
    if not settings.WEBHOOK_URL:
        log.warning("WEBHOOK_URL is not set, printing notifications to stdout")
        return [ConsoleConsumer(labels=labels)]
    return [
        DiscordWebhookConsumer(
            client=client,
            webhook_url=settings.WEBHOOK_URL,
            username=settings.WEBHOOK_USERNAME,
            labels=labels,
        ),
    ]


async def run(settings: Settings | None = None) -> None:
    settings = settings or Settings()

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    async with httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS) as client:
        provider = TarkovStatusProvider(
            client=client,
            url=settings.STATUS_URL,
            page_url=settings.STATUS_PAGE_URL,
            logo_url=settings.STATUS_LOGO_URL,
            poll_interval=settings.POLL_INTERVAL_SECONDS,
        )

        scheduler = Scheduler(
            providers=[provider],
            consumers=build_consumers(settings, client),
            translator=build_translator(settings, client),
            keep_state_on_fetch_failure=settings.KEEP_STATE_ON_FETCH_FAILURE,
        )

        await scheduler.run()


def main() -> None:
    try:
        asyncio.run(run())
    except KeyboardInterrupt:
        print("\nShutting down.")


if __name__ == "__main__":
    main()
