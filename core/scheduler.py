from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from consumers.base import EventConsumer
from core.tracker import TrackedState, reconcile
from models.event import StatusEvent
from models.notification import Notification
from providers.base import StatusProvider
from translators.base import PassthroughTranslator, Translator

log = logging.getLogger(__name__)


class Scheduler:
    """Poll loop that spawns one independent worker task per provider.

    Each worker runs on its own fixed period
    (``provider.poll_interval_seconds``) and exclusively owns the tracked
    state for its provider: the state is passed into ``tick()`` and replaced
    with what it returns, so no locking is needed.

    Within a tick everything is sequential. Notifications go out in snapshot
    order and each consumer finishes one before the next is attempted.
    """

    def __init__(
        self,
        providers: Sequence[StatusProvider],
        consumers: Sequence[EventConsumer],
        translator: Translator | None = None,
        keep_state_on_fetch_failure: bool = False,
    ) -> None:
        self._providers = list(providers)
        self._consumers = list(consumers)
        self._translator = translator or PassthroughTranslator()
        self._keep_state_on_fetch_failure = keep_state_on_fetch_failure

    async def _fetch(self, provider: StatusProvider) -> list[StatusEvent] | None:
        try:
            return await provider.fetch_events()
        except Exception:
            log.exception("Worker %s fetch failed", provider.name)
            return None

    async def tick(self, provider: StatusProvider, state: TrackedState) -> TrackedState:
        """Run one poll cycle for ``provider`` and return the next state.

        1. fetch the snapshot
        2. reconcile it against ``state``
        3. translate and deliver every notify-worthy event, in order
        4. hand back the new baseline
        """
        events = await self._fetch(provider)
        if events is None:
            if self._keep_state_on_fetch_failure:
                log.warning(
                    "Worker %s: fetch failed, keeping %d tracked event(s)",
                    provider.name,
                    len(state),
                )
                return state
            events = []

        result = reconcile(state, events)

        for event in result.to_notify:
            body = await self._translator.translate(event.content)
            notification = Notification(
                event=event,
                body=body,
                source=provider.name,
                logo_url=provider.logo_url,
                page_url=provider.page_url,
            )
            for consumer in self._consumers:
                await consumer.deliver(notification)

        if result.to_notify or result.evicted:
            log.info(
                "Worker %s: %d notified, %d evicted, %d total tracked",
                provider.name,
                len(result.to_notify),
                len(result.evicted),
                len(result.state),
            )

        return result.state

    async def _provider_worker(self, provider: StatusProvider) -> None:
        """Long-lived worker loop for a single provider.

        Ticks are scheduled against the event-loop clock. The first tick runs
        immediately; a tick that overruns its period delays the next one
        instead of triggering extra catch-up ticks.
        """
        interval = provider.poll_interval_seconds
        log.info("Worker started for %s (interval=%ss)", provider.name, interval)

        loop = asyncio.get_running_loop()
        state: TrackedState = {}
        next_tick = loop.time()

        while True:
            state = await self.tick(provider, state)

            next_tick += interval
            now = loop.time()
            if next_tick < now:
                next_tick = now
            await asyncio.sleep(next_tick - now)

    async def run(self) -> None:
        """Spawn one worker task per provider and await them all.

        If no providers are registered the method returns immediately.
        """
        if not self._providers:
            log.warning("No providers registered")
            return

        log.info(
            "Scheduler starting %d provider worker(s), %d consumer(s)",
            len(self._providers),
            len(self._consumers),
        )

        tasks = [
            asyncio.create_task(
                self._provider_worker(p),
                name=f"worker-{p.name}",
            )
            for p in self._providers
        ]

        await asyncio.gather(*tasks)
