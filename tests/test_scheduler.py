import asyncio
import contextlib

from consumers.base import EventConsumer
from core.scheduler import Scheduler
from providers.base import StatusProvider
from translators.base import Translator

from helpers import make_event


class ScriptedProvider(StatusProvider):
    """Returns one scripted snapshot per fetch; ``None`` simulates a failure."""

    def __init__(self, snapshots, poll_interval=30):
        super().__init__(client=None, poll_interval=poll_interval)
        self._snapshots = list(snapshots)
        self.fetches = 0

    @property
    def name(self):
        return "Scripted"

    @property
    def logo_url(self):
        return "https://example.test/logo.png"

    async def fetch_events(self):
        self.fetches += 1
        snapshot = self._snapshots.pop(0) if self._snapshots else []
        if isinstance(snapshot, Exception):
            raise snapshot
        return snapshot


class RecordingConsumer(EventConsumer):
    def __init__(self, fail_on=()):
        self.received = []
        self._fail_on = set(fail_on)

    async def process(self, notification):
        self.received.append(notification)
        if notification.event.id in self._fail_on:
            raise RuntimeError("webhook down")


class UpperTranslator(Translator):
    async def translate(self, text):
        return text.upper()


async def test_tick_notifies_new_events_in_order():
    e3, e1, e2 = make_event("e3"), make_event("e1"), make_event("e2")
    provider = ScriptedProvider([[e3, e1, e2]])
    consumer = RecordingConsumer()

    state = await Scheduler([provider], [consumer]).tick(provider, {})

    assert [n.event.id for n in consumer.received] == ["e3", "e1", "e2"]
    assert set(state) == {"e1", "e2", "e3"}
    assert consumer.received[0].source == "Scripted"
    assert consumer.received[0].logo_url == "https://example.test/logo.png"


async def test_tick_translates_body_but_keeps_event_content():
    provider = ScriptedProvider([[make_event("e1", content="servers down")]])
    consumer = RecordingConsumer()
    scheduler = Scheduler([provider], [consumer], translator=UpperTranslator())

    await scheduler.tick(provider, {})

    assert consumer.received[0].body == "SERVERS DOWN"
    assert consumer.received[0].event.content == "servers down"


async def test_lifecycle_across_ticks():
    open_e1 = make_event("e1")
    resolved_e1 = make_event("e1", resolved=True)
    provider = ScriptedProvider([[open_e1], [resolved_e1], [resolved_e1], []])
    consumer = RecordingConsumer()
    scheduler = Scheduler([provider], [consumer])

    state = {}
    for _ in range(4):
        state = await scheduler.tick(provider, state)

    assert [n.event for n in consumer.received] == [open_e1, resolved_e1]
    assert state == {}


async def test_consumer_failure_does_not_stop_the_tick():
    provider = ScriptedProvider([[make_event("e1"), make_event("e2")]])
    consumer = RecordingConsumer(fail_on={"e1"})

    state = await Scheduler([provider], [consumer]).tick(provider, {})

    assert [n.event.id for n in consumer.received] == ["e1", "e2"]
    assert set(state) == {"e1", "e2"}


async def test_every_consumer_receives_each_notification():
    provider = ScriptedProvider([[make_event("e1")]])
    first, second = RecordingConsumer(), RecordingConsumer()

    await Scheduler([provider], [first, second]).tick(provider, {})

    assert len(first.received) == len(second.received) == 1


async def test_fetch_failure_evicts_state_by_default():
    provider = ScriptedProvider([None])
    consumer = RecordingConsumer()

    state = await Scheduler([provider], [consumer]).tick(provider, {"e1": make_event("e1")})

    assert state == {}
    assert consumer.received == []


async def test_fetch_failure_keeps_state_when_configured():
    previous = {"e1": make_event("e1")}
    provider = ScriptedProvider([None])
    consumer = RecordingConsumer()
    scheduler = Scheduler([provider], [consumer], keep_state_on_fetch_failure=True)

    state = await scheduler.tick(provider, previous)

    assert state is previous
    assert consumer.received == []


async def test_provider_exception_is_treated_as_fetch_failure():
    provider = ScriptedProvider([RuntimeError("boom")])
    scheduler = Scheduler([provider], [RecordingConsumer()], keep_state_on_fetch_failure=True)
    previous = {"e1": make_event("e1")}

    assert await scheduler.tick(provider, previous) is previous


async def test_run_without_providers_returns():
    await Scheduler([], [RecordingConsumer()]).run()


async def test_worker_polls_on_interval():
    provider = ScriptedProvider([[make_event("e1")], [make_event("e1", resolved=True)]], poll_interval=0.01)
    consumer = RecordingConsumer()
    task = asyncio.create_task(Scheduler([provider], [consumer]).run())

    for _ in range(200):
        if provider.fetches >= 3:
            break
        await asyncio.sleep(0.01)
    task.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await task

    assert provider.fetches >= 3
    assert [n.event.is_resolved for n in consumer.received] == [False, True]
