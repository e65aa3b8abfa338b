from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from models.event import StatusEvent

TrackedState = dict[str, StatusEvent]


@dataclass(frozen=True)
class Reconciliation:
    """Outcome of comparing one snapshot against the tracked state.

    Fields:
        to_notify: Events needing a notification, in snapshot order.
        state:     The next baseline, keyed by event id. Holds exactly the
                   events of the latest snapshot.
        evicted:   Ids that were tracked but no longer appear upstream.
    """

    to_notify: list[StatusEvent]
    state: TrackedState
    evicted: list[str] = field(default_factory=list)


def needs_notification(previous: StatusEvent | None) -> bool:
    """Return True unless the tracked record is already resolved.

    An unseen event notifies, and so does any reappearance of an event that
    was still open when last seen: that covers both the open -> resolved
    transition and content edits while open.
    """
    return previous is None or previous.resolved_at is None


def reconcile(
    previous_state: Mapping[str, StatusEvent],
    latest_snapshot: Sequence[StatusEvent],
) -> Reconciliation:
    """Decide which events of ``latest_snapshot`` notify and build the next state.

    ``previous_state`` is never mutated. Every event in the snapshot replaces
    its tracked record wholesale, and ids missing from the snapshot are
    dropped with no grace period. An empty snapshot therefore clears the
    whole state.
    """
    to_notify = [
        event
        for event in latest_snapshot
        if needs_notification(previous_state.get(event.id))
    ]
    state: TrackedState = {event.id: event for event in latest_snapshot}
    evicted = [event_id for event_id in previous_state if event_id not in state]
    return Reconciliation(to_notify=to_notify, state=state, evicted=evicted)
