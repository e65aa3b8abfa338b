from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Any


class EventType(IntEnum):
    """Category of a status event as reported by the status API.

    Any code outside the known set maps to ``UNKNOWN`` so that new upstream
    categories never break parsing.
    """

    UNKNOWN = 0
    UPDATE_INSTALLATION = 1
    SERVER_ISSUES = 2

    @classmethod
    def from_code(cls, code: Any) -> EventType:
        """Map a wire code to a category.

        Only JSON integers are recognised (whole-number floats included);
        booleans, strings and fractional or non-finite numbers are UNKNOWN.
        """
        if isinstance(code, bool):
            return cls.UNKNOWN
        if isinstance(code, float):
            if not code.is_integer():
                return cls.UNKNOWN
            code = int(code)
        if not isinstance(code, int):
            return cls.UNKNOWN
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class StatusEvent:
    """Canonical event emitted by every provider adapter.

    Fields:
        id:          Opaque identifier, stable across polls for one incident
                     (including its open -> resolved transition).
        content:     Free-text description in the source language.
        event_type:  Parsed category; ``UNKNOWN`` for unrecognised codes.
        type_code:   The raw category code as received.
        opened_at:   When the event began (UTC).
        resolved_at: When the event was resolved (UTC), or None while open.
    """

    id: str
    content: str
    event_type: EventType
    type_code: Any
    opened_at: datetime
    resolved_at: datetime | None = None

    @property
    def is_resolved(self) -> bool:
        return self.resolved_at is not None
