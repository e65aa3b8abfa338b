"""Rendering of notifications as Discord webhook messages."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from models.event import EventType
from models.notification import Notification

COLOR_RESOLVED = 65280
COLOR_OPEN = 16711680


@dataclass(frozen=True)
class Labels:
    """Display strings for one locale."""

    event_types: dict[EventType, str]
    unknown: str
    since: str
    resolved_since: str
    status: str
    resolved: str
    open: str

    def event_type(self, event_type: EventType) -> str:
        return self.event_types.get(event_type, self.unknown)


LABELS: dict[str, Labels] = {
    "en": Labels(
        event_types={
            EventType.UPDATE_INSTALLATION: "Update installation",
            EventType.SERVER_ISSUES: "Server issues",
        },
        unknown="Unknown",
        since="Since",
        resolved_since="Resolved since",
        status="Status",
        resolved="Resolved :white_check_mark:",
        open="Offline :negative_squared_cross_mark:",
    ),
    "fr": Labels(
        event_types={
            EventType.UPDATE_INSTALLATION: "Installation de mise à jour",
            EventType.SERVER_ISSUES: "Problèmes de serveur",
        },
        unknown="Inconnu",
        since="Depuis",
        resolved_since="Résolu depuis",
        status="Status",
        resolved="Résolu :white_check_mark:",
        open="Hors ligne :negative_squared_cross_mark:",
    ),
}


def labels_for(locale: str) -> Labels:
    try:
        return LABELS[locale.lower()]
    except KeyError:
        raise ValueError(
            f"Unsupported locale {locale!r}, expected one of {sorted(LABELS)}"
        ) from None


def relative_timestamp(moment: datetime) -> str:
    """Discord markup rendering ``moment`` relative to the reader's clock."""
    return f"<t:{int(moment.timestamp())}:R>"


def build_embed(notification: Notification, labels: Labels) -> dict[str, Any]:
    event = notification.event

    if event.resolved_at is not None:
        time_field = {
            "name": labels.resolved_since,
            "value": relative_timestamp(event.resolved_at),
            "inline": True,
        }
        color = COLOR_RESOLVED
        status = labels.resolved
    else:
        time_field = {
            "name": labels.since,
            "value": relative_timestamp(event.opened_at),
            "inline": True,
        }
        color = COLOR_OPEN
        status = labels.open

    embed: dict[str, Any] = {
        "title": labels.event_type(event.event_type),
        "description": notification.body,
        "color": color,
        "fields": [
            time_field,
            {"name": labels.status, "value": status, "inline": False},
        ],
    }
    if notification.logo_url:
        embed["thumbnail"] = {"url": notification.logo_url}
    if notification.page_url:
        embed["url"] = notification.page_url
    return embed


def build_message(
    notification: Notification,
    username: str,
    labels: Labels,
) -> dict[str, Any]:
    return {
        "username": username,
        "embeds": [build_embed(notification, labels)],
    }
