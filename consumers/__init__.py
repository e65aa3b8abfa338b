from consumers.base import EventConsumer
from consumers.console import ConsoleConsumer
from consumers.discord import DiscordWebhookConsumer

__all__ = ["ConsoleConsumer", "DiscordWebhookConsumer", "EventConsumer"]
