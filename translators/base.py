from __future__ import annotations

from abc import ABC, abstractmethod


class Translator(ABC):
    """Best-effort text translation.

    ``translate`` must never raise: on any failure it returns the input
    unchanged, so callers never handle translation errors.
    """

    @abstractmethod
    async def translate(self, text: str) -> str:
        """Return ``text`` translated, or ``text`` itself on failure."""


class PassthroughTranslator(Translator):
    """Used when translation is disabled."""

    async def translate(self, text: str) -> str:
        return text
