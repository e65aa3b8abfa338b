from __future__ import annotations

import logging

import httpx

from translators.base import Translator

DEFAULT_API_URL = "https://api-free.deepl.com/v2/translate"

log = logging.getLogger(__name__)


class DeepLTranslator(Translator):
    """Translator backed by the DeepL REST API.

    Sends ``text`` and ``target_lang`` as a form body and uses the first
    entry of the ``translations`` list in the response.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str,
        target_lang: str = "FR",
        api_url: str = DEFAULT_API_URL,
    ) -> None:
        self._client = client
        self._api_key = api_key
        self._target_lang = target_lang
        self._api_url = api_url

    async def translate(self, text: str) -> str:
        if not text:
            return text

        try:
            resp = await self._client.post(
                self._api_url,
                data={"text": text, "target_lang": self._target_lang},
                headers={"Authorization": f"DeepL-Auth-Key {self._api_key}"},
            )
            resp.raise_for_status()
            translations = resp.json().get("translations") or []
        except httpx.HTTPStatusError as exc:
            log.error("DeepL API returned error: %s", exc)
            return text
        except httpx.HTTPError as exc:
            log.error("Unexpected error while contacting DeepL API: %s", exc)
            return text
        except (ValueError, AttributeError) as exc:
            log.error("DeepL API returned an unreadable response: %s", exc)
            return text

        if not translations:
            log.warning("DeepL API returned no translations")
            return text

        try:
            return str(translations[0]["text"])
        except (KeyError, TypeError) as exc:
            log.error("DeepL API returned an unreadable translation: %s", exc)
            return text
