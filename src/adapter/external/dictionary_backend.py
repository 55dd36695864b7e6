"""Clients for the dictionary backend service.

The backend serves three endpoints:
- /api/gemini/{term}?lang=xx      AI-generated entries (words and phrases)
- /api/dictionary/en/{term}       Cambridge entries, already in entry wire shape
- /api/translate/{sentence}?lang=xx  sentence translation
"""

import logging
import os
from typing import Any
from urllib.parse import quote

import httpx

from adapter.external.http_client import get_json
from port.dictionary import ProviderResponseError

logger = logging.getLogger(__name__)

DICTIONARY_BACKEND_URL = os.getenv("DICTIONARY_BACKEND_URL", "http://localhost:3000").rstrip("/")


class _BackendClient:
    def __init__(
        self,
        base_url: str = DICTIONARY_BACKEND_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._transport = transport


class GeminiClient(_BackendClient):
    """Fetches AI-generated entries, optionally with translations."""

    async def fetch(
        self,
        term: str,
        *,
        api_key: str | None = None,
        target_language: str | None = None,
    ) -> Any:
        url = f"{self.base_url}/api/gemini/{quote(term, safe='')}"
        params = {"lang": target_language} if target_language else None
        return await get_json(url, params, source="Gemini", transport=self._transport)


class CambridgeClient(_BackendClient):
    """Fetches Cambridge entries (English only)."""

    async def fetch(
        self,
        term: str,
        *,
        api_key: str | None = None,
        target_language: str | None = None,
    ) -> Any:
        url = f"{self.base_url}/api/dictionary/en/{quote(term, safe='')}"
        return await get_json(url, source="Cambridge", transport=self._transport)


class BackendTranslationClient(_BackendClient):
    """Translates whole sentences through the backend."""

    async def translate(self, sentence: str, target_language: str) -> dict[str, Any]:
        url = f"{self.base_url}/api/translate/{quote(sentence, safe='')}"
        data = await get_json(url, {"lang": target_language}, source="Translation", transport=self._transport)
        if data is None:
            logger.warning("Translation endpoint returned not found", extra={"language": target_language})
            raise ProviderResponseError("Translation not found.")
        return data
