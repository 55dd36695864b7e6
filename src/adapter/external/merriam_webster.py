"""Merriam-Webster Collegiate Dictionary API client.

API Documentation: https://dictionaryapi.com/products/json
Requires a per-user API key (the mwApiKey setting).
"""

import logging
import os
from typing import Any
from urllib.parse import quote

import httpx

from adapter.external.http_client import get_json

logger = logging.getLogger(__name__)

MW_API_BASE_URL = os.getenv(
    "MW_API_BASE_URL", "https://www.dictionaryapi.com/api/v3/references/collegiate/json",
)


class MerriamWebsterClient:
    """Fetches raw collegiate entries (a list of entry records)."""

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        self._transport = transport

    async def fetch(
        self,
        term: str,
        *,
        api_key: str | None = None,
        target_language: str | None = None,
    ) -> Any:
        if not api_key:
            raise ValueError("api_key is required for Merriam-Webster lookups")
        url = f"{MW_API_BASE_URL}/{quote(term, safe='')}"
        data = await get_json(url, {"key": api_key}, source="Merriam-Webster", transport=self._transport)
        logger.debug("Merriam-Webster lookup completed", extra={
            "word": term, "records": len(data) if isinstance(data, list) else 0,
        })
        return data
