"""Shared httpx helpers for the upstream provider clients."""

import logging
import os
from typing import Any

import httpx

from port.dictionary import ProviderError, ProviderResponseError, ProviderTimeoutError

logger = logging.getLogger(__name__)

API_TIMEOUT_SECONDS = float(os.getenv("API_TIMEOUT_SECONDS", "10"))


async def get_json(
    url: str,
    params: dict[str, str] | None = None,
    *,
    source: str,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any | None:
    """GET url and return the parsed JSON body.

    Returns:
        Parsed JSON, or None when the upstream answers 404.

    Raises:
        ProviderTimeoutError: Request timed out.
        ProviderResponseError: HTTP error status or non-JSON body.
        ProviderError: Any other transport failure.
    """
    try:
        async with httpx.AsyncClient(timeout=API_TIMEOUT_SECONDS, transport=transport) as client:
            response = await client.get(url, params=params)
    except httpx.TimeoutException as e:
        raise ProviderTimeoutError(f"{source} request timed out.") from e
    except httpx.RequestError as e:
        raise ProviderError(f"Could not reach {source}: {type(e).__name__}") from e

    if response.status_code == 404:
        logger.debug("Term not found upstream", extra={"source": source, "url": str(response.url)})
        return None

    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise ProviderResponseError(
            f"{source} returned HTTP {e.response.status_code}."
        ) from e

    try:
        return response.json()
    except ValueError as e:
        raise ProviderResponseError(f"{source} returned invalid JSON.") from e
