"""Dictionary port — outbound interface for upstream lexical data sources."""

from typing import Any, Protocol


class ProviderError(Exception):
    """Base exception for dictionary/translation source errors."""


class ProviderTimeoutError(ProviderError):
    """Upstream request timed out."""


class ProviderResponseError(ProviderError):
    """Upstream returned an HTTP error or a body that is not JSON."""


class DictionaryPort(Protocol):
    """Port for fetching raw provider payloads.

    fetch() returns the parsed JSON payload exactly as the provider sent
    it, or None when the provider reports the term as unknown (HTTP 404).
    Shape knowledge lives in services.normalizers, not here.
    """

    async def fetch(
        self,
        term: str,
        *,
        api_key: str | None = None,
        target_language: str | None = None,
    ) -> Any: ...
