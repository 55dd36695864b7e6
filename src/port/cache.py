"""Cache port — key/value store for projected lookup results."""

from typing import Any, Protocol


class CachePort(Protocol):
    """Port for the result cache.

    Values are JSON-compatible dicts. No expiry is applied; entries live
    until the store is cleared externally.
    """

    def get(self, key: str) -> dict[str, Any] | None: ...
    def set(self, key: str, value: dict[str, Any]) -> bool: ...
    def ping(self) -> bool: ...
