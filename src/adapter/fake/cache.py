"""In-memory implementation of CachePort for testing."""

import copy
from typing import Any


class FakeCacheAdapter:
    def __init__(self):
        self.store: dict[str, dict[str, Any]] = {}
        self.get_calls: list[str] = []

    def get(self, key: str) -> dict[str, Any] | None:
        self.get_calls.append(key)
        value = self.store.get(key)
        return copy.deepcopy(value) if value is not None else None

    def set(self, key: str, value: dict[str, Any]) -> bool:
        self.store[key] = copy.deepcopy(value)
        return True

    def ping(self) -> bool:
        return True
