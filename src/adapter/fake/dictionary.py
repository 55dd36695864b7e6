"""In-memory implementation of DictionaryPort for testing."""

from typing import Any


class FakeDictionaryAdapter:
    """Fake provider client that returns a preconfigured payload or raises."""

    def __init__(self, payload: Any = None, error: Exception | None = None):
        self.payload = payload
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def fetch(
        self,
        term: str,
        *,
        api_key: str | None = None,
        target_language: str | None = None,
    ) -> Any:
        self.calls.append({"term": term, "api_key": api_key, "target_language": target_language})
        if self.error is not None:
            raise self.error
        return self.payload
