"""In-memory implementation of TranslationPort for testing."""

from typing import Any


class FakeTranslationAdapter:
    def __init__(self, result: dict[str, Any] | None = None, error: Exception | None = None):
        self.result = result if result is not None else {"translation": ""}
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def translate(self, sentence: str, target_language: str) -> dict[str, Any]:
        self.calls.append((sentence, target_language))
        if self.error is not None:
            raise self.error
        return self.result
