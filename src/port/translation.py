"""Translation port — outbound interface for sentence translation."""

from typing import Any, Protocol


class TranslationPort(Protocol):
    async def translate(self, sentence: str, target_language: str) -> dict[str, Any]: ...
