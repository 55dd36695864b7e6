"""Tagged result returned to the client for every request."""

from dataclasses import dataclass
from typing import Any, Literal

from domain.model.entry import Entry

OutcomeStatus = Literal["success", "error", "noLanguage"]


@dataclass(frozen=True)
class Outcome:
    """Result of a definition lookup or sentence translation.

    data is an Entry for lookups and the raw translation payload for
    sentence translations.
    """
    status: OutcomeStatus
    data: Entry | dict[str, Any] | None = None
    message: str | None = None
    tts_enabled: bool = False

    @classmethod
    def success(cls, data: Entry | dict[str, Any], tts_enabled: bool = False) -> "Outcome":
        return cls(status="success", data=data, tts_enabled=tts_enabled)

    @classmethod
    def error(cls, message: str) -> "Outcome":
        return cls(status="error", message=message)

    @classmethod
    def no_language(cls, message: str) -> "Outcome":
        return cls(status="noLanguage", message=message)

    @property
    def ok(self) -> bool:
        return self.status == "success"

    def to_dict(self) -> dict[str, Any]:
        if self.status != "success":
            return {"status": self.status, "message": self.message}
        data = self.data.to_dict() if isinstance(self.data, Entry) else self.data
        return {"status": self.status, "data": data, "ttsEnabled": self.tts_enabled}
