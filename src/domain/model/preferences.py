"""Display preferences and the user settings snapshot.

Settings arrive from a key/value store and may be absent or stringly typed;
Settings.from_mapping() resolves them once so the rest of the pipeline
only deals with typed values and applied defaults.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from domain.model.provider import ProviderId

logger = logging.getLogger(__name__)

DEFAULT_EXAMPLE_COUNT = 1
NO_LANGUAGE = "none"

# Settings keys recognized in the settings store
SETTINGS_KEYS = (
    "preferredSource",
    "mwApiKey",
    "targetLanguage",
    "definitionScope",
    "exampleCount",
    "ttsEnabled",
)


class Scope(str, Enum):
    """How many senses of an entry are shown."""

    RELEVANT = "relevant"
    ALL = "all"

    @classmethod
    def parse(cls, value: Any) -> "Scope":
        """Absent means RELEVANT; anything other than "relevant" shows all senses."""
        if value is None or value == "":
            return cls.RELEVANT
        if str(value).strip().lower() == cls.RELEVANT.value:
            return cls.RELEVANT
        return cls.ALL


@dataclass(frozen=True)
class DisplayPreferences:
    """User-controlled trimming of a canonical entry."""
    scope: Scope = Scope.RELEVANT
    example_count: int = DEFAULT_EXAMPLE_COUNT

    def __post_init__(self) -> None:
        if self.example_count < 0:
            raise ValueError("example_count must be non-negative")


@dataclass(frozen=True)
class Settings:
    """Resolved snapshot of the settings store."""
    preferred_source: ProviderId = ProviderId.CAMBRIDGE
    mw_api_key: str | None = None
    target_language: str = NO_LANGUAGE
    display: DisplayPreferences = DisplayPreferences()
    tts_enabled: bool = False

    @property
    def has_target_language(self) -> bool:
        return self.target_language != NO_LANGUAGE

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> "Settings":
        """Build Settings from raw store values, applying defaults."""
        raw = raw or {}
        return cls(
            preferred_source=ProviderId.parse(raw.get("preferredSource")),
            mw_api_key=raw.get("mwApiKey") or None,
            target_language=str(raw.get("targetLanguage") or NO_LANGUAGE),
            display=DisplayPreferences(
                scope=Scope.parse(raw.get("definitionScope")),
                example_count=_parse_example_count(raw.get("exampleCount")),
            ),
            tts_enabled=_parse_bool(raw.get("ttsEnabled")),
        )


def _parse_example_count(value: Any) -> int:
    """Coerce a stored example count; absent or invalid falls back to 1."""
    if value is None or value == "":
        return DEFAULT_EXAMPLE_COUNT
    if isinstance(value, bool):
        return DEFAULT_EXAMPLE_COUNT
    try:
        count = int(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid exampleCount setting", extra={"value": str(value)[:50]})
        return DEFAULT_EXAMPLE_COUNT
    if count < 0:
        logger.warning("Ignoring negative exampleCount setting", extra={"value": count})
        return DEFAULT_EXAMPLE_COUNT
    return count


def _parse_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)
