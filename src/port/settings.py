"""Settings port — read-only access to the user's settings store."""

from typing import Any, Mapping, Protocol


class SettingsPort(Protocol):
    def load(self) -> Mapping[str, Any]:
        """Return raw settings values keyed by setting name (missing keys omitted)."""
        ...
