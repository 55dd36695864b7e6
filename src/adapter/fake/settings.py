"""In-memory implementation of SettingsPort for testing."""

from typing import Any, Mapping


class FakeSettingsAdapter:
    def __init__(self, values: Mapping[str, Any] | None = None):
        self.values = dict(values or {})

    def load(self) -> Mapping[str, Any]:
        return dict(self.values)
