"""Upstream lexical data providers."""

import logging
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class ProviderId(str, Enum):
    """Identity of a provider; selects the adapter for its payload shape."""

    CAMBRIDGE = "cambridge"
    MERRIAM_WEBSTER = "merriam-webster"
    GEMINI = "gemini"

    @classmethod
    def parse(cls, value: Any) -> "ProviderId":
        """Resolve a preferredSource setting. Unknown or absent means CAMBRIDGE."""
        if not value:
            return cls.CAMBRIDGE
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            logger.warning("Unknown dictionary source, using cambridge", extra={"source": str(value)[:50]})
            return cls.CAMBRIDGE
