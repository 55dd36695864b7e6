"""Redis implementation of SettingsPort.

Settings live in a single hash (SETTINGS_KEY), one field per setting
name, as written by the options page. The store is read-only here.
"""

import logging
import os
from typing import Any, Mapping

from redis.exceptions import RedisError

from adapter.redis.connection import RedisConnection
from domain.model.preferences import SETTINGS_KEYS

logger = logging.getLogger(__name__)

SETTINGS_KEY = os.getenv('SETTINGS_KEY', 'quickdef:settings')


class RedisSettingsAdapter:
    def __init__(self, connection: RedisConnection, key: str = SETTINGS_KEY):
        self._connection = connection
        self.key = key

    def load(self) -> Mapping[str, Any]:
        """Return stored settings; an unavailable store means all defaults."""
        client = self._connection.get_client()
        if not client:
            return {}

        try:
            values = client.hmget(self.key, list(SETTINGS_KEYS))
        except RedisError as e:
            logger.warning("[SETTINGS] Failed to read settings, using defaults", extra={"error": str(e)})
            return {}
        return {name: value for name, value in zip(SETTINGS_KEYS, values) if value is not None}
