"""Redis implementation of CachePort.

Values are stored as JSON strings under the derived key, without expiry.
Redis failures degrade to a cache miss / unsaved entry.
"""

import json
import logging
from typing import Any

from redis.exceptions import RedisError

from adapter.redis.connection import RedisConnection

logger = logging.getLogger(__name__)


class RedisCacheAdapter:
    def __init__(self, connection: RedisConnection):
        self._connection = connection

    def get(self, key: str) -> dict[str, Any] | None:
        client = self._connection.get_client()
        if not client:
            return None

        try:
            raw = client.get(key)
            if raw is None:
                return None
            value = json.loads(raw)
        except (RedisError, json.JSONDecodeError) as e:
            logger.warning("[CACHE] Failed to read entry", extra={"key": key, "error": str(e)})
            return None

        if not isinstance(value, dict):
            logger.warning("[CACHE] Ignoring non-object entry", extra={"key": key})
            return None
        return value

    def set(self, key: str, value: dict[str, Any]) -> bool:
        client = self._connection.get_client()
        if not client:
            return False

        try:
            client.set(key, json.dumps(value, ensure_ascii=False))
            logger.debug("[CACHE] Stored entry", extra={"key": key})
            return True
        except (RedisError, TypeError, ValueError) as e:
            logger.warning("[CACHE] Failed to store entry", extra={"key": key, "error": str(e)})
            return False

    def ping(self) -> bool:
        client = self._connection.get_client()
        if not client:
            return False
        try:
            return bool(client.ping())
        except RedisError:
            return False
