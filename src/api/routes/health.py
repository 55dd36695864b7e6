"""Health check endpoint."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from redis.exceptions import RedisError

from api.dependencies import get_cache
from port.cache import CachePort

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health(cache: CachePort = Depends(get_cache)):
    """Health check endpoint with cache store status."""
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "services": {}
    }

    try:
        if cache.ping():
            health_status["services"]["redis"] = {
                "status": "healthy",
                "message": "Connection successful"
            }
        else:
            health_status["services"]["redis"] = {
                "status": "unhealthy",
                "message": "Connection failed or not configured"
            }
    except RedisError as e:
        health_status["services"]["redis"] = {
            "status": "unhealthy",
            "message": f"Connection error: {str(e)[:200]}"
        }

    if health_status["services"]["redis"]["status"] != "healthy":
        # Lookups still work without the cache, only uncached
        health_status["status"] = "degraded"
        logger.warning("Health check degraded", extra={"services": health_status["services"]})

    return health_status
