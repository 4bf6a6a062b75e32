"""Redis cache decorator for data source methods.

Caches upstream API responses so repeated community lookups within the
staleness window do not spend rate limit.
"""

import functools
import hashlib
import json
import logging
from typing import Any, Callable

import redis.asyncio as redis

from src.config import settings

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 86400

_redis_client: redis.Redis | None = None


async def get_redis() -> redis.Redis:
    global _redis_client
    if _redis_client is None:
        _redis_client = redis.from_url(settings.redis_url, decode_responses=True)
    return _redis_client


def _cache_key(prefix: str, *args: Any, **kwargs: Any) -> str:
    """Generate a deterministic cache key from function arguments."""
    raw = json.dumps({"args": [str(a) for a in args], "kwargs": {k: str(v) for k, v in kwargs.items()}}, sort_keys=True)
    h = hashlib.sha256(raw.encode()).hexdigest()[:16]
    return f"communityinsights:{prefix}:{h}"


def cached(prefix: str, ttl_attr: str = "revalidate_seconds"):
    """Cache decorator for async data source methods.

    The TTL is read from the instance attribute named by ttl_attr so each
    client carries its own staleness tolerance; a TTL of 0 bypasses the
    cache. None results are never stored.

    Args:
        prefix: Cache key prefix (e.g., "census:acs5")
        ttl_attr: Instance attribute holding the TTL in seconds
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(self, *args: Any, **kwargs: Any) -> Any:
            ttl_seconds = getattr(self, ttl_attr, DEFAULT_TTL_SECONDS)
            if not ttl_seconds:
                return await func(self, *args, **kwargs)

            key = _cache_key(prefix, *args, **kwargs)
            try:
                r = await get_redis()
                cached_value = await r.get(key)
                if cached_value is not None:
                    logger.debug("Cache hit: %s", key)
                    return json.loads(cached_value)
            except Exception:
                logger.warning("Redis unavailable, skipping cache for %s", key)

            result = await func(self, *args, **kwargs)
            if result is None:
                return result

            try:
                r = await get_redis()
                await r.setex(key, ttl_seconds, json.dumps(result, default=str))
            except Exception:
                logger.warning("Failed to write cache for %s", key)

            return result
        return wrapper
    return decorator
