# app/core/cache.py
from __future__ import annotations

from typing import Any, Optional
import json
import logging

# IMPORTANT: use the asyncio namespace
import redis.asyncio as redis

from app.core.config import settings

logger = logging.getLogger(__name__)


class Cache:
    def __init__(self) -> None:
        self._redis: Optional[redis.Redis] = None

    async def init(self) -> None:
        # from_url returns an async Redis client object; do NOT await here
        self._redis = redis.from_url(
            settings.redis_url,
            encoding="utf-8",
            decode_responses=True,
        )
        try:
            await self._redis.ping()
        except redis.RedisError as e:
            # Re-raise so FastAPI startup fails visibly
            raise RuntimeError(f"Redis not reachable at {settings.redis_url}: {e}") from e
        logger.info("Connected to Redis at %s", settings.redis_url)

    async def close(self) -> None:
        if self._redis is not None:
            await self._redis.aclose()
            self._redis = None

    async def get(self, key: str) -> Any | None:
        if self._redis is None:
            return None
        val = await self._redis.get(key)
        if val is None:
            return None
        try:
            return json.loads(val)
        except ValueError:
            return val

    async def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        if self._redis is None:
            return False
        payload = json.dumps(value, default=str)
        if ttl and ttl > 0:
            return await self._redis.set(key, payload, ex=ttl)
        return await self._redis.set(key, payload)

    async def delete_keys(self, *keys: str) -> int:
        if self._redis is None or not keys:
            return 0
        return await self._redis.delete(*keys)


cache = Cache()
