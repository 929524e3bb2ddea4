"""Redis-backed key-value cache."""

import logging

import redis

from core.errors import CacheError

from .interface import KeyValueCache

logger = logging.getLogger(__name__)


class RedisCache(KeyValueCache):
    def __init__(self, client: redis.Redis, default_ttl: int):
        self._client = client
        self._default_ttl = default_ttl

    def get(self, key: str) -> str | None:
        try:
            value = self._client.get(key)
        except redis.RedisError as e:
            raise CacheError(f"Cache get failed for {key}: {e}") from e

        if value is None:
            logger.debug("Cache MISS: %s", key)
            return None
        logger.debug("Cache HIT: %s", key)
        return value.decode() if isinstance(value, bytes) else value

    def set(self, key: str, value: str, ttl: int | None = None) -> None:
        if ttl is None:
            ttl = self._default_ttl
        try:
            self._client.set(key, value, ex=ttl)
        except redis.RedisError as e:
            raise CacheError(f"Cache set failed for {key}: {e}") from e
        logger.debug("Cache SET: %s (TTL=%ss)", key, ttl)

    def delete(self, key: str) -> None:
        try:
            self._client.delete(key)
        except redis.RedisError as e:
            raise CacheError(f"Cache delete failed for {key}: {e}") from e

    def ping(self) -> bool:
        try:
            return bool(self._client.ping())
        except Exception:
            logger.error("Redis connection error")
            return False
