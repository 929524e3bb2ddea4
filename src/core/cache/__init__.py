"""Key-value cache abstraction layer."""

from core.cache.interface import KeyValueCache
from core.cache.redis_cache import RedisCache

__all__ = ["KeyValueCache", "RedisCache"]
