"""Liveness of the cache and the persistent store."""

from core.cache import KeyValueCache
from core.db import TripStore


def check_health(cache: KeyValueCache, store: TripStore) -> dict[str, bool]:
    return {"cache": cache.ping(), "store": store.health_check()}
