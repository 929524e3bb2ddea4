"""Process-wide service wiring.

Everything is built once per process by ``get_services()`` and the same
instances are handed to every handler.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache

from core.cache import KeyValueCache, RedisCache
from core.clients import get_redis_client, get_session_factory
from core.config import get_config
from core.db import SqlAlchemyTripStore, TripStore
from core.provider import TripProviderClient
from core.services.saved_list import SavedListService
from core.services.trip_resolution import TripResolver


def configure_logging(level: str) -> None:
    logging.getLogger().setLevel(level.upper())


@dataclass(frozen=True)
class Services:
    cache: KeyValueCache
    store: TripStore
    provider: TripProviderClient
    trips: TripResolver
    saved_list: SavedListService


@lru_cache(maxsize=1)
def get_services() -> Services:
    config = get_config()
    configure_logging(config.log_level)

    cache = RedisCache(get_redis_client(), default_ttl=config.redis_ttl)
    store = SqlAlchemyTripStore(get_session_factory())
    provider = TripProviderClient.from_config(config)
    return Services(
        cache=cache,
        store=store,
        provider=provider,
        trips=TripResolver(cache, store, provider, ttl=config.redis_ttl),
        saved_list=SavedListService(store, provider),
    )
