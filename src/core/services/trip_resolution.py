"""Trip resolution: cache, then store, then provider."""

import logging
from collections.abc import Iterable
from operator import attrgetter

from pydantic import TypeAdapter

from core.cache import KeyValueCache
from core.db import Found, TripStore
from core.envelope import build_success, handles_failures
from core.errors import ProviderUnavailableError
from core.models import OperationResult, Trip
from core.provider import TripProviderClient

logger = logging.getLogger(__name__)

_trip_list = TypeAdapter(list[Trip])


def search_cache_key(origin: str, destination: str, sort_by: str | None = None, sort_direction: str | None = None) -> str:
    # Sort parameters are part of the key: the cached value is the sorted result.
    return f"trips:{origin}:{destination}:{sort_by or ''}:{sort_direction or ''}"


def trip_cache_key(trip_id: str) -> str:
    return f"trip:{trip_id}"


def sort_trips(trips: Iterable[Trip], sort_by: str | None, sort_direction: str | None) -> list[Trip]:
    """Sort search results.

    No sort key means provider order. Once a key is chosen the direction
    defaults to descending; only an explicit "asc" sorts ascending.
    """
    if not sort_by:
        return list(trips)

    column = "duration" if sort_by == "fastest" else "cost"
    direction = sort_direction or "desc"
    return sorted(trips, key=attrgetter(column), reverse=direction != "asc")


class TripResolver:
    def __init__(
        self,
        cache: KeyValueCache,
        store: TripStore,
        provider: TripProviderClient,
        ttl: int | None = None,
    ) -> None:
        self._cache = cache
        self._store = store
        self._provider = provider
        self._ttl = ttl

    @handles_failures
    def resolve_search(
        self,
        origin: str,
        destination: str,
        sort_by: str | None = None,
        sort_direction: str | None = None,
    ) -> OperationResult:
        key = search_cache_key(origin, destination, sort_by, sort_direction)

        cached = self._cache.get(key)
        if cached is not None:
            return build_success(_trip_list.validate_json(cached), "Trips fetched successfully")

        res = self._provider.search_trips(origin, destination)
        if not res.ok:
            raise ProviderUnavailableError(
                f"Trip search {origin}->{destination} failed: {res.status_code} {res.reason}",
                status_code=res.status_code,
            )

        trips = sort_trips(res.payload, sort_by, sort_direction)
        self._cache.set(key, _trip_list.dump_json(trips).decode(), self._ttl)
        return build_success(trips, "Trips fetched successfully")

    @handles_failures
    def resolve_by_id(self, trip_id: str) -> OperationResult:
        key = trip_cache_key(trip_id)

        cached = self._cache.get(key)
        if cached is not None:
            return build_success(Trip.model_validate_json(cached), "Trip fetched successfully")

        lookup = self._store.find_trip(trip_id)
        if isinstance(lookup, Found):
            trip = lookup.value
        else:
            # Provider-only trips are cached but not persisted.
            res = self._provider.get_trip_by_id(trip_id)
            if not res.ok:
                raise ProviderUnavailableError(
                    f"Trip {trip_id} fetch failed: {res.status_code} {res.reason}",
                    status_code=res.status_code,
                )
            trip = res.payload

        self._cache.set(key, trip.model_dump_json(), self._ttl)
        return build_success(trip, "Trip fetched successfully")
