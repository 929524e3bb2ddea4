"""HTTP client for the external trip-search provider."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import httpx
from pydantic import TypeAdapter

from core.config import Config
from core.models import Trip

logger = logging.getLogger(__name__)

_trip_list = TypeAdapter(list[Trip])


@dataclass(frozen=True)
class ProviderResponse:
    payload: Any
    status_code: int
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.status_code == 200


class TripProviderClient:
    """Thin wrapper over the provider API. Performs no retries."""

    def __init__(self, base_url: str, path: str, api_token: str, timeout: float = 10.0):
        self._path = "/" + path.strip("/")
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            headers={"x-api-key": api_token},
            timeout=timeout,
        )

    @classmethod
    def from_config(cls, config: Config) -> "TripProviderClient":
        return cls(config.api_url, config.api_path, config.api_token, timeout=config.provider_timeout)

    def search_trips(self, origin: str, destination: str) -> ProviderResponse:
        """Payload is a list of Trip, empty on failure."""
        resp = self._client.get(self._path, params={"origin": origin, "destination": destination})
        return self._to_response(resp, _trip_list.validate_python, default=[])

    def get_trip_by_id(self, trip_id: str) -> ProviderResponse:
        """Payload is a Trip, None on failure."""
        resp = self._client.get(f"{self._path}/{trip_id}")
        return self._to_response(resp, Trip.model_validate, default=None)

    def close(self) -> None:
        self._client.close()

    @staticmethod
    def _to_response(resp: httpx.Response, parse: Callable[[Any], Any], default: Any) -> ProviderResponse:
        # Any non-200 is a failure, even with a body.
        if resp.status_code != 200:
            logger.error("Provider %s %s returned %d", resp.request.method, resp.request.url, resp.status_code)
            return ProviderResponse(payload=default, status_code=resp.status_code, reason=resp.reason_phrase)
        return ProviderResponse(payload=parse(resp.json()), status_code=200, reason=resp.reason_phrase)

    def __enter__(self) -> "TripProviderClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
