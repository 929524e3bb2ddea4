"""GET /trips/{id} — single trip from cache, store or provider."""

from typing import Any

from core.container import get_services
from core.envelope import to_api_response
from core.errors import WayfarerError
from core.events import parse_params
from core.models import TripIdPayload


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    try:
        payload = parse_params(TripIdPayload, event.get("pathParameters"))
    except WayfarerError as e:
        return to_api_response(e.to_result())

    return to_api_response(get_services().trips.resolve_by_id(payload.id))
