"""GET /trips — search trips between two locations."""

from typing import Any

from core.container import get_services
from core.envelope import to_api_response
from core.errors import WayfarerError
from core.events import parse_params
from core.models import TripSearchQuery


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    try:
        query = parse_params(TripSearchQuery, event.get("queryStringParameters"))
    except WayfarerError as e:
        return to_api_response(e.to_result())

    result = get_services().trips.resolve_search(
        query.origin,
        query.destination,
        sort_by=query.sort_by,
        sort_direction=query.sort_direction,
    )
    return to_api_response(result)
