"""DELETE /trips/lists/{id} — remove a trip from the caller's list."""

from typing import Any

from core.container import get_services
from core.envelope import to_api_response
from core.errors import WayfarerError
from core.events import get_user_id, parse_params
from core.models import TripRef


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    try:
        user_id = get_user_id(event)
        payload = parse_params(TripRef, event.get("pathParameters"))
    except WayfarerError as e:
        return to_api_response(e.to_result())

    return to_api_response(get_services().saved_list.remove_from_saved_list(user_id, payload.id))
