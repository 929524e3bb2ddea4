"""POST /trips/lists — save a trip to the caller's list."""

from typing import Any

from core.container import get_services
from core.envelope import to_api_response
from core.errors import WayfarerError
from core.events import get_user_id, parse_body
from core.models import TripIdPayload


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    try:
        user_id = get_user_id(event)
        payload = parse_body(TripIdPayload, event)
    except WayfarerError as e:
        return to_api_response(e.to_result())

    saved_list = get_services().saved_list
    guard = saved_list.check_not_saved(user_id, payload.id)
    if not guard.ok:
        return to_api_response(guard)

    return to_api_response(saved_list.add_to_saved_list(user_id, payload.id))
