"""GET /trips/lists — the caller's saved list, sorted and paginated."""

from typing import Any

from core.container import get_services
from core.envelope import to_api_response
from core.errors import WayfarerError
from core.events import get_user_id, parse_params
from core.models import ListQuery


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    try:
        user_id = get_user_id(event)
        query = parse_params(ListQuery, event.get("queryStringParameters"))
    except WayfarerError as e:
        return to_api_response(e.to_result())

    result = get_services().saved_list.get_saved_list(
        user_id,
        page=query.page,
        limit=query.limit,
        sort=query.sort,
        sorted_by=query.sorted_by,
        route=event.get("path") or "/trips/lists",
    )
    return to_api_response(result)
