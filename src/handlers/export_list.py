"""GET /trips/lists/export — download the caller's list as CSV or JSON."""

from typing import Any

from core.container import get_services
from core.envelope import to_api_response
from core.errors import WayfarerError
from core.events import get_user_id, parse_params
from core.models import ExportQuery


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    try:
        user_id = get_user_id(event)
        query = parse_params(ExportQuery, event.get("queryStringParameters"))
    except WayfarerError as e:
        return to_api_response(e.to_result())

    return to_api_response(get_services().saved_list.export_list(user_id, query.type))
