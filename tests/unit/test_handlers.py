"""Unit tests for the API Gateway handlers."""

import json
from unittest.mock import MagicMock, patch

import pytest

from core.envelope import build_success
from core.errors import AlreadySavedError
from core.models import ExportFile, OperationResult
from handlers import add_to_list, export_list, get_list, get_trip, remove_from_list, search_trips

TRIP_ID = "5f0d6c2e-3b1a-4c8e-9f7d-2a6b8c4e1d3f"


def _authed(**extra):
    return {"requestContext": {"authorizer": {"userId": "1"}}, **extra}


@pytest.fixture
def services():
    return MagicMock()


def test_search_trips_handler(services):
    services.trips.resolve_search.return_value = build_success([], "Trips fetched successfully")
    event = {"queryStringParameters": {"origin": "ATL", "destination": "MIA", "sort_by": "fastest"}}

    with patch("handlers.search_trips.get_services", return_value=services):
        result = search_trips.handler(event, None)

    assert result["statusCode"] == 200
    services.trips.resolve_search.assert_called_once_with("ATL", "MIA", sort_by="fastest", sort_direction=None)


def test_search_trips_handler_rejects_bad_location(services):
    event = {"queryStringParameters": {"origin": "Atlanta", "destination": "MIA"}}

    with patch("handlers.search_trips.get_services", return_value=services):
        result = search_trips.handler(event, None)

    assert result["statusCode"] == 400
    assert json.loads(result["body"])["data"]["error"] == "VALIDATION_ERROR"
    services.trips.resolve_search.assert_not_called()


def test_get_trip_handler(services):
    services.trips.resolve_by_id.return_value = build_success({}, "Trip fetched successfully")

    with patch("handlers.get_trip.get_services", return_value=services):
        result = get_trip.handler({"pathParameters": {"id": TRIP_ID}}, None)

    assert result["statusCode"] == 200
    services.trips.resolve_by_id.assert_called_once_with(TRIP_ID)


def test_add_to_list_handler(services):
    services.saved_list.check_not_saved.return_value = build_success({}, "Trip not saved yet")
    services.saved_list.add_to_saved_list.return_value = build_success({}, "Trip added to saved list", code=201)

    with patch("handlers.add_to_list.get_services", return_value=services):
        result = add_to_list.handler(_authed(body=json.dumps({"id": TRIP_ID})), None)

    assert result["statusCode"] == 201
    services.saved_list.add_to_saved_list.assert_called_once_with(1, TRIP_ID)


def test_add_to_list_handler_stops_on_duplicate(services):
    services.saved_list.check_not_saved.return_value = AlreadySavedError("dup").to_result()

    with patch("handlers.add_to_list.get_services", return_value=services):
        result = add_to_list.handler(_authed(body=json.dumps({"id": TRIP_ID})), None)

    assert result["statusCode"] == 400
    services.saved_list.add_to_saved_list.assert_not_called()


def test_add_to_list_handler_requires_user(services):
    with patch("handlers.add_to_list.get_services", return_value=services):
        result = add_to_list.handler({"body": json.dumps({"id": TRIP_ID})}, None)

    assert result["statusCode"] == 401
    services.saved_list.check_not_saved.assert_not_called()


def test_get_list_handler_passes_query_and_route(services):
    services.saved_list.get_saved_list.return_value = build_success([], "Saved list fetched successfully")
    event = _authed(path="/dev/trips/lists", queryStringParameters={"page": "2", "limit": "5", "sort": "asc"})

    with patch("handlers.get_list.get_services", return_value=services):
        result = get_list.handler(event, None)

    assert result["statusCode"] == 200
    services.saved_list.get_saved_list.assert_called_once_with(
        1, page=2, limit=5, sort="asc", sorted_by=None, route="/dev/trips/lists"
    )


def test_get_list_handler_rejects_zero_page(services):
    with patch("handlers.get_list.get_services", return_value=services):
        result = get_list.handler(_authed(queryStringParameters={"page": "0"}), None)

    assert result["statusCode"] == 400


def test_remove_from_list_handler(services):
    services.saved_list.remove_from_saved_list.return_value = build_success({}, "Trip removed from saved list", code=204)

    with patch("handlers.remove_from_list.get_services", return_value=services):
        result = remove_from_list.handler(_authed(pathParameters={"id": "abc"}), None)

    assert result["statusCode"] == 204
    services.saved_list.remove_from_saved_list.assert_called_once_with(1, "abc")


def test_export_list_handler_returns_file(services):
    export = ExportFile(content=b"[]", content_type="application/json", filename="trips.json")
    services.saved_list.export_list.return_value = OperationResult(data=export, code=200)

    with patch("handlers.export_list.get_services", return_value=services):
        result = export_list.handler(_authed(queryStringParameters={"type": "json"}), None)

    assert result["headers"]["Content-Disposition"] == 'attachment; filename="trips.json"'
    services.saved_list.export_list.assert_called_once_with(1, "json")


def test_export_list_handler_defaults_to_csv(services):
    services.saved_list.export_list.return_value = build_success([], "Saved list exported successfully")

    with patch("handlers.export_list.get_services", return_value=services):
        export_list.handler(_authed(), None)

    services.saved_list.export_list.assert_called_once_with(1, "csv")


@patch("handlers.migrate.run_migrations")
def test_migrate_handler(mock_run):
    from handlers.migrate import handler

    mock_run.return_value = {"status": "success", "output": "upgrade -> 4b7e21c9a0d5"}

    result = handler({}, None)

    assert result["statusCode"] == 200
    assert "4b7e21c9a0d5" in result["body"]
