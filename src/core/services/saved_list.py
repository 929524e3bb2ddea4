"""Saved-list aggregation: merge entries with trips, sort, paginate and export."""

import csv
import io
import json
import logging
import math
from collections.abc import Iterable, Sequence
from functools import cmp_to_key
from typing import Any

from core.db import Found, NotFound, TripStore
from core.envelope import build_pagination_links, build_success, handles_failures
from core.errors import (
    AlreadySavedError,
    ErrorCode,
    InternalFailureError,
    NotFoundError,
    ProviderUnavailableError,
)
from core.models import LIST_ITEM_FIELDS, ExportFile, MergedListItem, OperationResult, SavedListEntry, Trip, User
from core.provider import TripProviderClient

logger = logging.getLogger(__name__)

SORT_COLUMNS: dict[str, str] = {
    "newest": "added_date",
    "oldest": "added_date",
    "fastest": "duration",
    "cheapest": "cost",
}

EXPORT_FORMATS: dict[str, tuple[str, str]] = {
    "csv": ("text/csv", "trips.csv"),
    "json": ("application/json", "trips.json"),
}


def merge_entries(entries: Iterable[SavedListEntry], trips: Iterable[Trip]) -> list[MergedListItem]:
    by_id = {trip.id: trip for trip in trips}
    return [MergedListItem.merge(entry, by_id.get(entry.trip_id)) for entry in entries]


def _compare(a: Any, b: Any) -> int:
    # Missing values compare equal to anything.
    if a is None or b is None:
        return 0
    return (a > b) - (a < b)


def sort_items(items: Sequence[MergedListItem], sorted_by: str | None, sort: str | None) -> list[MergedListItem]:
    column = SORT_COLUMNS.get(sorted_by or "")
    if column is None:
        return list(items)

    if sorted_by in ("newest", "oldest"):
        # Compared by day-of-month only, not the full timestamp.
        return sorted(items, key=lambda item: item.added_date.day, reverse=sorted_by == "newest")

    sign = 1 if sort == "asc" else -1
    return sorted(items, key=cmp_to_key(lambda a, b: sign * _compare(getattr(a, column), getattr(b, column))))


def paginate(items: Sequence[MergedListItem], page: int, limit: int) -> tuple[list[MergedListItem], int]:
    skip = (page - 1) * limit
    return list(items[skip : skip + limit]), math.ceil(len(items) / limit)


def serialize_csv(items: Iterable[MergedListItem]) -> bytes:
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=LIST_ITEM_FIELDS, lineterminator="\n")
    writer.writeheader()
    for item in items:
        writer.writerow(item.model_dump(mode="json", include=set(LIST_ITEM_FIELDS)))
    return buf.getvalue().encode("utf-8")


def serialize_json(items: Iterable[MergedListItem]) -> bytes:
    return json.dumps([item.model_dump(mode="json", include=set(LIST_ITEM_FIELDS)) for item in items]).encode("utf-8")


class SavedListService:
    def __init__(self, store: TripStore, provider: TripProviderClient) -> None:
        self._store = store
        self._provider = provider

    def _require_user(self, user_id: int) -> User:
        lookup = self._store.find_user(user_id)
        if isinstance(lookup, NotFound):
            raise NotFoundError(f"User {user_id} not found", code=ErrorCode.USER_NOT_FOUND)
        return lookup.value

    def _merged_items(self, user: User) -> list[MergedListItem]:
        entries = self._store.list_entries(user.id)
        if not entries:
            return []
        trips = self._store.find_trips({entry.trip_id for entry in entries})
        return merge_entries(entries, trips)

    @handles_failures
    def check_not_saved(self, user_id: int, trip_id: str) -> OperationResult:
        """Duplicate-save guard, run before add_to_saved_list."""
        if isinstance(self._store.find_entry(user_id, trip_id), Found):
            raise AlreadySavedError(f"Trip {trip_id} already saved by user {user_id}")
        return build_success({}, "Trip not saved yet")

    @handles_failures
    def add_to_saved_list(self, user_id: int, trip_id: str) -> OperationResult:
        user = self._require_user(user_id)

        lookup = self._store.find_trip(trip_id)
        if isinstance(lookup, Found):
            stored_id = lookup.value.id
        else:
            res = self._provider.get_trip_by_id(trip_id)
            if not res.ok:
                raise ProviderUnavailableError(
                    f"Trip {trip_id} fetch failed: {res.status_code} {res.reason}",
                    status_code=res.status_code,
                )
            # No rollback: a trip row stays even if the entry below fails.
            created = self._store.create_trip(res.payload)
            if created is None:
                raise InternalFailureError(f"Trip {trip_id} could not be stored")
            stored_id = created.id

        if self._store.create_entry(user.id, stored_id) is None:
            raise InternalFailureError(f"Saved-list entry for trip {stored_id} could not be stored")
        return build_success({}, "Trip added to saved list", code=201)

    @handles_failures
    def get_saved_list(
        self,
        user_id: int,
        page: int = 1,
        limit: int = 10,
        sort: str | None = None,
        sorted_by: str | None = None,
        route: str = "/trips/lists",
    ) -> OperationResult:
        user = self._require_user(user_id)

        merged = self._merged_items(user)
        if not merged:
            return build_success([], "Saved list fetched successfully")

        items, total_pages = paginate(sort_items(merged, sorted_by, sort), page, limit)
        return build_success(
            items,
            "Saved list fetched successfully",
            links=build_pagination_links(route, page, limit, total_pages),
        )

    @handles_failures
    def remove_from_saved_list(self, user_id: int, trip_id: str) -> OperationResult:
        user = self._require_user(user_id)

        if isinstance(self._store.find_entry(user.id, trip_id), NotFound):
            raise NotFoundError(f"Trip {trip_id} not in saved list of user {user_id}", code=ErrorCode.TRIP_NOT_FOUND)

        self._store.delete_entry(user.id, trip_id)
        return build_success({}, "Trip removed from saved list", code=204)

    @handles_failures
    def export_list(self, user_id: int, export_format: str = "csv") -> OperationResult:
        user = self._require_user(user_id)

        merged = self._merged_items(user)
        if not merged:
            return build_success([], "Saved list exported successfully")

        content_type, filename = EXPORT_FORMATS.get(export_format, EXPORT_FORMATS["json"])
        content = serialize_csv(merged) if export_format == "csv" else serialize_json(merged)
        return OperationResult(data=ExportFile(content=content, content_type=content_type, filename=filename), code=200)
