"""Domain models for trips and saved lists."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_serializer

# Fields exposed for every item of a saved list, in export column order.
LIST_ITEM_FIELDS = ("id", "origin", "destination", "cost", "duration", "type", "display_name", "added_date")


def _whole_cost(value: float | None) -> float | int | None:
    # Provider costs are integers; keep them that way on output.
    if value is not None and value.is_integer():
        return int(value)
    return value


class Trip(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    origin: str
    destination: str
    cost: float
    duration: int
    type: str
    display_name: str

    @field_serializer("cost")
    def serialize_cost(self, cost: float | None) -> float | int | None:
        return _whole_cost(cost)


class SavedListEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: int
    trip_id: str
    created_at: datetime


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    username: str


class MergedListItem(BaseModel):
    """A saved-list entry joined with its trip.

    Trip fields are None when the referenced trip row is missing.
    """

    id: str
    origin: str | None = None
    destination: str | None = None
    cost: float | None = None
    duration: int | None = None
    type: str | None = None
    display_name: str | None = None
    added_date: datetime

    @field_serializer("cost")
    def serialize_cost(self, cost: float | None) -> float | int | None:
        return _whole_cost(cost)

    @classmethod
    def merge(cls, entry: SavedListEntry, trip: Trip | None) -> "MergedListItem":
        fields = trip.model_dump() if trip is not None else {"id": entry.trip_id}
        return cls(**fields, added_date=entry.created_at)
