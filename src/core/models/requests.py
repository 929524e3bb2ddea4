"""Inbound parameter models, validated at the handler layer."""

from typing import Literal

from pydantic import BaseModel, Field

LOCATION_CODE_PATTERN = "^[A-Z]{3}$"


class TripSearchQuery(BaseModel):
    origin: str = Field(..., pattern=LOCATION_CODE_PATTERN)
    destination: str = Field(..., pattern=LOCATION_CODE_PATTERN)
    sort_by: Literal["fastest", "cheapest"] | None = None
    sort_direction: Literal["asc", "desc"] | None = None


class TripIdPayload(BaseModel):
    id: str = Field(..., pattern="^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$")


class ListQuery(BaseModel):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)
    sort: Literal["asc", "desc"] | None = None
    sorted_by: Literal["newest", "oldest", "fastest", "cheapest"] | None = None


class ExportQuery(BaseModel):
    type: Literal["csv", "json"] = "csv"


class TripRef(BaseModel):
    id: str = Field(..., min_length=1)
